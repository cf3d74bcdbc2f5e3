"""
Sanctum API — Main Application

POST /detect/{detector} — Run one keyword detector (entity, marriage, emergency, crisis)
POST /detect            — Run every detector over the same text
GET  /detectors         — List detectors with their tiers and types
POST /adapt             — Validate and culturally adapt a template
GET  /profiles          — List cultural profiles
GET  /profiles/{id}     — One cultural profile
POST /profiles          — Register a custom cultural profile
POST /validate          — Terminology validation only
POST /rituals/suggest   — Environment-aware ritual suggestions
GET  /tiers             — Wisdom tiers
GET  /tiers/{id}        — One wisdom tier
POST /tiers/access      — Tier, feature, and tradition access checks
GET  /health            — Health check
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from sanctum import __version__
from sanctum.config import settings
from sanctum.cultural import AdaptationContext, CulturalProfile, cultural_adapter
from sanctum.detector import DETECTORS, KeywordDetector
from sanctum.logging import setup_logging, get_logger
from sanctum.rituals import EnvironmentContext, context_from_datetime, ritual_engine
from sanctum.terminology import terminology_validator
from sanctum.tiers import (
    WISDOM_TIERS,
    access_type,
    can_access_tradition,
    get_tier,
    has_feature_access,
    has_tier_access,
)
from sanctum.schemas.api import (
    AdaptRequest,
    AdaptResponse,
    DetectAllResponse,
    DetectRequest,
    DetectResponse,
    DetectorInfo,
    HealthResponse,
    ProfileRegisterRequest,
    RitualContextRequest,
    RitualSuggestResponse,
    TierAccessRequest,
    TierAccessResponse,
    ValidateRequest,
    ValidationModel,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Sanctum API starting", extra={"detector": ",".join(DETECTORS)})
    yield
    logger.info("Sanctum API shutting down")


app = FastAPI(
    title="Sanctum API",
    description="Keyword severity detection and cultural adaptation for spiritual wellness content",
    version=f"{__version__} (engine {settings.ENGINE_VERSION})",
    lifespan=lifespan,
)

# CORS: set SANCTUM_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions and return a structured error without internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "error": str(exc),
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error."},
    )


# ============================================================
# HELPERS
# ============================================================

def _get_detector(name: str) -> KeywordDetector:
    detector = DETECTORS.get(name)
    if detector is None:
        raise HTTPException(404, f"Unknown detector: {name}")
    return detector


def _run_detector(detector: KeywordDetector, text: str) -> dict:
    result = detector.detect(text)
    if result is None:
        return {"detector": detector.name, "detected": False, "result": None, "summary": None}

    logger.info(
        f"Detection: {detector.name} severity={result.severity}",
        extra={
            "detector": detector.name,
            "severity": result.severity,
            "type": result.type or None,
            "indicators_count": len(result.indicators),
        },
    )
    return {
        "detector": detector.name,
        "detected": True,
        "result": result.to_dict(),
        "summary": detector.describe(result),
    }


# ============================================================
# ROUTES: DETECTION
# ============================================================

@app.get("/detectors", response_model=list[DetectorInfo])
async def list_detectors():
    """Expose the detection surface of every registered detector."""
    return [
        {
            "name": d.name,
            "max_severity": d.max_severity,
            "tiers": d.get_tiers(),
            "types": d.get_types(),
        }
        for d in DETECTORS.values()
    ]


@app.post("/detect/{detector}", response_model=DetectResponse)
async def detect_one(detector: str, request: DetectRequest):
    """Run a single detector. No match is a 200 with detected=false."""
    return _run_detector(_get_detector(detector), request.text)


@app.post("/detect", response_model=DetectAllResponse)
async def detect_all(request: DetectRequest):
    """Run every detector over the same text."""
    results = [_run_detector(d, request.text) for d in DETECTORS.values()]
    severities = [r["result"]["severity"] for r in results if r["detected"]]
    return {
        "detected": bool(severities),
        "max_severity": max(severities, default=0),
        "results": results,
    }


# ============================================================
# ROUTES: CULTURAL ADAPTATION
# ============================================================

@app.post("/adapt", response_model=AdaptResponse)
async def adapt(request: AdaptRequest):
    """Validate terminology, then render the template for the user's tradition."""
    validation = terminology_validator.validate_content(request.template, request.tradition)
    if not validation.is_valid:
        logger.warning(
            "Cultural validation issues",
            extra={"tradition": request.tradition, "error": "; ".join(validation.issues)},
        )

    context = AdaptationContext(
        tradition=request.tradition,
        emotional_state=request.emotional_state,
        content_type=request.content_type,
    )
    profile, fallback = cultural_adapter.resolve_profile(request.tradition)
    content = cultural_adapter.adapt_content(request.template, context)

    logger.info(
        "Content adapted",
        extra={
            "tradition": request.tradition,
            "fallback": fallback,
            "content_type": request.content_type,
        },
    )
    return {
        "content": content,
        "tradition": request.tradition,
        "profile_used": profile.tradition,
        "fallback": fallback,
        "validation": validation.to_dict(),
    }


@app.get("/profiles")
async def list_profiles():
    return {
        "default": cultural_adapter.default_profile.tradition,
        "profiles": {
            tradition_id: cultural_adapter.get_profile(tradition_id).to_dict()
            for tradition_id in cultural_adapter.traditions()
        },
    }


@app.get("/profiles/{tradition_id}")
async def get_profile(tradition_id: str):
    profile = cultural_adapter.get_profile(tradition_id)
    if profile is None:
        raise HTTPException(404, f"Unknown tradition: {tradition_id}")
    return profile.to_dict()


@app.post("/profiles", status_code=201)
async def register_profile(request: ProfileRegisterRequest):
    """Register or replace a custom cultural profile for this process."""
    data = request.profile
    profile = CulturalProfile(
        tradition=data.tradition,
        deity=data.deity,
        protection_symbol=data.protection_symbol,
        light_color=data.light_color,
        prayer=data.prayer,
        color_scheme=data.color_scheme,
        cultural_references=tuple(data.cultural_references),
        language=data.language,
    )
    cultural_adapter.add_custom_profile(request.tradition_id, profile)
    return {"tradition_id": request.tradition_id, "profile": profile.to_dict()}


@app.post("/validate", response_model=ValidationModel)
async def validate(request: ValidateRequest):
    return terminology_validator.validate_content(request.content, request.tradition).to_dict()


# ============================================================
# ROUTES: RITUALS
# ============================================================

@app.post("/rituals/suggest", response_model=RitualSuggestResponse)
async def suggest_rituals(request: RitualContextRequest):
    """Suggest rituals. Fields left out are filled from the server clock."""
    base = context_from_datetime(datetime.now(), request.weather, request.location)
    context = EnvironmentContext(
        time_of_day=request.time_of_day or base.time_of_day,
        day_of_week=(request.day_of_week or base.day_of_week).lower(),
        is_working_hours=(
            base.is_working_hours if request.is_working_hours is None
            else request.is_working_hours
        ),
        weather=base.weather,
        location=base.location,
    )
    suggestions = ritual_engine.suggest(context, limit=request.limit)
    return {
        "context": {
            "time_of_day": context.time_of_day,
            "day_of_week": context.day_of_week,
            "is_working_hours": context.is_working_hours,
            "weather": context.weather,
            "location": context.location,
        },
        "suggestions": [s.to_dict() for s in suggestions],
    }


# ============================================================
# ROUTES: TIERS
# ============================================================

@app.get("/tiers")
async def list_tiers():
    return {"tiers": [t.to_dict() for t in WISDOM_TIERS]}


@app.get("/tiers/{tier_id}")
async def get_tier_detail(tier_id: str):
    tier = get_tier(tier_id)
    if tier is None:
        raise HTTPException(404, f"Unknown tier: {tier_id}")
    return tier.to_dict()


@app.post("/tiers/access", response_model=TierAccessResponse)
async def check_access(request: TierAccessRequest):
    """Answer whichever access questions the request asks."""
    response = {
        "user_tier": request.user_tier,
        "access_type": access_type(request.user_tier, request.demo_mode),
    }
    if request.required_tier is not None:
        try:
            response["tier_access"] = has_tier_access(request.user_tier, request.required_tier)
        except ValueError as e:
            raise HTTPException(422, str(e))
    if request.feature_id is not None:
        response["feature_access"] = has_feature_access(
            request.user_tier, request.feature_id, demo_mode=request.demo_mode,
        )
    if request.access_level is not None:
        response["tradition_access"] = can_access_tradition(
            request.user_tier, request.access_level,
        )
    return response


# ============================================================
# ROUTES: META
# ============================================================

@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "engine_version": settings.ENGINE_VERSION,
        "detectors": list(DETECTORS),
        "traditions": cultural_adapter.traditions(),
    }


@app.get("/", include_in_schema=False)
async def root():
    return JSONResponse({"message": "Sanctum API", "docs": "/docs"})


# --- Security + Version Headers Middleware ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Add security and version headers to all responses."""
    response = await call_next(request)
    response.headers["X-Sanctum-Version"] = __version__
    response.headers["X-Engine-Version"] = settings.ENGINE_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# --- Body Size Limit Middleware ---
_MAX_BODY_BYTES = 1_048_576  # 1 MB


@app.middleware("http")
async def enforce_body_size_limit(request: Request, call_next):
    """Reject requests exceeding 1MB."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > _MAX_BODY_BYTES:
                return JSONResponse(
                    status_code=413,
                    content={"detail": "Request body too large."},
                )
        except ValueError:
            pass  # Malformed content-length; let the framework handle it

    return await call_next(request)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} -> {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
