"""
API Schemas — Request and Response Models

Pydantic models for the Sanctum API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from sanctum.config import settings


# ============================================================
# DETECT
# ============================================================

class DetectRequest(BaseModel):
    """POST /detect and /detect/{detector} request body."""
    text: str = Field("", max_length=settings.MAX_TEXT_LENGTH,
                      description="Free text to scan. Inputs under 3 characters never match.")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "I feel drained and exhausted"},
    ]}}


class DetectionResultModel(BaseModel):
    severity: int
    type: str
    indicators: list[str]


class DetectionSummary(BaseModel):
    severity_name: str
    severity_description: str = ""
    type_description: str
    protocols: list[str] = []
    actions: list[str]
    top_indicators: list[str]


class DetectResponse(BaseModel):
    """POST /detect/{detector} response body."""
    detector: str
    detected: bool
    result: Optional[DetectionResultModel] = None
    summary: Optional[DetectionSummary] = None


class DetectAllResponse(BaseModel):
    """POST /detect response body."""
    detected: bool
    max_severity: int
    results: list[DetectResponse]


class DetectorTier(BaseModel):
    name: str
    rank: int
    label: str
    keywords: list[str]


class DetectorInfo(BaseModel):
    name: str
    max_severity: int
    tiers: list[DetectorTier]
    types: list[str]


# ============================================================
# CULTURAL ADAPTATION
# ============================================================

class AdaptRequest(BaseModel):
    """POST /adapt request body."""
    template: str = Field(..., min_length=1, max_length=settings.MAX_TEXT_LENGTH)
    tradition: str = Field(settings.DEFAULT_TRADITION,
                           description="Tradition id; unknown ids use the default profile.")
    emotional_state: str = Field("calm", description="calm | distressed | crisis")
    content_type: str = Field("general", description="protection | grounding | healing | general")

    model_config = {"json_schema_extra": {"examples": [
        {"template": "{deity} protect me", "tradition": "buddhist",
         "emotional_state": "calm", "content_type": "protection"},
    ]}}


class ProfileModel(BaseModel):
    tradition: str = Field(..., min_length=1)
    deity: str
    protection_symbol: str
    light_color: str
    prayer: str
    color_scheme: str = ""
    cultural_references: list[str] = []
    language: str = "en"


class ProfileRegisterRequest(BaseModel):
    """POST /profiles request body."""
    tradition_id: str = Field(..., min_length=1, max_length=64, pattern=r"^[a-z0-9_\-]+$")
    profile: ProfileModel


class ValidationModel(BaseModel):
    is_valid: bool
    issues: list[str]
    suggestions: list[str]
    cultural_warnings: list[str]


class AdaptResponse(BaseModel):
    """POST /adapt response body."""
    content: str
    tradition: str
    profile_used: str
    fallback: bool
    validation: ValidationModel


# ============================================================
# TERMINOLOGY
# ============================================================

class ValidateRequest(BaseModel):
    """POST /validate request body."""
    content: str = Field(..., min_length=1, max_length=settings.MAX_TEXT_LENGTH)
    tradition: Optional[str] = None


# ============================================================
# RITUALS
# ============================================================

class RitualContextRequest(BaseModel):
    """POST /rituals/suggest request body. Omitted time fields use the server clock."""
    time_of_day: Optional[str] = Field(None, pattern="^(morning|afternoon|evening|night)$")
    day_of_week: Optional[str] = None
    is_working_hours: Optional[bool] = None
    weather: Optional[str] = None
    location: Optional[str] = None
    limit: int = Field(3, ge=1, le=10)


class RitualSuggestionModel(BaseModel):
    ritual_id: str
    name: str
    confidence: float
    reason: str


class RitualSuggestResponse(BaseModel):
    context: dict
    suggestions: list[RitualSuggestionModel]


# ============================================================
# TIERS
# ============================================================

class TierAccessRequest(BaseModel):
    """POST /tiers/access request body."""
    user_tier: Optional[str] = None
    required_tier: Optional[str] = None
    feature_id: Optional[str] = None
    access_level: Optional[str] = Field(None, pattern="^(open|initiated|sacred)$")
    demo_mode: bool = False


class TierAccessResponse(BaseModel):
    user_tier: Optional[str]
    access_type: str
    tier_access: Optional[bool] = None
    feature_access: Optional[bool] = None
    tradition_access: Optional[bool] = None


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    engine_version: str
    detectors: list[str]
    traditions: list[str]
