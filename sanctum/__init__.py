"""
Sanctum — Spiritual Wellness Text Engines

Deterministic, rule-based engines behind the journaling and chat UI.

Public API:
  - KeywordDetector:           Severity-scored keyword classifier (one engine, many tables)
  - entity_detector:           Entity attachment detector
  - marriage_detector:         Spiritual marriage detector
  - emergency_detector:        Four-level spiritual emergency detector
  - crisis_detector:           Three-level self-harm and crisis detector
  - detect:                    Run a registered detector by name
  - CulturalAdaptationEngine:  Tradition-aware template rendering
  - cultural_adapter:          Shared adaptation engine
  - terminology_validator:     Cultural sensitivity checks for content
  - ritual_engine:             Environment-aware ritual suggestions
  - WISDOM_TIERS:              Subscription tiers and access checks

Usage:
    from sanctum import detect, cultural_adapter, AdaptationContext
    result = detect("I feel drained and exhausted", detector="entity")
    text = cultural_adapter.adapt_content(
        "{deity} protect me",
        AdaptationContext(tradition="buddhist", content_type="protection"),
    )
"""

__version__ = "1.0.0"

from sanctum.detector import (
    KeywordDetector,
    DetectionResult,
    SeverityTier,
    DETECTORS,
    entity_detector,
    marriage_detector,
    emergency_detector,
    crisis_detector,
    get_detector,
    detect,
)
from sanctum.cultural import (
    CulturalAdaptationEngine,
    CulturalProfile,
    AdaptationContext,
    CULTURAL_PROFILES,
    cultural_adapter,
    build_adapter,
)
from sanctum.terminology import (
    SpiritualTerminologyValidator,
    SpiritualTerm,
    ValidationResult,
    terminology_validator,
)
from sanctum.rituals import (
    RitualSuggestionEngine,
    EnvironmentContext,
    RitualSuggestion,
    context_from_datetime,
    ritual_engine,
)
from sanctum.tiers import (
    WisdomTier,
    WISDOM_TIERS,
    get_tier,
    has_tier_access,
    has_feature_access,
    can_access_tradition,
)

__all__ = [
    "KeywordDetector",
    "DetectionResult",
    "SeverityTier",
    "DETECTORS",
    "entity_detector",
    "marriage_detector",
    "emergency_detector",
    "crisis_detector",
    "get_detector",
    "detect",
    "CulturalAdaptationEngine",
    "CulturalProfile",
    "AdaptationContext",
    "CULTURAL_PROFILES",
    "cultural_adapter",
    "build_adapter",
    "SpiritualTerminologyValidator",
    "SpiritualTerm",
    "ValidationResult",
    "terminology_validator",
    "RitualSuggestionEngine",
    "EnvironmentContext",
    "RitualSuggestion",
    "context_from_datetime",
    "ritual_engine",
    "WisdomTier",
    "WISDOM_TIERS",
    "get_tier",
    "has_tier_access",
    "has_feature_access",
    "can_access_tradition",
]
