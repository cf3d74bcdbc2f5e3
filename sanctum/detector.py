"""
Detector — Severity-Scored Keyword Classification

One engine, many vocabularies. A KeywordDetector is built from a
keyword table (tier -> phrases), tier ranks, and an ordered type table.
It scans lowercased input for every phrase, records an indicator per
hit, keeps the highest tier rank seen, and classifies the input by the
first type whose phrases appear.

The engine is deterministic, holds no mutable state, and never raises
for user input. "Nothing found" is returned as None.

Instances:
  - entity_detector:    entity attachment (mild / moderate / severe)
  - marriage_detector:  spiritual marriage (mild / moderate / severe)
  - emergency_detector: spiritual emergency (distress .. emergency, 1-4)
  - crisis_detector:    self-harm and crisis language (distress .. critical, 1-3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from sanctum import keywords
from sanctum.keywords import SeverityLevel
from sanctum.logging import get_logger

logger = get_logger("detector")

MIN_INPUT_LENGTH = 3
TOP_INDICATORS = 3


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class SeverityTier:
    """A named tier of phrases sharing one rank."""
    name: str
    rank: int
    phrases: tuple[str, ...]
    label: str = ""

    @property
    def indicator_label(self) -> str:
        return self.label or self.name.upper()


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of a scan that found at least one severity phrase."""
    severity: int
    type: str
    indicators: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "severity": self.severity,
            "type": self.type,
            "indicators": list(self.indicators),
        }


# ============================================================
# THE ENGINE
# ============================================================

class KeywordDetector:
    """
    Generic severity detector.

    Args:
        name: Registry name, used in logs and the API.
        keyword_table: tier name -> ordered phrases.
        ranks: tier name -> integer rank (higher is more severe).
        type_table: type id -> phrases. Iteration order is the
            classification priority.
        labels: Optional tier name -> indicator label override.
        levels: Display metadata per rank.
        type_descriptions: Display text per type id.
        actions: action id -> minimum severity that unlocks it.
    """

    def __init__(
        self,
        name: str,
        keyword_table: Mapping[str, tuple[str, ...]],
        ranks: Mapping[str, int],
        type_table: Mapping[str, tuple[str, ...]],
        labels: Optional[Mapping[str, str]] = None,
        levels: tuple[SeverityLevel, ...] = (),
        type_descriptions: Optional[Mapping[str, str]] = None,
        actions: Optional[Mapping[str, int]] = None,
    ):
        missing = set(keyword_table) - set(ranks)
        if missing:
            raise ValueError(f"No rank declared for tier(s): {sorted(missing)}")

        labels = labels or {}
        tiers = [
            SeverityTier(
                name=tier,
                rank=ranks[tier],
                phrases=tuple(p.lower() for p in phrases),
                label=labels.get(tier, ""),
            )
            for tier, phrases in keyword_table.items()
        ]
        # Most severe first; indicators are reported in scan order
        self.name = name
        self.tiers: tuple[SeverityTier, ...] = tuple(
            sorted(tiers, key=lambda t: t.rank, reverse=True)
        )
        self.types: tuple[tuple[str, tuple[str, ...]], ...] = tuple(
            (type_id, tuple(p.lower() for p in phrases))
            for type_id, phrases in type_table.items()
        )
        self._levels = {level.rank: level for level in levels}
        self._type_descriptions = dict(type_descriptions or {})
        self._actions = dict(actions or {})

    @property
    def max_severity(self) -> int:
        return max((t.rank for t in self.tiers), default=0)

    def detect(self, text: Optional[str]) -> Optional[DetectionResult]:
        """
        Scan text for severity phrases and classify it.

        Returns None when the text is missing, shorter than three
        characters, or contains no severity phrase. A type match on
        its own is not reported.
        """
        if not text or len(text) < MIN_INPUT_LENGTH:
            return None

        text_lower = text.lower()
        indicators: list[str] = []
        severity = 0

        for tier in self.tiers:
            for phrase in tier.phrases:
                if phrase in text_lower:
                    indicators.append(f'{tier.indicator_label}: "{phrase}"')
                    severity = max(severity, tier.rank)

        if severity == 0:
            return None

        result = DetectionResult(
            severity=severity,
            type=self.classify(text_lower),
            indicators=tuple(indicators),
        )
        logger.debug(
            "Detection",
            extra={
                "detector": self.name,
                "severity": result.severity,
                "type": result.type,
                "indicators_count": len(indicators),
            },
        )
        return result

    def classify(self, text: str) -> str:
        """Return the first type (in table order) with a phrase in text, or ''."""
        text_lower = text.lower()
        for type_id, phrases in self.types:
            if any(phrase in text_lower for phrase in phrases):
                return type_id
        return ""

    def actions_for(self, severity: int) -> list[str]:
        """Actions unlocked at the given severity, in declaration order."""
        return [
            action for action, min_severity in self._actions.items()
            if severity >= min_severity
        ]

    def describe(self, result: Optional[DetectionResult]) -> Optional[dict]:
        """
        Presentation summary for a detection: level name, type text,
        unlocked actions, protocols, and the top three indicators.
        """
        if result is None:
            return None

        level = self._levels.get(result.severity)
        return {
            "severity_name": level.name if level else "Unknown",
            "severity_description": level.description if level else "",
            "type_description": self._type_descriptions.get(
                result.type, "General influence detected",
            ),
            "protocols": list(level.protocols) if level else [],
            "actions": self.actions_for(result.severity),
            "top_indicators": list(result.indicators[:TOP_INDICATORS]),
        }

    def get_tiers(self) -> list[dict]:
        """Expose the detection surface (used by GET /detectors)."""
        return [
            {
                "name": t.name,
                "rank": t.rank,
                "label": t.indicator_label,
                "keywords": list(t.phrases),
            }
            for t in self.tiers
        ]

    def get_types(self) -> list[str]:
        return [type_id for type_id, _ in self.types]


# ============================================================
# INSTANCES
# ============================================================

entity_detector = KeywordDetector(
    name="entity",
    keyword_table=keywords.ENTITY_KEYWORDS,
    ranks=keywords.STANDARD_RANKS,
    type_table=keywords.ENTITY_TYPES,
    levels=keywords.ENTITY_LEVELS,
    type_descriptions=keywords.ENTITY_TYPE_DESCRIPTIONS,
    actions=keywords.ENTITY_ACTIONS,
)

marriage_detector = KeywordDetector(
    name="marriage",
    keyword_table=keywords.MARRIAGE_KEYWORDS,
    ranks=keywords.STANDARD_RANKS,
    type_table=keywords.MARRIAGE_TYPES,
    levels=keywords.MARRIAGE_LEVELS,
    type_descriptions=keywords.MARRIAGE_TYPE_DESCRIPTIONS,
    actions=keywords.MARRIAGE_ACTIONS,
)

emergency_detector = KeywordDetector(
    name="emergency",
    keyword_table=keywords.EMERGENCY_KEYWORDS,
    ranks=keywords.EMERGENCY_RANKS,
    type_table=keywords.EMERGENCY_TYPES,
    labels=keywords.EMERGENCY_LABELS,
    levels=keywords.EMERGENCY_LEVELS,
    type_descriptions=keywords.EMERGENCY_TYPE_DESCRIPTIONS,
    actions=keywords.EMERGENCY_ACTIONS,
)

crisis_detector = KeywordDetector(
    name="crisis",
    keyword_table=keywords.CRISIS_KEYWORDS,
    ranks=keywords.CRISIS_RANKS,
    type_table={},
    labels=keywords.CRISIS_LABELS,
    levels=keywords.CRISIS_LEVELS,
    actions=keywords.CRISIS_ACTIONS,
)

DETECTORS: dict[str, KeywordDetector] = {
    d.name: d
    for d in (entity_detector, marriage_detector, emergency_detector, crisis_detector)
}


def get_detector(name: str) -> KeywordDetector:
    """Look up a registered detector by name."""
    try:
        return DETECTORS[name]
    except KeyError:
        raise KeyError(
            f"Unknown detector: {name!r} (available: {', '.join(DETECTORS)})"
        ) from None


def detect(text: Optional[str], detector: str = "entity") -> Optional[DetectionResult]:
    """Convenience wrapper: run a registered detector over text."""
    return get_detector(detector).detect(text)
