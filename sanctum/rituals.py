"""
Environmental Ritual Suggestions

Rule-based matching of the user's surroundings (time of day, weather,
weekday, working hours) against a static rule table. Each matching rule
contributes its rituals at the rule's confidence; the best-scored unique
rituals are returned.

Weather and location are inputs. This module performs no I/O.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Optional

WEEKEND = ("saturday", "sunday")
DEFAULT_LIMIT = 3


@dataclass(frozen=True)
class EnvironmentContext:
    time_of_day: str                 # "morning" | "afternoon" | "evening" | "night"
    day_of_week: str                 # lowercase English weekday
    is_working_hours: bool
    weather: Optional[str] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class RitualRule:
    conditions: dict[str, Any]
    ritual_ids: tuple[str, ...]
    confidence: float
    reason: str


@dataclass(frozen=True)
class RitualSuggestion:
    ritual_id: str
    name: str
    confidence: float
    reason: str

    def to_dict(self) -> dict:
        return asdict(self)


RITUAL_CATALOG: dict[str, str] = {
    "1": "Sunrise Gratitude",
    "2": "Tea Ceremony",
    "3": "Work-to-Home Threshold",
    "4": "Full Moon Release",
    "5": "Mirror Dialogue",
    "6": "3-Minute Breath Altar",
}

CONTEXT_RULES: tuple[RitualRule, ...] = (
    RitualRule(
        conditions={"time_of_day": "morning", "weather": "clear"},
        ritual_ids=("1", "2"),
        confidence=0.9,
        reason="Perfect morning conditions for mindful practices",
    ),
    RitualRule(
        conditions={"time_of_day": "afternoon", "is_working_hours": True},
        ritual_ids=("6",),
        confidence=0.8,
        reason="Quick centering during work hours",
    ),
    RitualRule(
        conditions={"time_of_day": "evening", "day_of_week": "friday"},
        ritual_ids=("3",),
        confidence=0.85,
        reason="Transition from work week to weekend",
    ),
    RitualRule(
        conditions={"weather": "rainy"},
        ritual_ids=("2", "5"),
        confidence=0.7,
        reason="Indoor practices perfect for rainy weather",
    ),
    RitualRule(
        conditions={"time_of_day": "night"},
        ritual_ids=("4",),
        confidence=0.6,
        reason="Evening energy perfect for release work",
    ),
)


def time_of_day(hour: int) -> str:
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 21:
        return "evening"
    if hour >= 21 or hour < 6:
        return "night"
    return "morning"


def context_from_datetime(
    now: datetime,
    weather: Optional[str] = None,
    location: Optional[str] = None,
) -> EnvironmentContext:
    """Derive an EnvironmentContext from a wall-clock time."""
    day = now.strftime("%A").lower()
    return EnvironmentContext(
        time_of_day=time_of_day(now.hour),
        day_of_week=day,
        is_working_hours=9 <= now.hour <= 17 and day not in WEEKEND,
        weather=weather.lower() if weather else None,
        location=location,
    )


class RitualSuggestionEngine:
    """Matches an EnvironmentContext against a rule table."""

    def __init__(
        self,
        rules: tuple[RitualRule, ...] = CONTEXT_RULES,
        catalog: Optional[dict[str, str]] = None,
    ):
        self._rules = rules
        self._catalog = dict(RITUAL_CATALOG if catalog is None else catalog)

    @staticmethod
    def _matches(rule: RitualRule, context: EnvironmentContext) -> bool:
        return all(
            getattr(context, key, None) == value
            for key, value in rule.conditions.items()
        )

    def suggest(self, context: EnvironmentContext, limit: int = DEFAULT_LIMIT) -> list[RitualSuggestion]:
        """Top `limit` unique rituals, highest confidence first."""
        candidates: list[RitualSuggestion] = []
        for rule in self._rules:
            if not self._matches(rule, context):
                continue
            for ritual_id in rule.ritual_ids:
                candidates.append(RitualSuggestion(
                    ritual_id=ritual_id,
                    name=self._catalog.get(ritual_id, ritual_id),
                    confidence=rule.confidence,
                    reason=rule.reason,
                ))

        # sorted() is stable: ties keep rule order
        candidates = sorted(candidates, key=lambda s: s.confidence, reverse=True)

        seen: set[str] = set()
        unique: list[RitualSuggestion] = []
        for suggestion in candidates:
            if suggestion.ritual_id in seen:
                continue
            seen.add(suggestion.ritual_id)
            unique.append(suggestion)

        return unique[:max(limit, 0)]


ritual_engine = RitualSuggestionEngine()
