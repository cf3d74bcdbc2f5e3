"""
Cultural Adaptation Engine

Renders a template in the vocabulary of the user's tradition:
  1. Resolve the tradition's CulturalProfile (unknown -> secular)
  2. Substitute {deity}, {protectionSymbol}, {lightColor}, {prayer},
     {culturalReference}
  3. Adjust tone wording for the declared emotional state
  4. Prepend a tradition-specific opening for the content type

The profile table belongs to the engine instance, not the module.
Registering a custom profile is explicit and lock-guarded. Random
reference selection draws from an injected random.Random so tests
can seed it.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from typing import Mapping, Optional

from sanctum.config import settings
from sanctum.logging import get_logger

logger = get_logger("cultural")

DEFAULT_TRADITION = "secular"


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class CulturalProfile:
    """Tradition-specific vocabulary used for substitution."""
    tradition: str
    deity: str
    protection_symbol: str
    light_color: str
    prayer: str
    color_scheme: str
    cultural_references: tuple[str, ...] = field(default_factory=tuple)
    language: str = "en"

    def to_dict(self) -> dict:
        return {
            "tradition": self.tradition,
            "deity": self.deity,
            "protection_symbol": self.protection_symbol,
            "light_color": self.light_color,
            "prayer": self.prayer,
            "color_scheme": self.color_scheme,
            "cultural_references": list(self.cultural_references),
            "language": self.language,
        }


@dataclass(frozen=True)
class AdaptationContext:
    """Who the content is for and what state they are in."""
    tradition: str = DEFAULT_TRADITION
    emotional_state: str = "calm"      # "calm" | "distressed" | "crisis"
    content_type: str = "general"      # "protection" | "grounding" | "healing" | "general"


# ============================================================
# STATIC TABLES
# ============================================================

CULTURAL_PROFILES: dict[str, CulturalProfile] = {
    "christian": CulturalProfile(
        tradition="Christian",
        deity="Holy Spirit",
        protection_symbol="cross",
        light_color="white",
        prayer="Blood of Jesus protect me",
        color_scheme="from-blue-900 to-white",
        cultural_references=("Archangel Michael", "Divine Light", "Sacred Heart"),
    ),
    "buddhist": CulturalProfile(
        tradition="Buddhist",
        deity="White Tara",
        protection_symbol="lotus",
        light_color="golden",
        prayer="Om Tare Tuttare Ture Svaha",
        color_scheme="from-orange-900 to-yellow-500",
        cultural_references=("Buddha", "Dharma", "Sangha"),
    ),
    "hindu": CulturalProfile(
        tradition="Hindu",
        deity="Hanuman",
        protection_symbol="om",
        light_color="saffron",
        prayer="Jai Hanuman, remove all obstacles",
        color_scheme="from-red-900 to-orange-500",
        cultural_references=("Ganesha", "Devi", "Shiva"),
    ),
    "islamic": CulturalProfile(
        tradition="Islamic",
        deity="Allah",
        protection_symbol="crescent",
        light_color="green",
        prayer="Bismillah, I seek refuge in Allah",
        color_scheme="from-green-900 to-emerald-500",
        cultural_references=("Rahman", "Rahim", "Barakallahu"),
    ),
    "indigenous": CulturalProfile(
        tradition="Indigenous",
        deity="Ancestor Spirits",
        protection_symbol="sacred circle",
        light_color="earth tones",
        prayer="Grandfathers, shield me with wisdom",
        color_scheme="from-green-900 to-amber-600",
        cultural_references=("Mother Earth", "Four Directions", "Spirit Animals"),
    ),
    "secular": CulturalProfile(
        tradition="Secular",
        deity="Inner Strength",
        protection_symbol="shield",
        light_color="silver",
        prayer="My resilience is unbreakable",
        color_scheme="from-gray-900 to-silver",
        cultural_references=("Inner Light", "Natural Energy", "Human Resilience"),
    ),
}

# Applied in order; exactly one state's list is used
TONE_REPLACEMENTS: dict[str, tuple[tuple[str, str], ...]] = {
    "crisis": (("gently", "immediately"), ("softly", "firmly")),
    "distressed": (("quickly", "calmly"), ("rush", "breathe")),
    "calm": (("urgent", "peaceful"), ("immediate", "gentle")),
}

# content type -> lowercase tradition name -> opening phrase
CONTEXTUAL_PHRASES: dict[str, dict[str, str]] = {
    "protection": {
        "christian": "In the name of Jesus,",
        "buddhist": "With loving-kindness,",
        "hindu": "Om Gam Ganapataye Namaha,",
        "islamic": "Bismillah,",
        "indigenous": "With respect to the ancestors,",
        "secular": "Drawing upon your inner strength,",
    },
    "grounding": {
        "christian": "Feel God's presence,",
        "buddhist": "Return to your breath,",
        "hindu": "Connect with Prithvi (Earth),",
        "islamic": "Remember Allah's creation,",
        "indigenous": "Feel Mother Earth beneath you,",
        "secular": "Focus on your physical body,",
    },
}

# content type -> index into cultural_references
_REFERENCE_INDEX = {"protection": 0, "healing": 1}


# ============================================================
# THE ENGINE
# ============================================================

class CulturalAdaptationEngine:
    """
    Adapts templates to a user's tradition and emotional state.

    Args:
        profiles: Initial profile table (copied). Defaults to the
            built-in CULTURAL_PROFILES.
        default_tradition: Profile used when a lookup misses. Must
            exist in the table.
        rng: Random source for reference selection.
    """

    def __init__(
        self,
        profiles: Optional[Mapping[str, CulturalProfile]] = None,
        default_tradition: str = DEFAULT_TRADITION,
        rng: Optional[random.Random] = None,
    ):
        self._profiles: dict[str, CulturalProfile] = dict(
            CULTURAL_PROFILES if profiles is None else profiles
        )
        if default_tradition not in self._profiles:
            raise ValueError(f"Default tradition {default_tradition!r} has no profile")
        self._default_tradition = default_tradition
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    @property
    def default_profile(self) -> CulturalProfile:
        return self._profiles[self._default_tradition]

    def get_profile(self, tradition: str) -> Optional[CulturalProfile]:
        """Exact lookup, no fallback."""
        return self._profiles.get(tradition)

    def resolve_profile(self, tradition: Optional[str]) -> tuple[CulturalProfile, bool]:
        """Return (profile, fallback_used)."""
        profile = self._profiles.get(tradition) if tradition else None
        if profile is None:
            return self.default_profile, True
        return profile, False

    def traditions(self) -> list[str]:
        return list(self._profiles)

    def add_custom_profile(self, tradition_id: str, profile: CulturalProfile) -> None:
        """Register (or replace) a profile for the lifetime of this engine."""
        if not tradition_id or not tradition_id.strip():
            raise ValueError("tradition_id must be a non-empty string")
        with self._lock:
            # Readers always see a complete table
            profiles = dict(self._profiles)
            profiles[tradition_id] = profile
            self._profiles = profiles
        logger.info("Custom cultural profile registered", extra={"tradition": tradition_id})

    def adapt_content(self, template: str, context: AdaptationContext) -> str:
        """
        Render template for the context's tradition.

        Unknown traditions use the default profile. Never raises for
        any tradition, emotional state, or content type string.
        """
        profile, fallback = self.resolve_profile(context.tradition)
        if fallback:
            logger.debug(
                "Tradition not registered, using default profile",
                extra={"tradition": context.tradition, "fallback": True},
            )

        content = (
            template
            .replace("{deity}", profile.deity)
            .replace("{protectionSymbol}", profile.protection_symbol)
            .replace("{lightColor}", profile.light_color)
            .replace("{prayer}", profile.prayer)
        )
        if "{culturalReference}" in content:
            content = content.replace(
                "{culturalReference}",
                self.select_cultural_reference(profile, context.content_type),
            )

        content = self.adapt_tone(content, context.emotional_state)
        return self.add_cultural_context(content, profile, context.content_type)

    def select_cultural_reference(self, profile: CulturalProfile, content_type: str) -> str:
        """
        Protection -> first reference, healing -> second, else random.

        A missing or empty reference renders as the profile's deity.
        """
        references = profile.cultural_references
        index = _REFERENCE_INDEX.get(content_type)
        if index is not None:
            reference = references[index] if index < len(references) else ""
            return reference or profile.deity
        if not references:
            return profile.deity
        return self._rng.choice(references) or profile.deity

    @staticmethod
    def adapt_tone(content: str, emotional_state: str) -> str:
        for old, new in TONE_REPLACEMENTS.get(emotional_state, ()):
            content = content.replace(old, new)
        return content

    @staticmethod
    def add_cultural_context(content: str, profile: CulturalProfile, content_type: str) -> str:
        phrase = CONTEXTUAL_PHRASES.get(content_type, {}).get(profile.tradition.lower())
        return f"{phrase} {content}" if phrase else content


def build_adapter(seed: Optional[int] = None, default_tradition: str = DEFAULT_TRADITION) -> CulturalAdaptationEngine:
    """Create an engine with the built-in profiles and an optional seed."""
    return CulturalAdaptationEngine(
        default_tradition=default_tradition,
        rng=random.Random(seed),
    )


# ============================================================
# SHARED INSTANCE (configured from settings at import)
# ============================================================

cultural_adapter = build_adapter(
    seed=settings.RANDOM_SEED,
    default_tradition=settings.DEFAULT_TRADITION,
)
