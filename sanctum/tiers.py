"""
Wisdom Tiers — Subscription Levels and Feature Gating

Four elemental tiers, ordered earth < water < fire < ether. Access
checks are pure functions of the user's tier id; billing state lives
with the payment provider and is out of scope here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

ACCESS_LEVELS = ("open", "initiated", "sacred")


@dataclass(frozen=True)
class WisdomTier:
    id: str
    name: str
    element: str
    description: str
    monthly_price: int
    yearly_price: int
    features: tuple[str, ...] = field(default_factory=tuple)
    restrictions: tuple[str, ...] = field(default_factory=tuple)
    cultural_access: tuple[str, ...] = ("open",)
    mentor_access: bool = False
    ancient_library_access: bool = False
    community_level: str = "general"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "element": self.element,
            "description": self.description,
            "monthly_price": self.monthly_price,
            "yearly_price": self.yearly_price,
            "features": list(self.features),
            "restrictions": list(self.restrictions),
            "cultural_access": list(self.cultural_access),
            "mentor_access": self.mentor_access,
            "ancient_library_access": self.ancient_library_access,
            "community_level": self.community_level,
        }


WISDOM_TIERS: tuple[WisdomTier, ...] = (
    WisdomTier(
        id="earth",
        name="Earth Keeper",
        element="earth",
        description="Ground yourself in fundamental spiritual practices",
        monthly_price=19,
        yearly_price=190,
        features=(
            "Basic meditation library",
            "Dream journal with AI analysis",
            "Mood tracking and insights",
            "Cultural adaptation (open traditions)",
            "Community discussions",
            "Monthly group rituals",
        ),
        restrictions=(
            "Limited AI conversations (50/month)",
            "Basic archetype assessment",
            "No AI mentor access",
        ),
        cultural_access=("open",),
        mentor_access=False,
        ancient_library_access=False,
        community_level="general",
    ),
    WisdomTier(
        id="water",
        name="Water Bearer",
        element="water",
        description="Flow deeper into cultural wisdom and healing practices",
        monthly_price=29,
        yearly_price=290,
        features=(
            "All Earth Keeper features",
            "Advanced archetype profiling",
            "Cultural wisdom (initiated traditions)",
            "Personalized ritual generator",
            "Sacred pod communities (7 members)",
            "Biometric meditation adaptation",
            "AI shadow work guidance",
        ),
        restrictions=(
            "Limited AI mentor sessions (2/month)",
            "No ancient mystery access",
        ),
        cultural_access=("open", "initiated"),
        mentor_access=True,
        ancient_library_access=False,
        community_level="pods",
    ),
    WisdomTier(
        id="fire",
        name="Fire Keeper",
        element="fire",
        description="Ignite your spiritual power with AI mentorship",
        monthly_price=49,
        yearly_price=490,
        features=(
            "All Water Bearer features",
            "Weekly 1:1 AI mentor sessions",
            "Sacred tradition access (limited)",
            "Ancient library (curated selections)",
            "Council community access",
            "Lucid dreaming protocols",
            "Advanced third eye practices",
            "Neuro-spiritual integration",
        ),
        restrictions=("Selected ancient mysteries only",),
        cultural_access=("open", "initiated", "sacred"),
        mentor_access=True,
        ancient_library_access=True,
        community_level="council",
    ),
    WisdomTier(
        id="ether",
        name="Ether Walker",
        element="ether",
        description="Master the ancient mysteries with unlimited AI guidance",
        monthly_price=59,
        yearly_price=590,
        features=(
            "All Fire Keeper features",
            "Unlimited AI mentor access",
            "Full ancient mystery library",
            "Mystery school initiation paths",
            "Elder council participation",
            "Co-create new spiritual technologies",
            "Quantum consciousness experiments",
            "Morphic field research access",
        ),
        restrictions=(),
        cultural_access=("open", "initiated", "sacred"),
        mentor_access=True,
        ancient_library_access=True,
        community_level="mystery",
    ),
)

_TIERS_BY_ID = {t.id: t for t in WISDOM_TIERS}
_TIER_RANK = {t.id: i + 1 for i, t in enumerate(WISDOM_TIERS)}

# Fire Keeper feature gate: feature id -> available in demo mode
FIRE_KEEPER_FEATURES: dict[str, bool] = {
    "ai-mentor": True,
    "sacred-traditions": True,
    "ancient-library": True,
    "council-community": False,
    "lucid-dreaming": True,
    "third-eye": True,
    "neuro-spiritual": True,
}
FIRE_KEEPER_TIERS = ("fire", "ether")


def get_tier(tier_id: Optional[str]) -> Optional[WisdomTier]:
    return _TIERS_BY_ID.get(tier_id) if tier_id else None


def tier_rank(tier_id: Optional[str]) -> int:
    """1-4 for known tiers, 0 for unsubscribed or unknown."""
    return _TIER_RANK.get(tier_id, 0) if tier_id else 0


def has_tier_access(user_tier: Optional[str], required_tier: str) -> bool:
    """True when the user's tier is at or above the required tier."""
    required = tier_rank(required_tier)
    if required == 0:
        raise ValueError(f"Unknown required tier: {required_tier!r}")
    return tier_rank(user_tier) >= required


def can_access_tradition(user_tier: Optional[str], access_level: str) -> bool:
    """Open traditions are public; initiated and sacred follow the tier's access list."""
    if access_level == "open":
        return True
    tier = get_tier(user_tier)
    return tier is not None and access_level in tier.cultural_access


def access_type(user_tier: Optional[str], demo_mode: bool = False) -> str:
    """'full' for Fire Keeper and above, 'demo' when demo mode is on, else 'none'."""
    if user_tier in FIRE_KEEPER_TIERS:
        return "full"
    if demo_mode:
        return "demo"
    return "none"


def has_feature_access(user_tier: Optional[str], feature_id: str, demo_mode: bool = False) -> bool:
    """Fire Keeper feature gate. Unknown features are never accessible."""
    if feature_id not in FIRE_KEEPER_FEATURES:
        return False
    kind = access_type(user_tier, demo_mode)
    if kind == "full":
        return True
    if kind == "demo":
        return FIRE_KEEPER_FEATURES[feature_id]
    return False
