"""
Keyword Tables — Static Detection Vocabulary

Every detector in sanctum is the same engine fed different tables.
This module holds those tables:
  1. Severity keyword lists (tier name -> ordered phrases)
  2. Tier ranks and indicator labels
  3. Type classification tables (ordered, first match wins)
  4. Per-severity display metadata and unlockable actions

All phrases are lowercase. Tables are plain module constants and are
never mutated at runtime; detectors copy them into tuples on construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class SeverityLevel:
    """Display metadata for one severity rank."""
    rank: int
    name: str
    description: str
    protocols: tuple[str, ...] = field(default_factory=tuple)


# ============================================================
# SHARED TIER RANKS
# ============================================================

STANDARD_RANKS: dict[str, int] = {
    "mild": 1,
    "moderate": 2,
    "severe": 3,
}


# ============================================================
# ENTITY ATTACHMENT
# ============================================================

ENTITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "mild": (
        "drained",
        "exhausted",
        "mood swings",
        "negative thoughts",
        "feeling watched",
        "cold spots",
        "unexplained emotions",
    ),
    "moderate": (
        "entity attachment",
        "parasitic entity",
        "energy vampire",
        "foreign thoughts",
        "not feeling like myself",
        "possession",
        "spirit attachment",
        "earthbound spirit",
        "lost soul",
    ),
    "severe": (
        "demonic possession",
        "demonic attachment",
        "demon inside me",
        "multiple entities",
        "dark entity",
        "evil presence",
        "losing control",
        "voices commanding",
        "entity control",
    ),
}

ENTITY_TYPES: dict[str, tuple[str, ...]] = {
    "parasitic_entity": ("parasitic entity", "energy vampire", "drained", "exhausted"),
    "earthbound_spirit": ("earthbound spirit", "lost soul", "spirit attachment", "ghost"),
    "demonic_attachment": ("demonic", "demon", "dark entity", "evil presence"),
    "thought_form": ("foreign thoughts", "not feeling like myself", "personality changes"),
    "multiple_entities": ("multiple entities", "many voices", "chaos inside"),
}

ENTITY_TYPE_DESCRIPTIONS: dict[str, str] = {
    "parasitic_entity": "Energy-draining entity - requires spiritual cleansing and boundary work",
    "earthbound_spirit": "Lost soul attachment - needs compassionate release to the light",
    "demonic_attachment": "Demonic entity - requires immediate spiritual warfare and deliverance",
    "thought_form": "Mental intrusion - needs thought pattern clearing and mental protection",
    "multiple_entities": "Multiple entity attachments - requires comprehensive clearing protocol",
}

ENTITY_LEVELS: tuple[SeverityLevel, ...] = (
    SeverityLevel(1, "Mild Entity Influence", "Low-level energetic interference"),
    SeverityLevel(2, "Active Entity Attachment", "An attached presence is influencing the person"),
    SeverityLevel(3, "Severe Entity Possession", "Strong attachment requiring forceful removal"),
)

# action id -> minimum severity at which it is offered
ENTITY_ACTIONS: dict[str, int] = {
    "entity_clearing": 1,
    "compassionate_release": 2,
    "forced_removal": 3,
}


# ============================================================
# SPIRITUAL MARRIAGE
# ============================================================

MARRIAGE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "mild": (
        "spiritual spouse",
        "strange dreams",
        "relationship problems",
        "can't find love",
        "sabotaged relationships",
        "lonely",
    ),
    "moderate": (
        "spiritual marriage",
        "incubus",
        "succubus",
        "spiritual husband",
        "spiritual wife",
        "night visitation",
        "sexual dreams",
        "relationship interference",
        "spiritual adultery",
    ),
    "severe": (
        "forced spiritual marriage",
        "spiritual rape",
        "demonic spouse",
        "can't get married",
        "every relationship fails",
        "spiritual bondage",
        "married in the spirit realm",
        "spiritual covenant",
    ),
}

MARRIAGE_TYPES: dict[str, tuple[str, ...]] = {
    "incubus_succubus": ("incubus", "succubus", "sexual dreams", "night visitation"),
    "spiritual_covenant": ("spiritual marriage", "spiritual husband", "spiritual wife"),
    "relationship_sabotage": ("relationship problems", "sabotaged relationships", "can't find love"),
    "demonic_bondage": ("forced marriage", "spiritual rape", "demonic spouse"),
}

MARRIAGE_TYPE_DESCRIPTIONS: dict[str, str] = {
    "incubus_succubus": "Sexual entity attachment - requires immediate spiritual cleansing",
    "spiritual_covenant": "Spiritual marriage covenant - needs formal spiritual divorce",
    "relationship_sabotage": "Relationship interference pattern - requires protection and breaking",
    "demonic_bondage": "Demonic marriage bondage - requires urgent spiritual warfare",
}

MARRIAGE_LEVELS: tuple[SeverityLevel, ...] = (
    SeverityLevel(1, "Mild Spiritual Marriage Influence", "Early signs of relational interference"),
    SeverityLevel(2, "Active Spiritual Marriage", "A spiritual covenant is actively interfering"),
    SeverityLevel(3, "Severe Spiritual Bondage", "Binding covenant requiring emergency liberation"),
)

MARRIAGE_ACTIONS: dict[str, int] = {
    "spiritual_divorce": 1,
    "covenant_breaking": 2,
    "emergency_liberation": 3,
}


# ============================================================
# SPIRITUAL EMERGENCY (four tiers)
# ============================================================

EMERGENCY_RANKS: dict[str, int] = {
    "distress": 1,
    "attack": 2,
    "crisis": 3,
    "emergency": 4,
}

# Distress indicators keep their historical mixed-case label
EMERGENCY_LABELS: dict[str, str] = {
    "distress": "Distress",
}

EMERGENCY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "distress": (
        "anxious", "worried", "confused", "lost", "overwhelmed", "sad", "lonely",
        "helpless", "disconnected", "spiritual dryness", "doubt", "fear",
    ),
    "attack": (
        "under attack", "spiritual attack", "haunted", "cursed", "unsafe", "evil",
        "dark forces", "negative entities", "possessed", "demonic", "witchcraft",
        "bad energy", "nightmare", "terrified", "spiritual marriage", "soul ties",
        "generational curse", "family curse", "occult", "psychic attack",
    ),
    "crisis": (
        "spiritual warfare", "demonic possession", "entity attachment", "spiritual bondage",
        "cursed objects", "black magic", "voodoo", "satanic", "ritualistic abuse",
        "spiritual rape", "forced spiritual marriage", "demon manifestation",
        "spiritual torture", "soul fragmentation", "spiritual death",
    ),
    "emergency": (
        "kill myself", "end it all", "voices commanding", "demonic voices",
        "forced to hurt", "no escape", "spiritual prison", "complete possession",
        "losing my soul", "spiritual destruction", "demonic control",
        "satanic ritual abuse", "spiritual murder",
    ),
}

EMERGENCY_TYPES: dict[str, tuple[str, ...]] = {
    "spiritual_marriage": (
        "spiritual marriage", "spiritual spouse", "incubus", "succubus", "spiritual adultery",
    ),
    "generational_curse": (
        "family curse", "generational curse", "ancestral curse", "bloodline curse",
    ),
    "entity_attachment": (
        "entity attachment", "demonic possession", "spirit attachment", "parasitic entity",
    ),
    "witchcraft_attack": ("witchcraft", "black magic", "voodoo", "spell", "hex", "jinx"),
    "psychic_attack": (
        "psychic attack", "mental intrusion", "thought projection", "energy drain",
    ),
    "cursed_objects": (
        "cursed objects", "cursed items", "haunted objects", "contaminated items",
    ),
    "location_curse": (
        "haunted house", "cursed land", "negative location", "spiritual contamination",
    ),
    "ritual_abuse": ("ritual abuse", "satanic ritual", "occult ritual", "spiritual torture"),
}

EMERGENCY_TYPE_DESCRIPTIONS: dict[str, str] = {
    "spiritual_marriage": "Spiritual spouse or covenant interference",
    "generational_curse": "Inherited curse running through the family line",
    "entity_attachment": "Attached entity or possession",
    "witchcraft_attack": "Spell, hex, or other directed witchcraft",
    "psychic_attack": "Directed mental or energetic intrusion",
    "cursed_objects": "Contaminated or cursed physical objects",
    "location_curse": "Negative energy bound to a place",
    "ritual_abuse": "Harm inflicted through occult ritual",
}

EMERGENCY_LEVELS: tuple[SeverityLevel, ...] = (
    SeverityLevel(
        1, "Spiritual Distress", "Mild spiritual anxiety or confusion",
        ("Guided breathing", "Light protection ritual", "Grounding exercises"),
    ),
    SeverityLevel(
        2, "Spiritual Attack", "Active spiritual warfare or entity interference",
        ("Emergency shield activation", "Divine invocation", "Protection barriers"),
    ),
    SeverityLevel(
        3, "Spiritual Crisis", "Severe spiritual emergency requiring immediate intervention",
        ("Maximum protection activation", "Spiritual warfare protocols", "Emergency deliverance"),
    ),
    SeverityLevel(
        4, "Spiritual Emergency", "Life-threatening spiritual attack requiring all resources",
        ("Full spiritual armor", "Emergency exorcism", "Divine intervention call"),
    ),
)

EMERGENCY_ACTIONS: dict[str, int] = {
    "emergency_shield": 2,
    "escalate": 2,
    "spiritual_warfare": 3,
    "crisis_line": 4,
}


# ============================================================
# CRISIS (three tiers, self-harm at the top)
# ============================================================

CRISIS_RANKS: dict[str, int] = {
    "distress": 1,
    "crisis": 2,
    "critical": 3,
}

# Every crisis indicator is reported in title case
CRISIS_LABELS: dict[str, str] = {
    "distress": "Distress",
    "crisis": "Crisis",
    "critical": "Critical",
}

CRISIS_KEYWORDS: dict[str, tuple[str, ...]] = {
    "distress": (
        "anxious", "worried", "confused", "lost", "overwhelmed",
        "sad", "lonely", "helpless", "disconnected",
    ),
    "crisis": (
        "under attack", "haunted", "cursed", "unsafe", "evil",
        "dark forces", "spiritual attack", "possessed", "demonic",
        "negative entities", "can't sleep", "strange things happening",
        "bad energy", "nightmare", "terrified",
    ),
    "critical": (
        "kill myself", "end it all", "don't want to live", "suicide",
        "hurt myself", "no point living", "better off dead",
        "voices telling me to", "going to jump", "going to hurt",
    ),
}

CRISIS_LEVELS: tuple[SeverityLevel, ...] = (
    SeverityLevel(
        1, "Spiritual Distress", "Mild anxiety or spiritual confusion",
        ("Guided breathing", "Light visualization", "Grounding exercises"),
    ),
    SeverityLevel(
        2, "Spiritual Crisis", "Significant spiritual emergency requiring immediate intervention",
        ("Emergency shield", "Divine invocation", "Protective rituals"),
    ),
    SeverityLevel(
        3, "Critical Emergency", "Severe crisis requiring human specialist intervention",
        ("Immediate human connection", "Crisis hotline", "Emergency services"),
    ),
)

CRISIS_ACTIONS: dict[str, int] = {
    "connect_specialist": 2,
    "crisis_hotline_988": 3,
}
