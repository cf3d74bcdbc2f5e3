"""
Tests for the cultural adaptation engine.
"""

import random
import re

import pytest
from sanctum.cultural import (
    CULTURAL_PROFILES,
    AdaptationContext,
    CulturalAdaptationEngine,
    CulturalProfile,
    build_adapter,
)

ALL_PLACEHOLDERS = "{deity} {protectionSymbol} {lightColor} {prayer} {culturalReference}"
_UNRESOLVED = re.compile(r"\{(deity|protectionSymbol|lightColor|prayer|culturalReference)\}")


@pytest.fixture
def engine():
    return build_adapter(seed=7)


class TestWorkedExample:

    def test_buddhist_protection(self, engine):
        ctx = AdaptationContext(tradition="buddhist", emotional_state="calm", content_type="protection")
        assert engine.adapt_content("{deity} protect me", ctx) == (
            "With loving-kindness, White Tara protect me"
        )


class TestProfileFallback:

    @pytest.mark.parametrize("tradition", ["", "pastafarian", "BUDDHIST", " secular"])
    def test_unknown_tradition_uses_secular(self, engine, tradition):
        ctx = AdaptationContext(tradition=tradition, content_type="general")
        assert engine.adapt_content("{deity}", ctx) == "Inner Strength"

    def test_resolve_profile_reports_fallback(self, engine):
        profile, fallback = engine.resolve_profile("unknown")
        assert profile.tradition == "Secular"
        assert fallback is True

    def test_resolve_known_profile(self, engine):
        profile, fallback = engine.resolve_profile("hindu")
        assert profile.deity == "Hanuman"
        assert fallback is False

    def test_get_profile_has_no_fallback(self, engine):
        assert engine.get_profile("unknown") is None

    def test_fallback_gets_secular_prefix(self, engine):
        ctx = AdaptationContext(tradition="nope", content_type="protection")
        assert engine.adapt_content("stand firm", ctx) == (
            "Drawing upon your inner strength, stand firm"
        )

    def test_default_profile(self, engine):
        assert engine.default_profile is CULTURAL_PROFILES["secular"]

    def test_default_tradition_must_exist(self):
        with pytest.raises(ValueError):
            CulturalAdaptationEngine(default_tradition="missing")


class TestSubstitution:

    def test_all_occurrences_replaced(self, engine):
        ctx = AdaptationContext(tradition="christian")
        assert engine.adapt_content("{deity} and {deity}", ctx) == "Holy Spirit and Holy Spirit"

    def test_every_field(self, engine):
        ctx = AdaptationContext(tradition="islamic", content_type="healing")
        out = engine.adapt_content(ALL_PLACEHOLDERS, ctx)
        assert out == "Allah crescent green Bismillah, I seek refuge in Allah Rahim"

    @pytest.mark.parametrize("tradition", list(CULTURAL_PROFILES))
    @pytest.mark.parametrize("content_type", ["protection", "grounding", "healing", "general"])
    def test_no_unresolved_placeholders(self, engine, tradition, content_type):
        ctx = AdaptationContext(tradition=tradition, content_type=content_type)
        out = engine.adapt_content(ALL_PLACEHOLDERS * 2, ctx)
        assert not _UNRESOLVED.search(out)

    def test_unrelated_braces_untouched(self, engine):
        ctx = AdaptationContext(tradition="hindu")
        assert engine.adapt_content("{name} meets {deity}", ctx) == "{name} meets Hanuman"


class TestCulturalReference:

    def test_protection_uses_first(self, engine):
        profile = CULTURAL_PROFILES["christian"]
        assert engine.select_cultural_reference(profile, "protection") == "Archangel Michael"

    def test_healing_uses_second(self, engine):
        profile = CULTURAL_PROFILES["christian"]
        assert engine.select_cultural_reference(profile, "healing") == "Divine Light"

    def test_general_is_from_list(self, engine):
        profile = CULTURAL_PROFILES["hindu"]
        for _ in range(20):
            assert engine.select_cultural_reference(profile, "general") in profile.cultural_references

    def test_seeded_choice_is_reproducible(self):
        ctx = AdaptationContext(tradition="buddhist", content_type="grounding")
        a = [build_adapter(seed=42).adapt_content("{culturalReference}", ctx) for _ in range(3)]
        assert len(set(a)) == 1

    def test_injected_rng_is_used(self):
        engine = CulturalAdaptationEngine(rng=random.Random(0))
        expected = random.Random(0).choice(CULTURAL_PROFILES["secular"].cultural_references)
        ctx = AdaptationContext(tradition="secular", content_type="general")
        assert engine.adapt_content("{culturalReference}", ctx) == expected

    def test_empty_references_fall_back_to_deity(self, engine):
        bare = CulturalProfile(
            tradition="Bare", deity="The Void", protection_symbol="circle",
            light_color="black", prayer="...", color_scheme="",
        )
        assert engine.select_cultural_reference(bare, "general") == "The Void"
        assert engine.select_cultural_reference(bare, "protection") == "The Void"
        assert engine.select_cultural_reference(bare, "healing") == "The Void"

    def test_single_reference_healing_falls_back(self, engine):
        one = CulturalProfile(
            tradition="One", deity="Sun", protection_symbol="disc",
            light_color="gold", prayer="Rise", color_scheme="",
            cultural_references=("Dawn",),
        )
        assert engine.select_cultural_reference(one, "healing") == "Sun"

    def test_empty_string_reference_falls_back_to_deity(self, engine):
        engine.add_custom_profile("blank", CulturalProfile(
            tradition="Blank", deity="Source", protection_symbol="ring",
            light_color="clear", prayer="Be", color_scheme="",
            cultural_references=("",),
        ))
        for content_type in ("protection", "general"):
            ctx = AdaptationContext(tradition="blank", content_type=content_type)
            assert engine.adapt_content("[{culturalReference}]", ctx) == "[Source]"


class TestTone:

    def test_crisis(self, engine):
        ctx = AdaptationContext(tradition="zzz", emotional_state="crisis")
        assert engine.adapt_content("breathe gently and speak softly", ctx) == (
            "breathe immediately and speak firmly"
        )

    def test_distressed(self, engine):
        ctx = AdaptationContext(tradition="zzz", emotional_state="distressed")
        assert engine.adapt_content("do not rush, move quickly", ctx) == (
            "do not breathe, move calmly"
        )

    def test_calm(self, engine):
        ctx = AdaptationContext(tradition="zzz", emotional_state="calm")
        assert engine.adapt_content("an urgent and immediate call", ctx) == (
            "an peaceful and gentle call"
        )

    def test_only_one_state_applied(self, engine):
        ctx = AdaptationContext(tradition="zzz", emotional_state="crisis")
        assert engine.adapt_content("urgent, gently", ctx) == "urgent, immediately"

    def test_unknown_state_no_change(self, engine):
        ctx = AdaptationContext(tradition="zzz", emotional_state="joyful")
        assert engine.adapt_content("gently and urgent", ctx) == "gently and urgent"

    def test_adapt_tone_is_static(self):
        assert CulturalAdaptationEngine.adapt_tone("urgent", "calm") == "peaceful"


class TestContextualPrefix:

    def test_grounding_prefix(self, engine):
        ctx = AdaptationContext(tradition="indigenous", content_type="grounding")
        assert engine.adapt_content("stand still", ctx) == "Feel Mother Earth beneath you, stand still"

    def test_healing_has_no_prefix(self, engine):
        ctx = AdaptationContext(tradition="christian", content_type="healing")
        assert engine.adapt_content("be whole", ctx) == "be whole"

    def test_custom_profile_without_prefix_entry(self, engine):
        engine.add_custom_profile("norse", CulturalProfile(
            tradition="Norse", deity="Odin", protection_symbol="valknut",
            light_color="blue", prayer="Hail the Allfather", color_scheme="",
            cultural_references=("Thor", "Freya"),
        ))
        ctx = AdaptationContext(tradition="norse", content_type="protection")
        assert engine.adapt_content("{deity} guard me", ctx) == "Odin guard me"


class TestCustomProfiles:

    def test_register_and_use(self, engine):
        engine.add_custom_profile("taoist", CulturalProfile(
            tradition="Taoist", deity="The Tao", protection_symbol="taijitu",
            light_color="jade", prayer="Flow like water", color_scheme="",
            cultural_references=("Laozi", "Zhuangzi"),
        ))
        assert "taoist" in engine.traditions()
        ctx = AdaptationContext(tradition="taoist", content_type="healing")
        assert engine.adapt_content("{deity} and {culturalReference}", ctx) == "The Tao and Zhuangzi"

    def test_replace_existing(self, engine):
        replacement = CulturalProfile(
            tradition="Secular", deity="Reason", protection_symbol="shield",
            light_color="silver", prayer="I am steady", color_scheme="",
        )
        engine.add_custom_profile("secular", replacement)
        assert engine.resolve_profile("unknown")[0].deity == "Reason"

    def test_registration_is_per_engine(self, engine):
        other = build_adapter()
        engine.add_custom_profile("solo", CULTURAL_PROFILES["secular"])
        assert "solo" not in other.traditions()
        assert "solo" not in CULTURAL_PROFILES

    def test_empty_id_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.add_custom_profile("  ", CULTURAL_PROFILES["secular"])

    def test_profile_to_dict(self):
        data = CULTURAL_PROFILES["buddhist"].to_dict()
        assert data["deity"] == "White Tara"
        assert data["cultural_references"] == ["Buddha", "Dharma", "Sangha"]
