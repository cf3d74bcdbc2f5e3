"""
Tests for environment-aware ritual suggestions.
"""

from datetime import datetime

import pytest
from sanctum.rituals import (
    EnvironmentContext,
    RitualRule,
    RitualSuggestionEngine,
    context_from_datetime,
    ritual_engine,
    time_of_day,
)


def _ctx(time="morning", day="monday", working=False, weather=None):
    return EnvironmentContext(
        time_of_day=time, day_of_week=day, is_working_hours=working, weather=weather,
    )


class TestTimeOfDay:

    @pytest.mark.parametrize("hour,expected", [
        (0, "night"), (5, "night"), (6, "morning"), (11, "morning"),
        (12, "afternoon"), (16, "afternoon"), (17, "evening"),
        (20, "evening"), (21, "night"), (23, "night"),
    ])
    def test_boundaries(self, hour, expected):
        assert time_of_day(hour) == expected


class TestContextFromDatetime:

    def test_weekday_working_hours(self):
        # 2026-10-19 is a Monday
        ctx = context_from_datetime(datetime(2026, 10, 19, 14, 0), weather="Rainy")
        assert ctx.time_of_day == "afternoon"
        assert ctx.day_of_week == "monday"
        assert ctx.is_working_hours is True
        assert ctx.weather == "rainy"

    def test_five_pm_still_working(self):
        ctx = context_from_datetime(datetime(2026, 10, 19, 17, 30))
        assert ctx.is_working_hours is True
        assert ctx.time_of_day == "evening"

    def test_weekend_never_working(self):
        ctx = context_from_datetime(datetime(2026, 10, 17, 10, 0))
        assert ctx.day_of_week == "saturday"
        assert ctx.is_working_hours is False


class TestSuggest:

    def test_clear_morning(self):
        ids = [s.ritual_id for s in ritual_engine.suggest(_ctx(weather="clear"))]
        assert ids == ["1", "2"]

    def test_rainy_morning_dedupes_by_best_confidence(self):
        out = ritual_engine.suggest(_ctx(weather="rainy"))
        assert [s.ritual_id for s in out] == ["2", "5"]
        assert out[0].confidence == 0.7

    def test_friday_evening(self):
        out = ritual_engine.suggest(_ctx(time="evening", day="friday"))
        assert [s.ritual_id for s in out] == ["3"]
        assert out[0].name == "Work-to-Home Threshold"

    def test_afternoon_needs_working_hours(self):
        assert ritual_engine.suggest(_ctx(time="afternoon", working=False)) == []
        out = ritual_engine.suggest(_ctx(time="afternoon", working=True))
        assert [s.ritual_id for s in out] == ["6"]

    def test_sorted_by_confidence(self):
        out = ritual_engine.suggest(_ctx(time="night", weather="rainy"))
        assert [s.ritual_id for s in out] == ["2", "5", "4"]
        assert [s.confidence for s in out] == [0.7, 0.7, 0.6]

    def test_limit(self):
        out = ritual_engine.suggest(_ctx(time="night", weather="rainy"), limit=1)
        assert [s.ritual_id for s in out] == ["2"]

    def test_no_match(self):
        assert ritual_engine.suggest(_ctx(time="morning", weather="cloudy")) == []

    def test_duplicate_keeps_higher_confidence(self):
        engine = RitualSuggestionEngine(rules=(
            RitualRule({"weather": "clear"}, ("2",), 0.5, "low"),
            RitualRule({"time_of_day": "morning"}, ("2",), 0.9, "high"),
        ))
        out = engine.suggest(_ctx(weather="clear"))
        assert len(out) == 1
        assert out[0].reason == "high"

    def test_to_dict(self):
        out = ritual_engine.suggest(_ctx(weather="clear"))[0].to_dict()
        assert out == {
            "ritual_id": "1",
            "name": "Sunrise Gratitude",
            "confidence": 0.9,
            "reason": "Perfect morning conditions for mindful practices",
        }
