"""Tests for condition icon lookup."""

import icons
from icons import CONDITION_ICONS, DEFAULT_ICON, lookup_icon, normalize_key


class TestNormalizeKey:
    def test_strips_hyphens_and_underscores(self):
        assert normalize_key("partly-cloudy_day") == "partlycloudyday"

    def test_idempotent(self):
        once = normalize_key("clear-night")
        assert normalize_key(once) == once

    def test_keeps_case(self):
        assert normalize_key("Clear-Day") == "ClearDay"


class TestLookupIcon:
    def test_separators_are_ignored(self):
        expected = (icons.CLEARDAY, "yellow")
        assert lookup_icon("clear-day") == expected
        assert lookup_icon("clear_day") == expected
        assert lookup_icon("clearday") == expected

    def test_unknown_key_falls_back(self):
        assert lookup_icon("nonsense") == DEFAULT_ICON
        assert DEFAULT_ICON == ("", "blue")

    def test_empty_key_falls_back(self):
        assert lookup_icon("") == DEFAULT_ICON

    def test_match_is_case_sensitive(self):
        assert lookup_icon("Snow") == DEFAULT_ICON

    def test_night_variants_are_light_yellow(self):
        for key in ("clear-night", "clouds-night", "haze-night", "partly-cloudy-night"):
            assert lookup_icon(key)[1] == "bright_yellow"

    def test_severe_conditions_are_black(self):
        for key in ("thunderstorm", "tornado", "wind"):
            assert lookup_icon(key)[1] == "black"

    def test_snow_is_white(self):
        assert lookup_icon("snow") == (icons.SNOW, "white")

    def test_neutral_conditions_are_blue(self):
        for key in ("clear", "clouds", "cloudy", "fog", "haze", "rain", "sleet"):
            assert lookup_icon(key)[1] == "blue"

    def test_every_condition_has_a_glyph(self):
        assert len(CONDITION_ICONS) == 17
        for glyph, _ in CONDITION_ICONS.values():
            assert glyph.strip()
