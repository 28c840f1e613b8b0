"""Unit tests for theme color validation and repair."""

import dataclasses

import pytest

from userfields.domain.rules import DEFAULT_RULES
from userfields.domain.theme import is_valid_color, sanitize_theme_props

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#cdbd4e", True),
        ("#CDBD4E", True),
        ("transparent", True),
        ("#fff", False),
        ("cdbd4e", False),
        ("#cdbd4g", False),
        ("invalid", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_color(value, expected):
    """Colors are #rrggbb hex or an allowed named color."""
    assert is_valid_color(value) is expected


class TestSanitizeThemeProps:
    """Tests for sanitize_theme_props."""

    @staticmethod
    def test_repairs_invalid_and_keeps_valid():
        """Invalid recognized slots get their default, everything else is kept."""
        props = {
            "codeTheme": "github",
            "awayIndicator": "#cdbd4e",
            "buttonColor": "invalid",
        }
        sanitized = sanitize_theme_props(props)
        assert sanitized == {
            "codeTheme": "github",
            "awayIndicator": "#cdbd4e",
            "buttonColor": "#ffffff",
        }

    @staticmethod
    def test_does_not_inject_missing_slots():
        """Slots absent from the input stay absent."""
        assert sanitize_theme_props({}) == {}

    @staticmethod
    def test_does_not_mutate_input():
        """The input mapping is left untouched."""
        props = {"buttonColor": "invalid"}
        sanitize_theme_props(props)
        assert props == {"buttonColor": "invalid"}

    @staticmethod
    def test_idempotent():
        """Sanitizing twice equals sanitizing once."""
        props = {"sidebarBg": "nope", "linkColor": "#123456", "other": "x"}
        once = sanitize_theme_props(props)
        assert sanitize_theme_props(once) == once

    @staticmethod
    def test_custom_slot_table():
        """Recognized slots and defaults come from the rules."""
        rules = dataclasses.replace(DEFAULT_RULES, theme_slots={"accent": "#000000"})
        sanitized = sanitize_theme_props(
            {"accent": "bad", "buttonColor": "bad"}, rules
        )
        assert sanitized == {"accent": "#000000", "buttonColor": "bad"}
