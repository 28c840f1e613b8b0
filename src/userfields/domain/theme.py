"""Theme color validation and repair."""

import re

from .rules import DEFAULT_RULES, ValidationRules

HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


def is_valid_color(value: str, rules: ValidationRules = DEFAULT_RULES) -> bool:
    """Return True if `value` is a ``#rrggbb`` color or an allowed named color."""
    if not isinstance(value, str):
        return False
    return bool(HEX_COLOR.fullmatch(value)) or value in rules.named_colors


def sanitize_theme_props(
    props: dict[str, str], rules: ValidationRules = DEFAULT_RULES
) -> dict[str, str]:
    """Return a copy of `props` with invalid colors replaced by slot defaults.

    Only slots listed in ``rules.theme_slots`` are checked. Missing slots are not
    filled in and unknown keys pass through untouched.
    """
    sanitized = dict(props)
    for slot, default in rules.theme_slots.items():
        if slot in sanitized and not is_valid_color(sanitized[slot], rules):
            sanitized[slot] = default
    return sanitized
