"""Immutable validation rules for user records.

The length bounds, reserved usernames, recognized roles and theme slots used by
the validators live in a single frozen `ValidationRules` value. Every validator
takes a ``rules`` argument defaulting to `DEFAULT_RULES`, so callers (and tests)
can swap in a modified copy with `dataclasses.replace` instead of patching
module state.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .value_objects import Role

# pylint: disable=too-many-instance-attributes

ID_LENGTH = 26

RESERVED_USERNAMES = frozenset({"all", "channel", "matterbot"})

# Default client theme. Keys are theme slots, values their #rrggbb defaults.
DEFAULT_THEME = MappingProxyType(
    {
        "sidebarBg": "#2071a7",
        "sidebarText": "#ffffff",
        "sidebarUnreadText": "#ffffff",
        "sidebarTextHoverBg": "#136197",
        "sidebarTextActiveBorder": "#7ab0d6",
        "sidebarTextActiveColor": "#ffffff",
        "sidebarHeaderBg": "#2f81b7",
        "sidebarHeaderTextColor": "#ffffff",
        "onlineIndicator": "#7dbe00",
        "awayIndicator": "#dcbd4e",
        "mentionBj": "#fbfbfb",
        "mentionColor": "#2071a7",
        "centerChannelBg": "#f2f4f8",
        "centerChannelColor": "#333333",
        "newMessageSeparator": "#ff8800",
        "linkColor": "#2f81b7",
        "buttonBg": "#1dacfc",
        "buttonColor": "#ffffff",
    }
)

NAMED_COLORS = frozenset({"transparent"})


@dataclass(frozen=True)
class ValidationRules:
    """Value object holding the bounds and tables used to validate a user.

    Conventions:
      - Length bounds are inclusive maxima counted in code points.
      - `reserved_usernames` are rejected by the username predicate.
      - `theme_slots` maps recognized theme slots to their default color.
      - `named_colors` are accepted as theme colors besides ``#rrggbb``.
    """

    max_username_length: int = 64
    max_email_length: int = 128
    max_nickname_length: int = 64
    max_first_name_length: int = 64
    max_last_name_length: int = 64
    max_password_length: int = 128
    max_auth_data_length: int = 128
    max_locale_length: int = 5
    reserved_usernames: frozenset[str] = RESERVED_USERNAMES
    roles: frozenset[Role] = frozenset(Role)
    theme_slots: Mapping[str, str] = field(default_factory=lambda: DEFAULT_THEME)
    named_colors: frozenset[str] = NAMED_COLORS

    @property
    def role_names(self) -> frozenset[str]:
        """Return the wire names of the recognized roles."""
        return frozenset(role.value for role in self.roles)


DEFAULT_RULES = ValidationRules()
