"""Module including value objects used across the domain layer."""

from enum import Enum


class Role(Enum):
    """Enumeration of recognized user roles.

    Roles are stored on the user as a space-separated string of these values.
    """

    SYSTEM_USER = "system_user"
    SYSTEM_ADMIN = "system_admin"


class NotifyLevel(Enum):
    """Enumeration of desktop notification levels."""

    ALL = "all"
    MENTION = "mention"
    NONE = "none"
