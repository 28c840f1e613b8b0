"""Configuration utilities for USERFIELDS.

This module centralizes small helpers and constants related to application
configuration. Values are read from the environment so deployments can extend
the built-in tables without code changes.
"""

import dataclasses
import os
import re

from userfields.adapters.password_hasher import DEFAULT_SCHEMES
from userfields.domain.rules import DEFAULT_RULES, ValidationRules

RESERVED_USERNAMES_ENV = "USERFIELDS_RESERVED_USERNAMES"  # pragma: no mutate
PASSWORD_SCHEMES_ENV = "USERFIELDS_PASSWORD_SCHEMES"  # pragma: no mutate


def split_list(value: str) -> list[str]:
    """Split a comma/space separated environment value, dropping blanks."""
    return [item for item in re.split(r"[,\s]+", value) if item]


def get_validation_rules() -> ValidationRules:
    """Get the validation rules, extended from the environment.

    Returns:
        `DEFAULT_RULES`, with any names listed in `USERFIELDS_RESERVED_USERNAMES`
        added to the reserved usernames.
    """
    if not (extra := split_list(os.environ.get(RESERVED_USERNAMES_ENV, ""))):
        return DEFAULT_RULES
    reserved = DEFAULT_RULES.reserved_usernames | {name.lower() for name in extra}
    return dataclasses.replace(DEFAULT_RULES, reserved_usernames=reserved)


def get_password_schemes() -> tuple[str, ...]:
    """Get the passlib schemes used for password hashing.

    Returns:
        The schemes listed in `USERFIELDS_PASSWORD_SCHEMES`, or the default
        schemes when the variable is unset or blank.
    """
    if schemes := split_list(os.environ.get(PASSWORD_SCHEMES_ENV, "")):
        return tuple(schemes)
    return DEFAULT_SCHEMES
