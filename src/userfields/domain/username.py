"""Username and identifier predicates, and the username canonicalizer."""

import base64
import hashlib
import logging
import re

from .rules import DEFAULT_RULES, ID_LENGTH, ValidationRules

logger = logging.getLogger(__name__)

VALID_USERNAME_CHARS = re.compile(r"[a-z0-9._-]+")
INVALID_USERNAME_CHAR = re.compile(r"[^a-z0-9._-]")
VALID_ID = re.compile(rf"[0-9A-Za-z]{{{ID_LENGTH}}}")

FALLBACK_PREFIX = "a"


def is_valid_id(value: str) -> bool:
    """Return True if `value` has the shape of a generated identifier."""
    return bool(VALID_ID.fullmatch(value))


def is_valid_username(value: str, rules: ValidationRules = DEFAULT_RULES) -> bool:
    """Return True if `value` is a canonical, non-reserved username.

    A canonical username is 1 to ``rules.max_username_length`` characters of
    lowercase ASCII letters, digits, ``.``, ``-`` and ``_``.
    """
    if not value or len(value) > rules.max_username_length:
        return False
    if not VALID_USERNAME_CHARS.fullmatch(value):
        return False
    return value not in rules.reserved_usernames


def clean_username(value: str, rules: ValidationRules = DEFAULT_RULES) -> str:
    """Best-effort repair of an arbitrary string into a valid username.

    The input is lowercased, every disallowed character becomes ``-``, the
    result is truncated to the maximum length and leading and trailing dashes
    are stripped. If that is still not valid (empty or reserved) a deterministic
    fallback of ``"a"`` followed by 26 digest characters is returned.

    Args:
        value: The raw username, e.g. as typed by a user or sent by an SSO provider.
        rules: Validation rules providing the length bound and reserved words.

    Returns:
        The cleaned username. Never raises.
    """
    cleaned = INVALID_USERNAME_CHAR.sub("-", value.lower())
    cleaned = cleaned[: rules.max_username_length].strip("-")
    if is_valid_username(cleaned, rules):
        return cleaned

    fallback = FALLBACK_PREFIX + _digest_id(value)
    logger.warning(
        "Unable to clean username %r into a valid name, using %s", value, fallback
    )
    return fallback


def _digest_id(value: str) -> str:
    digest = hashlib.sha256(value.encode("utf-8", "surrogatepass")).digest()
    return base64.b32encode(digest).decode("ascii").lower()[:ID_LENGTH]
