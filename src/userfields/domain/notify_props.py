"""Notification properties and mention-key maintenance.

Mention keys are stored in ``notify_props["mention_keys"]`` as a comma-joined
list. The first two entries always track the current username (``name`` and
``@name``); anything after them was added by the user and is preserved.
"""

from .value_objects import NotifyLevel

MENTION_KEYS = "mention_keys"
SEPARATOR = ","


def default_notify_props(username: str) -> dict[str, str]:
    """Return the notification properties assigned to a new user."""
    return {
        "email": "true",
        "desktop": NotifyLevel.ALL.value,
        "desktop_sound": "true",
        MENTION_KEYS: username_mention_keys(username),
        "channel": "true",
        "first_name": "false",
    }


def username_mention_keys(username: str) -> str:
    """Return the two mention keys derived from `username`."""
    return f"{username}{SEPARATOR}@{username}"


def split_mention_keys(mention_keys: str) -> list[str]:
    """Split a mention-key string into its ordered tokens."""
    return mention_keys.split(SEPARATOR) if mention_keys else []


def update_mention_keys(mention_keys: str, old_username: str, new_username: str) -> str:
    """Replace the username-derived leading keys, keeping the extra ones.

    The leading pair is removed only when it is exactly ``old_username`` followed
    by ``@old_username``. Otherwise every existing token is kept after the new
    pair.

    Args:
        mention_keys: The current comma-joined mention keys.
        old_username: The username the current keys were derived from.
        new_username: The username the keys should now track.

    Returns:
        The updated comma-joined mention keys.
    """
    tokens = split_mention_keys(mention_keys)
    if tokens[:2] == [old_username, f"@{old_username}"]:
        tokens = tokens[2:]
    return SEPARATOR.join([new_username, f"@{new_username}", *tokens])


def clean_mention_keys(mention_keys: str) -> str:
    """Drop blank mention keys and lowercase the rest."""
    return SEPARATOR.join(
        key.lower() for key in split_mention_keys(mention_keys) if key
    )
