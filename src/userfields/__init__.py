"""USERFIELDS

User data model for a team collaboration application. It validates and
canonicalizes identity fields (usernames, emails, display names, roles),
keeps notification mention keys in sync with the username, and repairs
client theme colors before a user record is persisted.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
