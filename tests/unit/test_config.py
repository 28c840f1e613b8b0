"""Unit tests for environment-driven configuration."""

from userfields import config
from userfields.adapters.password_hasher import DEFAULT_SCHEMES
from userfields.domain.rules import DEFAULT_RULES

# pylint: disable=magic-value-comparison


def test_default_rules_without_env(monkeypatch):
    """Without overrides the default rules are returned."""
    monkeypatch.delenv(config.RESERVED_USERNAMES_ENV, raising=False)
    assert config.get_validation_rules() is DEFAULT_RULES


def test_reserved_usernames_from_env(monkeypatch):
    """Extra reserved names are added, lowercased, to the defaults."""
    monkeypatch.setenv(config.RESERVED_USERNAMES_ENV, "Here, everyone  admin")
    rules = config.get_validation_rules()
    assert {"here", "everyone", "admin"} <= rules.reserved_usernames
    assert DEFAULT_RULES.reserved_usernames <= rules.reserved_usernames


def test_password_schemes_default(monkeypatch):
    """Blank or unset scheme lists fall back to the defaults."""
    monkeypatch.setenv(config.PASSWORD_SCHEMES_ENV, " , ")
    assert config.get_password_schemes() == DEFAULT_SCHEMES


def test_password_schemes_from_env(monkeypatch):
    """Schemes are read as a comma/space separated list."""
    monkeypatch.setenv(config.PASSWORD_SCHEMES_ENV, "sha256_crypt,pbkdf2_sha256")
    assert config.get_password_schemes() == ("md5_crypt", "pbkdf2_sha256")
