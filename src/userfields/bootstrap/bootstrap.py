"""Bootstrap the application container with adapters and configuration."""

from __future__ import annotations

from dataclasses import dataclass

from userfields import config
from userfields.adapters.id_generators import ULIDGenerator
from userfields.adapters.password_hasher import PasslibPasswordHasher
from userfields.domain.rules import ValidationRules
from userfields.interfaces.id_generator import IdGenerator
from userfields.interfaces.password_hasher import PasswordHasher


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    id_generator: IdGenerator
    password_hasher: PasswordHasher
    rules: ValidationRules


def bootstrap() -> AppContainer:
    """Build the application container from the environment configuration."""
    return AppContainer(
        id_generator=ULIDGenerator(),
        password_hasher=PasslibPasswordHasher(config.get_password_schemes()),
        rules=config.get_validation_rules(),
    )
