"""Password hashing backed by passlib.

`PasslibPasswordHasher` wraps a `passlib.context.CryptContext`. The first scheme
is used for new hashes; hashes produced by any listed scheme still verify.
"""

import logging
from collections.abc import Sequence

from passlib.context import CryptContext

from userfields.interfaces.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

DEFAULT_SCHEMES = ("pbkdf2_sha256",)


class PasslibPasswordHasher(PasswordHasher):
    """Hash and verify passwords with a passlib `CryptContext`."""

    def __init__(self, schemes: Sequence[str] = DEFAULT_SCHEMES) -> None:
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")
        logger.debug("Password context configured with schemes: %s", list(schemes))

    def hash_password(self, password: str) -> str:
        if not password:
            raise ValueError("Cannot hash an empty password.")
        return self._context.hash(password)

    def compare_password(self, hashed: str, password: str) -> bool:
        if not hashed or not password:
            logger.debug("Password comparison skipped: empty hash or password.")
            return False
        try:
            return self._context.verify(password, hashed)
        except ValueError:
            # Malformed hash or one produced by an unlisted scheme.
            logger.debug("Password comparison failed: unrecognized hash.")
            return False
