"""Interface for password hashing.

The domain never inspects plaintext passwords beyond checking that one was
supplied; hashing and verification are delegated to an implementation of
`PasswordHasher`.
"""

import abc


class PasswordHasher(abc.ABC):
    """Contract for hashing and verifying passwords."""

    @abc.abstractmethod
    def hash_password(self, password: str) -> str:
        """Return a salted hash of `password`.

        Raises:
            ValueError: If `password` is empty.
        """

    @abc.abstractmethod
    def compare_password(self, hashed: str, password: str) -> bool:
        """Return True if `password` matches the stored `hashed` value."""
