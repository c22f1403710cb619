"""Password hashing with bcrypt (direct, no passlib)."""

import bcrypt

from app.application.interfaces import PasswordHasher

# bcrypt only looks at the first 72 bytes; newer releases reject longer input outright.
# Request DTOs cap new passwords at this size, so truncation only affects configured ones.
_BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt digests stored as UTF-8 strings."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")

    def verify(self, digest: str, plaintext: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(plaintext), digest.encode("utf-8"))
        except ValueError:
            # Malformed stored digest
            return False
