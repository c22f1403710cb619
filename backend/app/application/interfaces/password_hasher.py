"""Password hashing port."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        ...

    @abstractmethod
    def verify(self, digest: str, plaintext: str) -> bool:
        """Constant-time check of ``plaintext`` against a stored digest."""
        ...
