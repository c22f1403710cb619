"""Signed access-token port."""

from abc import ABC, abstractmethod

from app.domain.entities import Principal


class TokenIssuer(ABC):
    """Issues and verifies short-lived signed claim sets ``{sub, email, role}``."""

    @abstractmethod
    def issue_access_token(self, principal: Principal) -> str:
        ...

    @abstractmethod
    def verify_access_token(self, token: str) -> Principal:
        """Return the token's principal.

        Raises:
            AuthenticationError: if the token is malformed, expired, or not an access token.
        """
        ...
