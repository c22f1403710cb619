"""Identity use cases — credentials, sessions and refresh-token rotation."""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from app.application.interfaces import PasswordHasher, TokenIssuer, UnitOfWork
from app.application.schemas import SignupRequest
from app.domain.entities import Principal, RefreshToken, Role, User
from app.domain.exceptions import AuthenticationError, DuplicateEntityError

logger = logging.getLogger(__name__)

REFRESH_TOKEN_BYTES = 32


@dataclass(frozen=True)
class SessionTokens:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class AuthResult:
    user: User
    tokens: SessionTokens


class AuthService:
    """Authenticates users and manages their server-side sessions.

    Access tokens are short-lived signed claims; refresh tokens are opaque
    random strings stored server-side and consumed on every use.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        refresh_token_ttl: timedelta = timedelta(days=7),
    ):
        self._uow = uow
        self._hasher = password_hasher
        self._tokens = token_issuer
        self._refresh_ttl = refresh_token_ttl

    async def signup(self, data: SignupRequest) -> AuthResult:
        """Register a USER-role account and open a session for it."""
        password_hash = self._hasher.hash(data.password)
        async with self._uow as uow:
            if await uow.users.get_by_email(data.email) is not None:
                raise DuplicateEntityError("User", "email", data.email)
            user = await uow.users.create(
                User(
                    name=data.name,
                    email=data.email,
                    address=data.address,
                    password_hash=password_hash,
                    role=Role.USER,
                )
            )
            tokens = await self._open_session(uow, user)
        logger.info("User %s signed up", user.id)
        return AuthResult(user=user, tokens=tokens)

    async def authenticate(self, email: str, password: str) -> User:
        """Return the user owning these credentials.

        Unknown email and wrong password raise the same error.
        """
        async with self._uow as uow:
            user = await uow.users.get_by_email(email)
        if user is None or not self._hasher.verify(user.password_hash, password):
            logger.warning("Failed login attempt")
            raise AuthenticationError()
        return user

    async def login(self, email: str, password: str) -> AuthResult:
        user = await self.authenticate(email, password)
        tokens = await self.issue_session(user)
        logger.info("User %s logged in", user.id)
        return AuthResult(user=user, tokens=tokens)

    async def issue_session(self, user: User) -> SessionTokens:
        async with self._uow as uow:
            return await self._open_session(uow, user)

    async def rotate_session(self, refresh_token: str) -> SessionTokens:
        """Consume a refresh token and issue a new pair for the same user.

        The old token is deleted and the new one inserted in the same
        transaction. If another rotation already consumed the token the
        delete removes nothing and this rotation fails.
        """
        async with self._uow as uow:
            stored = await uow.refresh_tokens.get(refresh_token)
            if stored is None or stored.is_expired():
                raise AuthenticationError("Invalid refresh token")

            user = await uow.users.get_by_id(stored.user_id)
            if user is None:
                raise AuthenticationError("Invalid refresh token")

            if not await uow.refresh_tokens.delete(refresh_token):
                logger.warning("Refresh token for user %s was already consumed", user.id)
                raise AuthenticationError("Invalid refresh token")

            tokens = await self._open_session(uow, user)
        logger.debug("Rotated session for user %s", user.id)
        return tokens

    async def revoke_session(self, refresh_token: str | None) -> None:
        """Logout. An unknown or already-deleted token is not an error."""
        if not refresh_token:
            return
        async with self._uow as uow:
            await uow.refresh_tokens.delete(refresh_token)

    def verify_access_token(self, token: str) -> Principal:
        return self._tokens.verify_access_token(token)

    async def _open_session(self, uow: UnitOfWork, user: User) -> SessionTokens:
        principal = Principal(user_id=user.id, email=user.email, role=user.role)
        access_token = self._tokens.issue_access_token(principal)
        refresh_token = secrets.token_hex(REFRESH_TOKEN_BYTES)
        await uow.refresh_tokens.create(
            RefreshToken(
                token=refresh_token,
                user_id=user.id,
                expires_at=datetime.now(timezone.utc) + self._refresh_ttl,
            )
        )
        return SessionTokens(access_token=access_token, refresh_token=refresh_token)
