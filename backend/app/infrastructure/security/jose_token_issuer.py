"""HS256 access tokens via python-jose."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from app.application.interfaces import TokenIssuer
from app.domain.entities import Principal, Role
from app.domain.exceptions import AuthenticationError

ACCESS_TOKEN_TYPE = "access"


class JoseTokenIssuer(TokenIssuer):
    """Signs ``{sub, email, role, exp, type}`` claim sets with a shared secret."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 15):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in = timedelta(minutes=expire_minutes)

    def issue_access_token(self, principal: Principal) -> str:
        claims = {
            "sub": str(principal.user_id),
            "email": principal.email,
            "role": principal.role.value,
            "exp": datetime.now(timezone.utc) + self._expires_in,
            "type": ACCESS_TOKEN_TYPE,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify_access_token(self, token: str) -> Principal:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError:
            raise AuthenticationError("Invalid or expired token")

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise AuthenticationError("Invalid token type")

        try:
            return Principal(
                user_id=int(payload["sub"]),
                email=str(payload["email"]),
                role=Role(payload["role"]),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token")
