"""Unit tests for the AuthService: credentials, sessions and refresh rotation."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.application.schemas import PasswordUpdateRequest, SignupRequest
from app.application.services import AuthService, authorize
from app.domain.entities import Principal, RefreshToken, Role
from app.domain.exceptions import AuthenticationError, DuplicateEntityError, ForbiddenError


@pytest.fixture
def service(uow, password_hasher, token_issuer) -> AuthService:
    return AuthService(uow, password_hasher, token_issuer)


def _signup(email: str = "alice@example.com") -> SignupRequest:
    return SignupRequest(name="Alice", email=email, address="1 Main St", password="s3cret-pass")


@pytest.mark.asyncio
async def test_signup_creates_user_role_account_and_session(service, uow):
    result = await service.signup(_signup())

    assert result.user.role is Role.USER
    assert result.user.password_hash == "hashed::s3cret-pass"
    assert result.tokens.refresh_token in uow.db.refresh_tokens
    principal = service.verify_access_token(result.tokens.access_token)
    assert principal == Principal(user_id=result.user.id, email="alice@example.com", role=Role.USER)


@pytest.mark.asyncio
async def test_signup_with_taken_email_conflicts(service, uow):
    await service.signup(_signup())

    with pytest.raises(DuplicateEntityError):
        await service.signup(_signup())
    assert len(uow.db.users) == 1


@pytest.mark.asyncio
async def test_unknown_email_and_wrong_password_fail_the_same_way(service):
    await service.signup(_signup())

    with pytest.raises(AuthenticationError) as unknown:
        await service.authenticate("nobody@example.com", "s3cret-pass")
    with pytest.raises(AuthenticationError) as wrong:
        await service.authenticate("alice@example.com", "not-the-password")

    assert str(unknown.value) == str(wrong.value)


@pytest.mark.asyncio
async def test_login_issues_a_fresh_refresh_token(service, uow):
    signed_up = await service.signup(_signup())

    logged_in = await service.login("alice@example.com", "s3cret-pass")

    assert logged_in.user.id == signed_up.user.id
    assert logged_in.tokens.refresh_token != signed_up.tokens.refresh_token
    assert len(uow.db.refresh_tokens) == 2


@pytest.mark.asyncio
async def test_refresh_token_expires_after_ttl(service, uow):
    result = await service.signup(_signup())

    stored = uow.db.refresh_tokens[result.tokens.refresh_token]
    expected = datetime.now(timezone.utc) + timedelta(days=7)
    assert abs(stored.expires_at - expected) < timedelta(minutes=1)
    assert len(result.tokens.refresh_token) == 64


@pytest.mark.asyncio
async def test_rotate_session_consumes_the_old_token(service, uow):
    result = await service.signup(_signup())
    old_token = result.tokens.refresh_token

    rotated = await service.rotate_session(old_token)

    assert rotated.refresh_token != old_token
    assert old_token not in uow.db.refresh_tokens
    assert rotated.refresh_token in uow.db.refresh_tokens
    with pytest.raises(AuthenticationError):
        await service.rotate_session(old_token)


@pytest.mark.asyncio
async def test_rotate_unknown_token_is_unauthorized(service):
    with pytest.raises(AuthenticationError):
        await service.rotate_session("not-a-real-token")


@pytest.mark.asyncio
async def test_rotate_expired_token_is_unauthorized(service, uow, seed):
    user = await seed.user("Alice")
    await uow.refresh_tokens.create(
        RefreshToken(
            token="expired",
            user_id=user.id,
            expires_at=datetime.now(timezone.utc) - timedelta(seconds=1),
        )
    )

    with pytest.raises(AuthenticationError):
        await service.rotate_session("expired")


@pytest.mark.asyncio
async def test_rotate_token_of_deleted_user_is_unauthorized(service, uow):
    result = await service.signup(_signup())
    uow.db.users.clear()

    with pytest.raises(AuthenticationError):
        await service.rotate_session(result.tokens.refresh_token)


@pytest.mark.asyncio
async def test_revoke_session_is_idempotent(service, uow):
    result = await service.signup(_signup())

    await service.revoke_session(result.tokens.refresh_token)
    await service.revoke_session(result.tokens.refresh_token)
    await service.revoke_session(None)

    assert uow.db.refresh_tokens == {}


def test_verify_access_token_rejects_garbage(service):
    with pytest.raises(AuthenticationError):
        service.verify_access_token("garbage")


def test_authorize_allows_listed_roles_only():
    owner = Principal(user_id=1, email="o@example.com", role=Role.STORE_OWNER)

    authorize(owner, [Role.STORE_OWNER, Role.ADMIN])
    with pytest.raises(ForbiddenError):
        authorize(owner, [Role.USER])
    with pytest.raises(ForbiddenError):
        authorize(owner, [])


def test_new_passwords_are_bounded_by_bcrypt_input_bytes():
    SignupRequest(name="Alice", email="alice@example.com", password="a" * 72)

    # 40 characters, 80 bytes
    with pytest.raises(ValidationError):
        SignupRequest(name="Alice", email="alice@example.com", password="é" * 40)
    with pytest.raises(ValidationError):
        PasswordUpdateRequest(current_password="old-password", new_password="b" * 73)
