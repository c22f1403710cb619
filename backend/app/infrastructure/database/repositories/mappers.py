"""ORM model → domain entity mapping shared by the repositories."""

from app.domain.entities import (
    AuditAction,
    AuditEntity,
    AuditLogEntry,
    Rating,
    RefreshToken,
    Role,
    Store,
    StoreIdentity,
    User,
    UserIdentity,
)
from app.infrastructure.database.models import (
    AuditLogModel,
    RatingModel,
    RefreshTokenModel,
    StoreModel,
    UserModel,
)


def user_to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        name=model.name,
        email=model.email,
        address=model.address,
        password_hash=model.password_hash,
        role=Role(model.role),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def identity_of(model: UserModel) -> UserIdentity:
    return UserIdentity(id=model.id, name=model.name, email=model.email)


def store_to_entity(model: StoreModel, *, with_owner: bool = False) -> Store:
    """Map a store row. ``with_owner`` requires ``owner`` to be eagerly loaded."""
    owner = None
    if with_owner and model.owner is not None:
        owner = identity_of(model.owner)
    return Store(
        id=model.id,
        name=model.name,
        email=model.email,
        address=model.address,
        owner_id=model.owner_id,
        avg_rating=model.avg_rating,
        rating_count=model.rating_count,
        owner=owner,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def rating_to_entity(
    model: RatingModel,
    *,
    rater: UserModel | None = None,
    with_store: bool = False,
) -> Rating:
    """Map a rating row, attaching the rater's identity and/or the store reference."""
    store = None
    if with_store and model.store is not None:
        store = StoreIdentity(id=model.store.id, name=model.store.name)
    return Rating(
        id=model.id,
        user_id=model.user_id,
        store_id=model.store_id,
        score=model.score,
        comment=model.comment,
        rater=identity_of(rater) if rater is not None else None,
        store=store,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def audit_log_to_entity(model: AuditLogModel) -> AuditLogEntry:
    return AuditLogEntry(
        id=model.id,
        user_id=model.user_id,
        action=AuditAction(model.action),
        entity=AuditEntity(model.entity),
        entity_id=model.entity_id,
        details=dict(model.details or {}),
        created_at=model.created_at,
    )


def refresh_token_to_entity(model: RefreshTokenModel) -> RefreshToken:
    return RefreshToken(
        token=model.token,
        user_id=model.user_id,
        expires_at=model.expires_at,
        created_at=model.created_at,
    )
