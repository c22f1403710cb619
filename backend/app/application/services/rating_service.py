"""Rating use cases — the create-or-update protocol and the owner/admin read side.

Every write goes through a single UnitOfWork transaction that locks the
store row first, so two raters of the same store serialize instead of both
folding their score into a stale (avg_rating, rating_count) pair.
"""

import logging
from dataclasses import dataclass

from app.application.interfaces import UnitOfWork
from app.application.services.access_control import can_view_store_ratings
from app.domain.entities import (
    MAX_SCORE,
    MIN_SCORE,
    AuditAction,
    AuditEntity,
    AuditLogEntry,
    Principal,
    Rating,
    StoreIdentity,
    is_valid_score,
)
from app.domain.exceptions import DomainValidationError, EntityNotFoundError, ForbiddenError

logger = logging.getLogger(__name__)


@dataclass
class StoreRatings:
    store: StoreIdentity
    ratings: list[Rating]


@dataclass
class StoreSummary:
    store: StoreIdentity
    avg_rating: float
    rating_count: int


class RatingService:
    """Owns the store aggregate invariant. Depends on the UnitOfWork port (DI)."""

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def submit_rating(
        self,
        store_id: int,
        rater_id: int,
        score: int,
        comment: str | None = None,
    ) -> Rating:
        """Create the rater's rating for a store, or update it if one exists.

        The rating row, the store aggregate and the audit entry are written
        in one transaction; any failure leaves all three untouched.

        Raises:
            DomainValidationError: score is not an integer in [1, 5].
            EntityNotFoundError: the store does not exist.
            ForbiddenError: the rater owns the store.
        """
        if not is_valid_score(score):
            raise DomainValidationError(
                "score", f"must be an integer between {MIN_SCORE} and {MAX_SCORE}"
            )

        async with self._uow as uow:
            store = await uow.stores.get_for_update(store_id)
            if store is None:
                raise EntityNotFoundError("Store", store_id)
            if store.is_owned_by(rater_id):
                logger.warning("User %s tried to rate own store %s", rater_id, store_id)
                raise ForbiddenError("You cannot rate your own store")

            existing = await uow.ratings.get_for_user_and_store(rater_id, store_id)
            old_score: int | None = None

            if existing is not None:
                old_score = existing.score
                existing.revise(score, comment)
                rating = await uow.ratings.update(existing)
                store.replace_score(old_score, score)
                action = AuditAction.UPDATE
            else:
                rating = await uow.ratings.create(
                    Rating(user_id=rater_id, store_id=store_id, score=score, comment=comment)
                )
                store.add_score(score)
                action = AuditAction.CREATE

            await uow.stores.save_aggregate(store)
            await uow.audit_logs.append(
                AuditLogEntry(
                    user_id=rater_id,
                    action=action,
                    entity=AuditEntity.RATING,
                    entity_id=rating.id,
                    details={
                        "store_id": store_id,
                        "score": score,
                        "comment": comment,
                        "old_score": old_score,
                    },
                )
            )

        logger.info(
            "Rating %s %s: store=%s user=%s score=%s avg=%.4f count=%d",
            rating.id,
            action.value,
            store_id,
            rater_id,
            score,
            store.avg_rating,
            store.rating_count,
        )
        return rating

    async def get_ratings_for_store(self, store_id: int, requester: Principal) -> StoreRatings:
        """All ratings of a store, newest first. Admins or the store's owner only."""
        async with self._uow as uow:
            store = await uow.stores.get_by_id(store_id)
            if store is None:
                raise EntityNotFoundError("Store", store_id)
            if not can_view_store_ratings(requester, store.owner_id):
                raise ForbiddenError("You can only view ratings for your own stores")
            ratings = await uow.ratings.list_for_store(store_id)
        return StoreRatings(store=store.identity, ratings=ratings)

    async def get_store_summary(self, store_id: int, requester: Principal) -> StoreSummary:
        """The store's aggregate. Same authorization rule as get_ratings_for_store."""
        async with self._uow as uow:
            store = await uow.stores.get_by_id(store_id)
            if store is None:
                raise EntityNotFoundError("Store", store_id)
            if not can_view_store_ratings(requester, store.owner_id):
                raise ForbiddenError("You can only view summary for your own stores")
        return StoreSummary(
            store=store.identity,
            avg_rating=store.avg_rating,
            rating_count=store.rating_count,
        )

    async def get_my_rating(self, store_id: int, rater_id: int) -> Rating | None:
        async with self._uow as uow:
            if await uow.stores.get_by_id(store_id) is None:
                raise EntityNotFoundError("Store", store_id)
            return await uow.ratings.get_for_user_and_store(rater_id, store_id)
