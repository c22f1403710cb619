"""Domain entity for a single user's rating of a store."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.domain.entities.store import StoreIdentity
from app.domain.entities.user import UserIdentity

MIN_SCORE = 1
MAX_SCORE = 5


def is_valid_score(score: object) -> bool:
    """True for an integer (bool excluded) in [MIN_SCORE, MAX_SCORE]."""
    return (
        isinstance(score, int)
        and not isinstance(score, bool)
        and MIN_SCORE <= score <= MAX_SCORE
    )


@dataclass
class Rating:
    """At most one exists per (user_id, store_id); resubmissions update it."""

    user_id: int
    store_id: int
    score: int
    comment: str | None = None
    id: int | None = None
    rater: UserIdentity | None = None
    store: StoreIdentity | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def revise(self, score: int, comment: str | None) -> None:
        self.score = score
        self.comment = comment
        self.updated_at = datetime.now(timezone.utc)
