"""Domain entity for stores and their rating aggregate."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.domain.entities.user import UserIdentity


@dataclass(frozen=True)
class StoreIdentity:
    """Minimal store reference used inside rating and summary payloads."""

    id: int
    name: str


@dataclass
class Store:
    """A rateable store.

    ``avg_rating`` and ``rating_count`` form the aggregate: they must always
    equal the mean and count of the store's live ratings (0 / 0 when there
    are none). Only the rating use case calls the mutators below, and it does
    so inside the same transaction that writes the rating row.
    """

    name: str
    email: str | None = None
    address: str | None = None
    owner_id: int | None = None
    avg_rating: float = 0.0
    rating_count: int = 0
    id: int | None = None
    owner: UserIdentity | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def identity(self) -> StoreIdentity:
        return StoreIdentity(id=self.id, name=self.name)

    def is_owned_by(self, user_id: int | None) -> bool:
        return self.owner_id is not None and self.owner_id == user_id

    def add_score(self, score: int) -> None:
        """Fold a brand-new rating into the aggregate."""
        if self.rating_count <= 0:
            self.avg_rating = float(score)
            self.rating_count = 1
        else:
            total = self.avg_rating * self.rating_count + score
            self.rating_count += 1
            self.avg_rating = total / self.rating_count
        self.updated_at = datetime.now(timezone.utc)

    def replace_score(self, old_score: int, new_score: int) -> None:
        """Swap one existing rating's score for another; the count is unchanged."""
        if self.rating_count <= 0:
            self.avg_rating = float(new_score)
        else:
            total = self.avg_rating * self.rating_count - old_score + new_score
            self.avg_rating = total / self.rating_count
        self.updated_at = datetime.now(timezone.utc)
