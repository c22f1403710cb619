"""Read-side projections used by the admin console."""

from dataclasses import dataclass, field

from app.domain.entities.rating import Rating
from app.domain.entities.store import Store
from app.domain.entities.user import User


@dataclass
class UserOverview:
    """Admin listing row: a user plus how many ratings and stores they have."""

    user: User
    rating_count: int = 0
    owned_store_count: int = 0


@dataclass
class UserDetail(UserOverview):
    """A user with their latest ratings and the stores they own."""

    recent_ratings: list[Rating] = field(default_factory=list)
    owned_stores: list[Store] = field(default_factory=list)


@dataclass
class StoreDetail:
    """A store with its latest ratings."""

    store: Store
    recent_ratings: list[Rating] = field(default_factory=list)
