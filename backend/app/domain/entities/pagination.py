"""Offset pagination primitives shared by every listing query."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.domain.exceptions import DomainValidationError

T = TypeVar("T")

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """A validated page number plus a limit clamped to [1, MAX_LIMIT]."""

    page: int = 1
    limit: int = DEFAULT_LIMIT

    @classmethod
    def of(cls, page: int = 1, limit: int = DEFAULT_LIMIT) -> "PageRequest":
        if page < 1:
            raise DomainValidationError("page", "must be greater than or equal to 1")
        return cls(page=page, limit=min(max(limit, 1), MAX_LIMIT))

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """One page of results together with the numbers needed to render pagers."""

    items: list[T]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0
