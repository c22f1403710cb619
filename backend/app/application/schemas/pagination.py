"""Pagination envelope shared by listing endpoints."""

from pydantic import BaseModel

from app.domain.entities import Page


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginationMeta":
        return cls(page=page.page, limit=page.limit, total=page.total, pages=page.pages)
