"""SQLAlchemy ORM model for the Rating entity."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database.base import Base
from app.infrastructure.database.models._timestamps import utcnow
from app.infrastructure.database.models.store import StoreModel
from app.infrastructure.database.models.user import UserModel


class RatingModel(Base):
    """ORM model — maps to the 'ratings' table. One row per (user, store)."""

    __tablename__ = "ratings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    store_id: Mapped[int] = mapped_column(ForeignKey("stores.id", ondelete="CASCADE"), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    user: Mapped[UserModel] = relationship(UserModel)
    store: Mapped[StoreModel] = relationship(StoreModel)

    __table_args__ = (
        UniqueConstraint("user_id", "store_id", name="uq_ratings_user_store"),
        CheckConstraint("score BETWEEN 1 AND 5", name="score_range"),
        Index("ix_ratings_store_created", "store_id", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<RatingModel(id={self.id}, user={self.user_id}, "
            f"store={self.store_id}, score={self.score})>"
        )
