"""SQLAlchemy ORM model for the Store entity and its rating aggregate."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database.base import Base
from app.infrastructure.database.models._timestamps import utcnow
from app.infrastructure.database.models.user import UserModel


class StoreModel(Base):
    """ORM model — maps to the 'stores' table.

    ``owner_id`` is a weak reference: deleting the owner only nulls it.
    """

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(400), nullable=True)
    owner_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    avg_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, server_default="0")
    rating_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    owner: Mapped[UserModel | None] = relationship(UserModel)

    __table_args__ = (
        CheckConstraint("rating_count >= 0", name="rating_count_non_negative"),
    )

    def __repr__(self) -> str:
        return (
            f"<StoreModel(id={self.id}, name='{self.name}', "
            f"avg={self.avg_rating}, count={self.rating_count})>"
        )
