"""Pydantic DTOs for ratings and store rating summaries."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt

from app.domain.entities import MAX_SCORE, MIN_SCORE, Rating

from .user import UserIdentityResponse


class RatingCreate(BaseModel):
    """Submit (or resubmit) the caller's rating for a store."""

    score: StrictInt = Field(..., ge=MIN_SCORE, le=MAX_SCORE, examples=[4])
    comment: str | None = Field(None, max_length=1000, examples=["Friendly staff"])


class MyRatingResponse(BaseModel):
    """The caller's own rating — no rater identity needed."""

    id: int
    score: int
    comment: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class RatingResponse(MyRatingResponse):
    """A rating together with the public identity of whoever gave it."""

    user: UserIdentityResponse | None = None

    @classmethod
    def from_entity(cls, rating: Rating) -> "RatingResponse":
        return cls(
            id=rating.id,
            score=rating.score,
            comment=rating.comment,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
            user=UserIdentityResponse.model_validate(rating.rater) if rating.rater else None,
        )


class StoreIdentityResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class StoreRatingsResponse(BaseModel):
    store: StoreIdentityResponse
    ratings: list[RatingResponse]


class StoreSummaryResponse(BaseModel):
    store: StoreIdentityResponse
    avg_rating: float
    rating_count: int
