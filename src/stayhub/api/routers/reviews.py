"""
stayhub.api.routers.reviews

Guest reviews of properties.

Responsibilities:
- Public list (optional property filter) and detail APIs.
- Authenticated create/update/delete; user and property must exist.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from stayhub.api.deps import db_session, ensure_references
from stayhub.auth.deps import get_principal
from stayhub.auth.models import Principal
from stayhub.db.repositories.reviews import ReviewRepo
from stayhub.observability.logging import get_logger

router = APIRouter(prefix="/reviews", tags=["reviews"])
log = get_logger(__name__)


class ReviewCreateRequest(BaseModel):
    user_id: str = Field(min_length=1)
    property_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    comment: str = Field(min_length=1)


class ReviewUpdateRequest(BaseModel):
    user_id: str | None = Field(default=None, min_length=1)
    property_id: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=5)
    comment: str | None = Field(default=None, min_length=1)


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    property_id: str
    rating: int
    comment: str


@router.get("", response_model=list[ReviewResponse])
async def list_reviews(
    property_id: str | None = Query(default=None),
    session: AsyncSession = Depends(db_session),
) -> list[ReviewResponse]:
    reviews = await ReviewRepo(session).list(property_id=property_id)
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(
    review_id: str, session: AsyncSession = Depends(db_session)
) -> ReviewResponse:
    review = await ReviewRepo(session).get(review_id)
    if review is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Review not found")
    return ReviewResponse.model_validate(review)


@router.post("", response_model=ReviewResponse, status_code=HTTP_201_CREATED)
async def create_review(
    body: ReviewCreateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> ReviewResponse:
    await ensure_references(session, user_id=body.user_id, property_id=body.property_id)
    review = await ReviewRepo(session).create(
        user_id=body.user_id,
        property_id=body.property_id,
        rating=body.rating,
        comment=body.comment,
    )
    await session.commit()
    log.info("review_created", review_id=review.id, actor=principal.subject)
    return ReviewResponse.model_validate(review)


@router.put("/{review_id}", response_model=ReviewResponse, dependencies=[Depends(get_principal)])
async def update_review(
    review_id: str,
    body: ReviewUpdateRequest,
    session: AsyncSession = Depends(db_session),
) -> ReviewResponse:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="No fields to update")

    reviews = ReviewRepo(session)
    review = await reviews.get(review_id)
    if review is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Review not found")

    await ensure_references(
        session, user_id=changes.get("user_id"), property_id=changes.get("property_id")
    )
    await reviews.update(review, changes)
    await session.commit()
    return ReviewResponse.model_validate(review)


@router.delete("/{review_id}", dependencies=[Depends(get_principal)])
async def delete_review(
    review_id: str, session: AsyncSession = Depends(db_session)
) -> dict[str, str]:
    reviews = ReviewRepo(session)
    if await reviews.get(review_id) is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Review not found")
    await reviews.delete(review_id)
    await session.commit()
    return {"message": f"Review {review_id} deleted successfully"}


# --- Module Notes -----------------------------------------------------------
# Ratings are bounded (1..5) by the request model, not by the table.
