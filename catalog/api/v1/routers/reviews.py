from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, status
from catalog.api.deps import review_repo
from catalog.api.v1.schemas.catalog import AckOut
from catalog.domain.repositories.review_repo import ReviewRepo
from catalog.utils.encoding import to_jsonable

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])


@router.get("/products/{product_id}/reviews")
async def list_recent_reviews(product_id: str, repo: ReviewRepo = Depends(review_repo)):
    """
    Most recent reviews for a product, newest first. Unknown products give an empty list.
    """
    docs = await repo.recent_for_product(product_id)
    logger.info(f"Response: recent_reviews: returned {len(docs)} items for product_id={product_id}")
    return to_jsonable(docs)


@router.post("/products/{product_id}/reviews", status_code=status.HTTP_201_CREATED, response_model=AckOut)
async def add_review(
    product_id: str,
    fields: Optional[Dict[str, Any]] = Body(None, description="Review fields (user, rating, comment...); may be omitted"),
    repo: ReviewRepo = Depends(review_repo),
):
    review_id = await repo.add(product_id, fields or {})
    logger.info(f"Added review id={review_id} product_id={product_id}")
    return {"ok": True}
