# catalog/domain/repositories/review_repo.py

from __future__ import annotations
from typing import Any, List
from datetime import datetime, timezone
import logging
from motor.motor_asyncio import AsyncIOMotorDatabase
from catalog.domain.services.constants import REVIEWS, RECENT_REVIEWS_LIMIT

logger = logging.getLogger(__name__)


class ReviewRepo:
    """
    Review repository backed by the 'reviews' collection.
    Reviews reference products by `product_id` only; orphans are allowed.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = REVIEWS):
        self.col = db[collection_name]

    async def recent_for_product(self, product_id: str, limit: int = RECENT_REVIEWS_LIMIT) -> List[dict]:
        # Served by the {product_id: 1, created_at: -1} index; _id breaks same-millisecond ties
        cursor = (
            self.col.find({"product_id": product_id})
            .sort([("created_at", -1), ("_id", -1)])
            .limit(limit)
        )
        docs = await cursor.to_list(length=limit)
        logger.info("recent reviews product_id=%s items=%s", product_id, len(docs))
        return docs

    async def add(self, product_id: str, fields: dict[str, Any]) -> Any:
        """
        Insert a review built from caller `fields`.
        `product_id` and `created_at` are always server-assigned.
        """
        review = {
            **fields,
            "product_id": product_id,
            "created_at": datetime.now(timezone.utc),
        }
        res = await self.col.insert_one(review)
        logger.info("review inserted id=%s product_id=%s", res.inserted_id, product_id)
        return res.inserted_id
