# catalog/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Any, Optional
import logging
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson.errors import InvalidDocument
from pymongo.errors import DuplicateKeyError, PyMongoError
from catalog.core.errors import Created, DuplicateKey, StoreError, InsertOutcome
from catalog.domain.services.constants import PRODUCTS

logger = logging.getLogger(__name__)


class ProductRepo:
    """
    Product repository backed by the 'products' collection.
    Documents are keyed by the caller-supplied string `_id` (e.g. "SKU-1001");
    every method is exactly one round trip to the store.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = PRODUCTS):
        self.col = db[collection_name]

    async def insert(self, doc: dict[str, Any]) -> InsertOutcome:
        """
        Insert `doc` as a new product.
        Store rejections are returned, not raised: uniqueness of `_id` is the store's job.
        """
        try:
            res = await self.col.insert_one(doc)
        except DuplicateKeyError as e:
            logger.info("product insert rejected (duplicate) id=%s", doc.get("_id"))
            return DuplicateKey(message=str(e))
        except (PyMongoError, InvalidDocument, OverflowError) as e:
            # BSON encoding errors (oversized ints, NUL in keys, >16MB) are raised client-side
            logger.warning("product insert failed id=%s: %s", doc.get("_id"), e)
            return StoreError(message=str(e))
        return Created(id=res.inserted_id)

    async def get(self, product_id: str) -> Optional[dict]:
        doc = await self.col.find_one({"_id": product_id})
        logger.info("product lookup id=%s found=%s", product_id, doc is not None)
        return doc

    async def update_fields(self, product_id: str, fields: dict[str, Any]) -> tuple[int, int]:
        """
        Merge `fields` into the product with `$set`; unnamed fields are untouched.
        Returns (matched, modified). An empty field set is reported without writing.
        """
        if not fields:
            matched = await self.col.count_documents({"_id": product_id}, limit=1)
            return matched, 0
        res = await self.col.update_one({"_id": product_id}, {"$set": fields})
        return res.matched_count, res.modified_count

    async def delete(self, product_id: str) -> int:
        res = await self.col.delete_one({"_id": product_id})
        return res.deleted_count
