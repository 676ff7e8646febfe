"""
Sample-data bootstrap for a fresh environment.

Drops products/categories/reviews, reinserts the fixed sample set and
(re)creates the supporting indexes. Re-running converges to the same
state, but anything written through the live API is lost, hence the
explicit `allow_destructive` guard.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from catalog.core.errors import SeedRefusedError
from catalog.domain.models.product import Category, Product, Ratings, Review, UserRef
from catalog.domain.services.constants import CATEGORIES, PRODUCTS, REVIEWS, SEEDED_COLLECTIONS

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    Product(
        _id="SKU-1001",
        name="Noise-Cancelling Headphones",
        brand="AcoustiX",
        price=149.99,
        in_stock=True,
        categories=["audio", "accessories"],
        specs={"color": "black", "weight_grams": 250, "battery_hours": 30},
        tags=["wireless", "bluetooth", "ANC"],
        ratings=Ratings(average=4.5, count=124),
    ),
    Product(
        _id="SKU-1002",
        name="Portable Bluetooth Speaker",
        brand="SoundBay",
        price=89.99,
        in_stock=True,
        categories=["audio"],
        specs={"waterproof": "IPX7", "battery_hours": 12, "color": "blue"},
        tags=["portable", "bass"],
        ratings=Ratings(average=4.1, count=80),
    ),
    Product(
        _id="SKU-2001",
        name="USB-C Charger 65W",
        brand="ChargePro",
        price=39.99,
        in_stock=True,
        categories=["power", "accessories"],
        specs={"color": "white", "wattage": 65, "ports": ["USB-C"]},
        tags=["fast-charge", "compact"],
        ratings=Ratings(average=4.3, count=56),
    ),
]

SAMPLE_CATEGORIES = [
    Category(slug="audio", display_name="Audio", description="Headphones, speakers, audio gear"),
    Category(slug="accessories", display_name="Accessories", description="Cables, chargers, cases"),
    Category(slug="power", display_name="Power", description="Charging devices and power banks"),
]

# (product_id, user id, user name, rating, comment); timestamps are taken at seed time
SAMPLE_REVIEWS = [
    ("SKU-1001", "U-001", "Alice", 5, "Excellent noise cancellation!"),
    ("SKU-1001", "U-002", "Bob", 4, "Great sound, a bit tight fit."),
    ("SKU-2001", "U-003", "Charlie", 5, "Charges my laptop fast."),
]

# collection -> [(keys, name)]
INDEXES = {
    PRODUCTS: [
        ([("categories", ASCENDING)], "categories_1"),
        ([("price", ASCENDING), ("in_stock", ASCENDING)], "price_1_in_stock_1"),
    ],
    REVIEWS: [
        ([("product_id", ASCENDING), ("created_at", DESCENDING)], "product_id_1_created_at_-1"),
    ],
}


def build_reviews() -> List[Review]:
    return [
        Review(
            product_id=pid,
            user=UserRef(id=uid, name=uname),
            rating=rating,
            comment=comment,
            created_at=datetime.now(timezone.utc),
        )
        for pid, uid, uname, rating, comment in SAMPLE_REVIEWS
    ]


async def bootstrap(db: AsyncIOMotorDatabase, *, allow_destructive: bool) -> Dict[str, Any]:
    """
    Wipe and repopulate the sample collections, then create indexes.
    Returns {"inserted": {collection: n}, "indexes": {collection: [names]}}.
    """
    if not allow_destructive:
        raise SeedRefusedError(
            f"refusing to drop {', '.join(SEEDED_COLLECTIONS)} in db={db.name}; "
            "set SEED_ALLOW_DESTRUCTIVE=true or pass --force"
        )

    t0 = time.perf_counter()
    logger.info("seed start db=%s", db.name)

    for name in SEEDED_COLLECTIONS:
        await db.drop_collection(name)  # no-op when absent
    logger.info("seed dropped collections=%s", list(SEEDED_COLLECTIONS))

    docs = {
        PRODUCTS: [p.model_dump(by_alias=True) for p in SAMPLE_PRODUCTS],
        CATEGORIES: [c.model_dump() for c in SAMPLE_CATEGORIES],
        REVIEWS: [r.model_dump() for r in build_reviews()],
    }
    inserted: Dict[str, int] = {}
    for name, batch in docs.items():
        res = await db[name].insert_many(batch)
        inserted[name] = len(res.inserted_ids)
    logger.info("seed inserted=%s", inserted)

    indexes: Dict[str, List[str]] = {}
    for name, specs in INDEXES.items():
        for keys, index_name in specs:
            created = await db[name].create_index(keys, name=index_name)
            indexes.setdefault(name, []).append(created)
    logger.info("seed indexes=%s", indexes)

    logger.info("seed done db=%s total_time=%.3fs", db.name, time.perf_counter() - t0)
    return {"inserted": inserted, "indexes": indexes}
