"""
Seed the catalog database with sample products, categories and reviews.

    SEED_ALLOW_DESTRUCTIVE=true python -m catalog.seed
    python -m catalog.seed --force

Drops existing products/categories/reviews first.
"""
import asyncio
import logging
import sys

from catalog.core.config import get_settings
from catalog.core.errors import SeedRefusedError
from catalog.core.logging import configure_logging
from catalog.db.mongo import MongoStore
from catalog.domain.services.seed_svc import bootstrap

logger = logging.getLogger("catalog.seed")


async def seed(force: bool = False) -> int:
    settings = get_settings()
    store = MongoStore(settings)
    try:
        await store.connect()
    except Exception as e:
        logger.critical("Mongo connection failed: %s", e)
        return 1

    try:
        summary = await bootstrap(store.db, allow_destructive=force or settings.SEED_ALLOW_DESTRUCTIVE)
    except SeedRefusedError as e:
        logger.error("%s", e)
        return 1
    finally:
        store.close()

    logger.info("Seed completed for '%s' database: %s", settings.DB_NAME, summary["inserted"])
    return 0


def main():
    settings = get_settings()
    configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)
    sys.exit(asyncio.run(seed(force="--force" in sys.argv)))


if __name__ == "__main__":
    main()
