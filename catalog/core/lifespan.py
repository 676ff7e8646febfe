# catalog/core/lifespan.py
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from catalog.db.mongo import MongoStore
from catalog.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tests (or embedders) may inject a store before startup
    if getattr(app.state, "store", None) is not None:
        yield
        return

    settings = get_settings()

    # --- Startup ---
    # Mongo is mandatory: no degraded mode
    store = MongoStore(settings)
    try:
        await store.connect()
    except Exception as e:
        logger.critical("Mongo connection failed: %s", e)
        raise
    app.state.store = store

    # Application runs
    yield

    # --- Shutdown ---
    store.close()
    app.state.store = None
    logger.info("Mongo disconnected")
