# catalog/db/mongo.py
from __future__ import annotations
import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from catalog.core.config import Settings
import certifi

logger = logging.getLogger(__name__)


class MongoStore:
    """
    Owns the single Motor client of the process.
    Built once at startup and handed to the request layer through app.state;
    the driver does the connection pooling.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: AsyncIOMotorClient | None = None
        self._db: AsyncIOMotorDatabase | None = None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        assert self._db is not None, "Mongo DB not initialized"
        return self._db

    def _new_client(self) -> AsyncIOMotorClient:
        s = self.settings
        kwargs = dict(
            uuidRepresentation="standard",
            tz_aware=True,                      # datetimes come back as UTC, serialized with an offset
            serverSelectionTimeoutMS=s.MONGO_TIMEOUT_MS,
            connectTimeoutMS=s.MONGO_TIMEOUT_MS,
        )
        if s.MONGO_TLS:
            kwargs.update(tls=True, tlsCAFile=certifi.where())  # explicit CA bundle for containers
        return AsyncIOMotorClient(s.MONGO_URL, **kwargs)

    async def connect(self) -> None:
        """
        Create the client and ping the server.
        Unlike a lazy client, a failed ping is fatal: the caller must not serve traffic.
        """
        self._client = self._new_client()
        self._db = self._client[self.settings.DB_NAME]
        try:
            await self._client.admin.command("ping")
        except Exception:
            self.close()
            raise
        logger.info("Mongo connected db=%s", self.settings.DB_NAME)

    def close(self) -> None:
        if self._client:
            self._client.close()
        self._client = None
        self._db = None
