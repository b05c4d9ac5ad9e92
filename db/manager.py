"""
Database connection manager module.

Provides a singleton DatabaseManager class owning the Motor client and the
Beanie initialization, rebinding the client when the event loop changes.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from datetime import UTC
from typing import Any, Self

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from config import MONGODB_DATABASE, MONGODB_URI

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Singleton class to manage the MongoDB client and database connection.

    Environment Variables:
        MONGODB_URI: MongoDB URI (default: mongodb://localhost:27017)
        MONGODB_DATABASE: Database name (default: fuel_log)
    """

    _instance: DatabaseManager | None = None
    _lock = threading.Lock()

    def __new__(cls) -> Self:
        """Create or return the singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if not getattr(self, "_initialized", False):
            self._client: AsyncIOMotorClient | None = None
            self._db: AsyncIOMotorDatabase | None = None
            self._bound_loop: asyncio.AbstractEventLoop | None = None
            self._beanie_initialized = False
            self._db_name = MONGODB_DATABASE
            self._initialized = True

    def _initialize_client(self) -> None:
        client_kwargs: dict[str, Any] = {
            "tz_aware": True,
            "tzinfo": UTC,
            "retryWrites": True,
            "retryReads": True,
            "appname": "FuelLog",
        }
        try:
            self._client = AsyncIOMotorClient(MONGODB_URI, **client_kwargs)
            self._db = self._client[self._db_name]
            self._bound_loop = self._get_current_loop()
            logger.info("MongoDB client initialized for database %s", self._db_name)
        except Exception:
            logger.exception("Failed to initialize MongoDB client")
            raise

    @staticmethod
    def _get_current_loop() -> asyncio.AbstractEventLoop | None:
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def _reset(self) -> None:
        if self._client:
            try:
                self._client.close()
            except Exception as e:
                logger.warning("Error closing MongoDB client: %s", str(e))
        self._client = None
        self._db = None
        self._bound_loop = None
        self._beanie_initialized = False

    def _check_loop_and_reconnect(self) -> None:
        """Drop the client if it was bound to a closed or different loop."""
        if self._client is None or self._bound_loop is None:
            return

        current_loop = self._get_current_loop()
        if self._bound_loop.is_closed() or (
            current_loop is not None and current_loop is not self._bound_loop
        ):
            logger.info("Event loop changed, reconnecting MongoDB client")
            self._reset()

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get the database instance, initializing if necessary."""
        self._check_loop_and_reconnect()
        if self._db is None:
            self._initialize_client()
        if self._db is None:
            msg = "Database instance could not be initialized."
            raise RuntimeError(msg)
        return self._db

    async def init_beanie(self) -> None:
        """
        Initialize Beanie ODM with all document models.

        This should be called once during application startup.
        """
        self._check_loop_and_reconnect()
        if self._beanie_initialized:
            logger.debug("Beanie already initialized, skipping")
            return

        from db.models import ALL_DOCUMENT_MODELS

        await init_beanie(database=self.db, document_models=ALL_DOCUMENT_MODELS)
        self._beanie_initialized = True
        logger.info(
            "Beanie ODM initialized with %d document models",
            len(ALL_DOCUMENT_MODELS),
        )

    def close(self) -> None:
        """Close the client; the next access reconnects."""
        self._reset()
        logger.info("MongoDB client closed")


db_manager = DatabaseManager()
