"""
User Tasks API - Database Module

MongoDB connection management using Motor (async driver).
"""

import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from usertasks.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: AsyncIOMotorClient | None = None
        self.db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        """Connect to MongoDB."""
        self.client = AsyncIOMotorClient(self.settings.MONGODB_URI)
        self.db = self.client[self.settings.MONGODB_DATABASE]
        logger.info(f"Connected to MongoDB database {self.settings.MONGODB_DATABASE}")

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get the database instance."""
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db

    async def ensure_indexes(self) -> None:
        """Create the indexes that back uniqueness and per-user lookups."""
        db = self.get_database()
        await db["users"].create_index([("username", ASCENDING)], unique=True)
        await db["users"].create_index([("email", ASCENDING)], unique=True)
        await db["tasks"].create_index([("user_id", ASCENDING)])


async def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Dependency to get the database bound to the running application."""
    return request.app.state.database.get_database()
