import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from usertasks.auth.models import User
from usertasks.errors import DuplicateUserError

logger = logging.getLogger(__name__)


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository.

    This interface allows swapping implementations (in-memory -> MongoDB).
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    async def find_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        """Get any user holding either the username or the email."""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List every user."""
        pass


class MongoUserRepository(UserRepositoryInterface):
    """MongoDB implementation of the user repository."""

    COLLECTION_NAME = "users"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, user: User) -> User:
        """Create a new user.

        The unique indexes on username and email close the gap between the
        existence check and the insert.
        """
        try:
            await self.collection.insert_one(user.to_dict())
        except DuplicateKeyError:
            logger.warning(f"[MongoUserRepository] Duplicate key inserting user {user.username}")
            raise DuplicateUserError()
        logger.info(f"[MongoUserRepository] Created user username={user.username}, id={user.id}")
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        doc = await self.collection.find_one({"username": username})
        if doc is None:
            return None
        return User.from_dict(doc)

    async def get_by_email(self, email: str) -> Optional[User]:
        doc = await self.collection.find_one({"email": email})
        if doc is None:
            return None
        return User.from_dict(doc)

    async def find_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        doc = await self.collection.find_one({"$or": [{"username": username}, {"email": email}]})
        if doc is None:
            return None
        return User.from_dict(doc)

    async def list_all(self) -> List[User]:
        cursor = self.collection.find({}).sort("created_at", 1)
        users: List[User] = []
        async for doc in cursor:
            users.append(User.from_dict(doc))
        return users

