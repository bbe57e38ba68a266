import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import bcrypt
from jose import jwt, JWTError

from usertasks.config import Settings, settings as default_settings
from usertasks.auth.models import User
from usertasks.auth.repository import UserRepositoryInterface
from usertasks.errors import DuplicateUserError, InvalidPasswordError, UserNotFoundError

logger = logging.getLogger(__name__)


# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


class AuthService:
    """Authentication service with password hashing and JWT operations."""

    def __init__(self, repository: UserRepositoryInterface, settings: Settings = default_settings):
        self.repository = repository
        self.settings = settings

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
        salt = bcrypt.gensalt(rounds=self.settings.BCRYPT_ROUNDS)
        return bcrypt.hashpw(password_bytes, salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        password_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
        hashed_bytes = hashed_password.encode("utf-8")
        return bcrypt.checkpw(password_bytes, hashed_bytes)

    def create_access_token(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token carrying the ``userId`` claim."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

        now = datetime.now(timezone.utc)
        to_encode = {
            "userId": user_id,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(
            to_encode,
            self.settings.JWT_SECRET_KEY,
            algorithm=self.settings.JWT_ALGORITHM,
        )

    def decode_token(self, token: str) -> Optional[str]:
        """Decode and validate a JWT token. Returns user_id if valid."""
        try:
            payload = jwt.decode(
                token,
                self.settings.JWT_SECRET_KEY,
                algorithms=[self.settings.JWT_ALGORITHM],
            )
        except JWTError:
            return None
        user_id = payload.get("userId")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id

    async def register_user(self, username: str, email: str, password: str) -> User:
        """Register a new user. Raises DuplicateUserError if username or email is taken."""
        if await self.repository.find_by_username_or_email(username, email) is not None:
            logger.info(f"Registration rejected, username or email in use: {username}")
            raise DuplicateUserError()

        password_hash = self.hash_password(password)
        user = User.create(username=username, email=email, password_hash=password_hash)
        return await self.repository.create(user)

    async def authenticate_user(self, email: str, password: str) -> User:
        """Authenticate user by email and password."""
        user = await self.repository.get_by_email(email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise UserNotFoundError()
        if not self.verify_password(password, user.password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise InvalidPasswordError()
        return user

    async def list_users(self) -> List[User]:
        return await self.repository.list_all()
