from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from usertasks.database import get_database
from usertasks.auth.service import AuthService
from usertasks.auth.repository import MongoUserRepository, UserRepositoryInterface
from usertasks.errors import ForbiddenError, UnauthenticatedError


# HTTP Bearer token scheme - auto_error=False to handle missing tokens ourselves
bearer_scheme = HTTPBearer(auto_error=False, description="Bearer Token")


async def get_user_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> UserRepositoryInterface:
    """Dependency to get user repository instance."""
    return MongoUserRepository(db)


async def get_auth_service(
    repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)]
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(repository)


async def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """
    Resolve the caller's user id from the bearer token.

    No token is 401; a token that fails verification is 403. Only the
    signature and expiry are checked, the user is not looked up.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()

    user_id = auth_service.decode_token(credentials.credentials)
    if user_id is None:
        raise ForbiddenError()
    return user_id


# Type alias for cleaner dependency injection
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
