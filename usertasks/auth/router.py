"""
User Tasks API - User Router

Endpoints for user registration, user listing and login.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from usertasks.auth.schemas import (
    UserRegisterRequest,
    UserLoginRequest,
    UserResponse,
    TokenResponse,
)
from usertasks.auth.models import User
from usertasks.auth.service import AuthService
from usertasks.auth.dependencies import get_auth_service
from usertasks.errors import UserNotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


def _user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        created_at=user.created_at,
    )


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Users"],
    summary="Create a new user",
    responses={400: {"description": "Missing field, or username or email already exists"}},
)
async def register(
    request: UserRegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserResponse:
    """
    Register a new user.

    Username and email must both be unused. The password is stored as a
    bcrypt hash and is not part of the response.
    """
    user = await auth_service.register_user(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    logger.info(f"Registered user {user.id} ({user.username})")
    return _user_to_response(user)


@router.get(
    "/users",
    response_model=List[UserResponse],
    tags=["Users"],
    summary="Get all users",
)
async def list_users(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> List[UserResponse]:
    """Retrieve all users."""
    users = await auth_service.list_users()
    return [_user_to_response(user) for user in users]


@router.post(
    "/login",
    response_model=TokenResponse,
    tags=["Users Operations"],
    summary="User login",
    responses={400: {"description": "Unknown email or wrong password"}},
)
async def login(
    request: UserLoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """
    Authenticate with email and password and return a signed access token.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <accessToken>`
    """
    try:
        user = await auth_service.authenticate_user(
            email=request.email,
            password=request.password,
        )
    except UserNotFoundError:
        raise ValidationError("User not found")

    access_token = auth_service.create_access_token(user_id=user.id)
    logger.info(f"User {user.id} logged in")
    return TokenResponse(access_token=access_token)
