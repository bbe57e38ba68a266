"""
User Tasks API - Authentication Schemas

Pydantic models for user and login requests and responses.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserLoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str


class UserResponse(BaseModel):
    """Public user information. The password hash is never exposed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    username: str
    email: str
    created_at: datetime


class TokenResponse(BaseModel):
    """Response schema for successful authentication."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    access_token: str
    token_type: str = "bearer"
