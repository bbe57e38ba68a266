"""
User Tasks API - Authentication Module

User registration, login and bearer-token authentication.
"""

from usertasks.auth.router import router as auth_router
from usertasks.auth.dependencies import get_current_user_id, CurrentUserId

__all__ = ["auth_router", "get_current_user_id", "CurrentUserId"]
