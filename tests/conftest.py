"""
User Tasks API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from usertasks.main import app
from usertasks.auth.dependencies import get_user_repository
from usertasks.auth.models import User
from usertasks.auth.repository import UserRepositoryInterface
from usertasks.auth.service import AuthService
from usertasks.errors import DuplicateUserError
from usertasks.tasks.repository import InMemoryTaskRepository
from usertasks.tasks.router import get_task_repository


class InMemoryUserRepository(UserRepositoryInterface):
    """In-memory user repository for testing."""

    def __init__(self):
        self._users: Dict[str, User] = {}

    async def create(self, user: User) -> User:
        """Create a new user, enforcing unique username and email."""
        if await self.find_by_username_or_email(user.username, user.email) is not None:
            raise DuplicateUserError()
        self._users[user.id] = user
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username or user.email == email:
                return user
        return None

    async def list_all(self) -> List[User]:
        return list(self._users.values())

    def clear(self) -> None:
        """Clear all users (synchronous helper for tests)."""
        self._users.clear()


# Global in-memory repositories for tests
_test_user_repository = InMemoryUserRepository()
_test_task_repository = InMemoryTaskRepository()


async def override_get_user_repository():
    """Override dependency to use in-memory user repository."""
    return _test_user_repository


async def override_get_task_repository():
    """Override dependency to use in-memory task repository."""
    return _test_task_repository


@pytest.fixture
def user_repository():
    """Provide a fresh in-memory user repository for each test."""
    _test_user_repository.clear()
    return _test_user_repository


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    _test_task_repository.clear()
    return _test_task_repository


@pytest.fixture
def auth_service(user_repository):
    return AuthService(user_repository)


@pytest.fixture
def client(user_repository, task_repository):
    """Create test client with in-memory repositories."""
    app.dependency_overrides[get_user_repository] = override_get_user_repository
    app.dependency_overrides[get_task_repository] = override_get_task_repository

    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {
        "username": "testuser",
        "email": "testuser@example.com",
        "password": "testpassword123",
    }
    client.post("/users", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post(
        "/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    return response.json()["accessToken"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def second_user_credentials():
    """Credentials for a second test user."""
    return {
        "username": "seconduser",
        "email": "second@example.com",
        "password": "secondpassword123",
    }


@pytest.fixture
def second_auth_headers(client, second_user_credentials):
    """Register a second user and return their Authorization headers."""
    client.post("/users", json=second_user_credentials)
    response = client.post(
        "/login",
        json={
            "email": second_user_credentials["email"],
            "password": second_user_credentials["password"],
        },
    )
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}
