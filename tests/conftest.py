import copy
import re
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from jose import jwt

from social_api.configs import Settings
from social_api.main import create_app
from social_api.models import UserView
from social_api.security import get_user_repository
from social_api.services import canonical_id

SECRET_KEY = "test-secret"
ALGORITHM = "HS256"


class StoredUser(UserView):
    password: str = "hashed-password"


class FakeUserRepository:
    """In-memory stand-in for the users collection."""

    def __init__(self):
        self.users: dict[str, StoredUser] = {}
        self.saves: list[str] = []

    def add(self, user: StoredUser):
        self.users[str(user.id)] = user

    async def get(self, user_id):
        user = self.users.get(canonical_id(user_id))
        return copy.deepcopy(user) if user else None

    async def get_view(self, user_id):
        user = self.users.get(canonical_id(user_id))
        if user is None:
            return None
        return UserView(**user.model_dump(exclude={"password"}))

    async def find_many(self, user_ids):
        wanted = {canonical_id(uid) for uid in user_ids}
        return [
            UserView(**user.model_dump(exclude={"password"}))
            for key, user in self.users.items()
            if key in wanted
        ]

    async def search(self, pattern):
        return [
            UserView(**user.model_dump(exclude={"password"}))
            for user in self.users.values()
            if re.search(pattern, user.username, re.IGNORECASE)
        ]

    async def recommend(self, user_id, friend_ids, limit):
        excluded = set(friend_ids) | {user_id}
        rows = [
            {
                "username": user.username,
                "mutualFriendsCount": len(set(user.friends) & set(friend_ids)),
            }
            for key, user in self.users.items()
            if key not in excluded
        ]
        rows.sort(key=lambda row: row["mutualFriendsCount"], reverse=True)
        return rows[:limit]

    async def save(self, user):
        self.saves.append(str(user.id))
        self.users[str(user.id)] = copy.deepcopy(user)


@pytest.fixture
def repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def user_factory(repository) -> Callable[..., StoredUser]:
    def factory(username: str = "user", **kwargs) -> StoredUser:
        user = StoredUser(id=ObjectId(), username=username, **kwargs)
        repository.add(user)
        return user

    return factory


@pytest.fixture
def settings() -> Settings:
    return Settings(secret_key=SECRET_KEY, algorithm=ALGORITHM, log_level="WARNING")


@pytest.fixture
def client(settings, repository) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[get_user_repository] = lambda: repository
    return TestClient(app)


def make_token(user_id: str, secret: str = SECRET_KEY, expires_in: timedelta = timedelta(hours=1)) -> str:
    payload = {"userId": user_id, "exp": datetime.now(timezone.utc) + expires_in}
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


@pytest.fixture
def auth_headers() -> Callable[[StoredUser], dict[str, str]]:
    def headers(user: StoredUser) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(str(user.id))}"}

    return headers
