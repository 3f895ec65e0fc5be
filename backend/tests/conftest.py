# 테스트 공용 픽스처
# - MongoDB 없이 라우터를 검증하기 위해 저장소를 메모리 구현으로 교체 (dependency_overrides)
# - 설정 객체가 import 시점에 만들어지므로 환경변수를 가장 먼저 세팅한다

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import asyncio
from typing import Any, Dict, List, Optional
from uuid import uuid4

import pytest
from beanie import PydanticObjectId, init_beanie
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from myflix_api.main import app
from myflix_api.core.exceptions import UsernameTakenError
from myflix_api.core.security import create_access_token
from myflix_api.models.movie import Movie
from myflix_api.models.user import User
from myflix_api.repositories.movie_repository import MovieRepository
from myflix_api.repositories.user_repository import UserRepository
from myflix_api.schemas.movie_schema import MoviePublic
from myflix_api.schemas.user_schema import UserPublic


class InMemoryUserRepository:
    def __init__(self):
        self.users: Dict[str, UserPublic] = {}

    async def find_all(self) -> List[UserPublic]:
        return list(self.users.values())

    async def get_by_username(self, username: str) -> Optional[UserPublic]:
        return self.users.get(username)

    async def create(self, fields: Dict[str, Any]) -> UserPublic:
        if fields["Username"] in self.users:
            raise UsernameTakenError(fields["Username"])
        user = UserPublic(id=PydanticObjectId(), **fields)
        self.users[user.Username] = user
        return user

    async def update(self, username: str, fields: Dict[str, Any]) -> Optional[UserPublic]:
        user = self.users.get(username)
        if user is None:
            return None
        new_name = fields.get("Username", username)
        if new_name != username and new_name in self.users:
            raise UsernameTakenError(new_name)
        updated = user.model_copy(update=fields)
        del self.users[username]
        self.users[new_name] = updated
        return updated

    async def delete(self, username: str) -> bool:
        return self.users.pop(username, None) is not None

    async def push_favorite(self, username: str, movie_id: PydanticObjectId) -> Optional[UserPublic]:
        user = self.users.get(username)
        if user is not None:
            user.FavoriteMovies.append(movie_id)
        return user

    async def pull_favorite(self, username: str, movie_id: PydanticObjectId) -> Optional[UserPublic]:
        user = self.users.get(username)
        if user is not None:
            user.FavoriteMovies = [m for m in user.FavoriteMovies if m != movie_id]
        return user


class InMemoryMovieRepository:
    def __init__(self, movies: List[MoviePublic]):
        self.movies = movies

    async def find_all(self) -> List[MoviePublic]:
        return list(self.movies)

    async def get_by_title(self, title: str) -> Optional[MoviePublic]:
        return next((m for m in self.movies if m.Title == title), None)

    async def get_by_genre(self, name: str) -> Optional[MoviePublic]:
        return next((m for m in self.movies if m.Genre.Name == name), None)

    async def get_by_director(self, name: str) -> Optional[MoviePublic]:
        return next((m for m in self.movies if m.Director.Name == name), None)


SEED_MOVIES = [
    {
        "Title": "Inception",
        "Description": "A thief enters dreams to steal secrets.",
        "Genre": {"Name": "Thriller", "Description": "Suspense and tension."},
        "Director": {"Name": "Christopher Nolan", "Bio": "British-American filmmaker.", "Birth": "1970"},
        "ImagePath": "inception.png",
        "Featured": True,
    },
    {
        "Title": "Soul",
        "Description": "A musician seeks his purpose.",
        "Genre": {"Name": "Animation", "Description": "Animated feature."},
        "Director": {"Name": "Pete Docter", "Bio": "Pixar director."},
        "ImagePath": "soul.png",
        "Featured": False,
    },
]


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def movie_repo():
    return InMemoryMovieRepository([MoviePublic(id=PydanticObjectId(), **m) for m in SEED_MOVIES])


@pytest.fixture
def client(user_repo, movie_repo):
    # with 블록 없이 생성하면 startup 이벤트(MongoDB 연결)가 실행되지 않는다
    app.dependency_overrides[UserRepository] = lambda: user_repo
    app.dependency_overrides[MovieRepository] = lambda: movie_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def beanie_db():
    # 실제 Beanie Document/쿼리를 mongomock 위에서 실행 (테스트마다 새 DB)
    mongo = AsyncMongoMockClient()
    db = mongo.get_database(name=f"myflix_test_{uuid4().hex}")
    asyncio.run(init_beanie(database=db, document_models=[User, Movie]))
    return db


@pytest.fixture
def db_client(beanie_db):
    # 저장소 교체 없이 실제 UserRepository/MovieRepository를 사용
    app.dependency_overrides.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {create_access_token('alice01')}"}


@pytest.fixture
def registered_user(client):
    resp = client.post("/users", json={"Username": "alice01", "Password": "S3cure!", "Email": "alice@example.com"})
    assert resp.status_code == 201
    return resp.json()
