
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from moviereview.main import app
from moviereview.dependencies import get_store
from moviereview.limiter import limiter
from moviereview.repositories.store import RecordStore
from moviereview.repositories.movie_repository import MovieRepository
from moviereview.repositories.review_repository import ReviewRepository
from moviereview.repositories.user_repository import UserRepository
from moviereview.repositories.watchlist_repository import WatchlistRepository


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def movie_repo(store):
    return MovieRepository(store)


@pytest.fixture
def review_repo(store):
    return ReviewRepository(store)


@pytest.fixture
def user_repo(store):
    return UserRepository(store)


@pytest.fixture
def watchlist_repo(store):
    return WatchlistRepository(store)


@pytest.fixture
def make_movie(movie_repo):
    """Insert a movie with sensible defaults; keyword arguments override them."""
    async def _make(**overrides):
        data = {
            "title": "Untitled",
            "genre": ["Drama"],
            "release_year": 2000,
            "director": "Jane Doe",
            "cast": [],
        }
        rating = overrides.pop("average_rating", None)
        data.update(overrides)
        movie = await movie_repo.create_movie(data)
        if rating is not None:
            await movie_repo.update_rating(movie, rating, 0)
        return movie
    return _make


@pytest.fixture
def make_user(user_repo):
    async def _make(username="alice", email=None):
        return await user_repo.create_user(username, email or f"{username}@example.com", "not-a-real-hash")
    return _make


@pytest_asyncio.fixture
async def client(store):
    # Each test gets an empty, isolated store
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    limiter.enabled = False
    async with AsyncClient(transport=transport, base_url="http://test/api") as ac:
        yield ac
    limiter.enabled = True

    app.dependency_overrides = {}


@pytest.fixture
def register(client):
    """Register through the API and return (user json, auth headers)."""
    async def _register(username="alice", email=None, password="secret123"):
        response = await client.post("/auth/register", json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        })
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}
    return _register
