
import pytest
from httpx import ASGITransport

from moviereview.client import MovieReviewAPIError, MovieReviewClient
from moviereview.main import app
from moviereview.seed_data import seed_store


@pytest.fixture
def api(client):
    # `client` installs the isolated store and disables rate limiting
    return MovieReviewClient(base_url="http://test/api", transport=ASGITransport(app=app))


@pytest.mark.asyncio
async def test_browse_review_and_watchlist(api, store):
    seed_store(store)

    async with api:
        auth = await api.register("carol", "carol@example.com", "hunter22")
        user_id = auth["user"]["id"]

        movies = await api.get_movies(search="godfather")
        godfather = movies["movies"][0]

        review = await api.add_review(godfather["id"], 2, "Too long")
        assert review["username"] == "carol"

        detail = await api.get_movie(godfather["id"])
        assert detail["averageRating"] == 2.0

        featured = await api.get_featured_movies()
        assert featured[0]["title"] == "The Shawshank Redemption"

        await api.add_to_watchlist(user_id, godfather["id"])
        assert [i["movieId"] for i in await api.get_watchlist(user_id)] == [godfather["id"]]
        await api.remove_from_watchlist(user_id, godfather["id"])
        assert await api.get_watchlist(user_id) == []


@pytest.mark.asyncio
async def test_errors_raise_api_error(api, store):
    seed_store(store)

    async with api:
        await api.register("carol", "carol@example.com", "hunter22")
        await api.add_review(1, 5, "Masterpiece")

        with pytest.raises(MovieReviewAPIError) as exc:
            await api.add_review(1, 4, "Still great")

    assert exc.value.status_code == 400
    assert exc.value.code == "conflict"


@pytest.mark.asyncio
async def test_login_stores_token(api, store):
    async with api:
        await api.register("dave", "dave@example.com", "hunter22")
        api.token = None

        with pytest.raises(MovieReviewAPIError) as exc:
            await api.get_watchlist(1)
        assert exc.value.status_code == 401

        await api.login("dave@example.com", "hunter22")
        assert await api.get_watchlist(1) == []
