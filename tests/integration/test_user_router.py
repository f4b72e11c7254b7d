
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_watchlist_flow(client: AsyncClient, make_movie, register):
    movie = await make_movie(title="Heat")
    user, headers = await register("alice")
    watchlist_url = f"/users/{user['id']}/watchlist"

    added = await client.post(watchlist_url, json={"movieId": movie.id}, headers=headers)
    assert added.status_code == 201
    assert added.json()["movieId"] == movie.id
    assert added.json()["movie"]["title"] == "Heat"
    assert "dateAdded" in added.json()

    again = await client.post(watchlist_url, json={"movieId": movie.id}, headers=headers)
    assert again.status_code == 400
    assert again.json()["error"] == "Movie already in watchlist"

    listed = await client.get(watchlist_url, headers=headers)
    assert [item["movie"]["title"] for item in listed.json()] == ["Heat"]

    removed = await client.delete(f"{watchlist_url}/{movie.id}", headers=headers)
    assert removed.status_code == 200
    assert removed.json() == {"message": "Movie removed from watchlist"}

    removed_again = await client.delete(f"{watchlist_url}/{movie.id}", headers=headers)
    assert removed_again.status_code == 404
    assert removed_again.json()["error"] == "Movie not in watchlist"


@pytest.mark.asyncio
async def test_watchlist_unknown_movie(client: AsyncClient, register):
    user, headers = await register("alice")

    response = await client.post(f"/users/{user['id']}/watchlist", json={"movieId": 77}, headers=headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_watchlist_of_another_user_is_forbidden(client: AsyncClient, make_movie, register):
    movie = await make_movie(title="Heat")
    alice, alice_headers = await register("alice")
    _, bob_headers = await register("bob")
    await client.post(f"/users/{alice['id']}/watchlist", json={"movieId": movie.id}, headers=alice_headers)

    url = f"/users/{alice['id']}/watchlist"
    assert (await client.get(url, headers=bob_headers)).status_code == 403
    assert (await client.post(url, json={"movieId": movie.id}, headers=bob_headers)).status_code == 403
    assert (await client.delete(f"{url}/{movie.id}", headers=bob_headers)).status_code == 403

    # Alice's entry is untouched
    assert len((await client.get(url, headers=alice_headers)).json()) == 1


@pytest.mark.asyncio
async def test_profile_and_update(client: AsyncClient, make_movie, register):
    movie = await make_movie(title="Heat")
    alice, headers = await register("alice")
    await register("bob")
    await client.post(f"/movies/{movie.id}/reviews", json={"rating": 5, "reviewText": "great"}, headers=headers)

    profile = await client.get(f"/users/{alice['id']}", headers=headers)
    assert profile.status_code == 200
    assert "joinDate" in profile.json()
    assert profile.json()["reviews"][0]["movieTitle"] == "Heat"
    assert "hashedPassword" not in profile.json()

    taken = await client.put(f"/users/{alice['id']}", json={"username": "bob"}, headers=headers)
    assert taken.status_code == 400
    assert taken.json()["error"] == "Username already taken"

    updated = await client.put(f"/users/{alice['id']}", json={"profilePicture": "https://example.com/me.png"}, headers=headers)
    assert updated.status_code == 200
    assert updated.json()["profilePicture"] == "https://example.com/me.png"


@pytest.mark.asyncio
async def test_update_another_profile_forbidden(client: AsyncClient, register):
    alice, _ = await register("alice")
    _, bob_headers = await register("bob")

    response = await client.put(f"/users/{alice['id']}", json={"username": "mallory"}, headers=bob_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_profile_not_found(client: AsyncClient, register):
    _, headers = await register("alice")
    assert (await client.get("/users/99", headers=headers)).status_code == 404


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("http://test/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
