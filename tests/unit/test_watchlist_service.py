
import asyncio

import pytest

from moviereview.exceptions import ConflictError, NotFoundError
from moviereview.repositories.store import WATCHLISTS
from moviereview.services.watchlist_service import WatchlistService


@pytest.fixture
def service(store, movie_repo, watchlist_repo):
    return WatchlistService(store, movie_repo, watchlist_repo)


@pytest.mark.asyncio
async def test_add_twice_conflicts_remove_twice_not_found(service, make_movie):
    movie = await make_movie(title="Heat")

    item = await service.add_to_watchlist(1, movie.id)
    assert item.movie_id == movie.id
    assert item.movie.title == "Heat"

    with pytest.raises(ConflictError):
        await service.add_to_watchlist(1, movie.id)

    await service.remove_from_watchlist(1, movie.id)
    with pytest.raises(NotFoundError):
        await service.remove_from_watchlist(1, movie.id)

    assert await service.get_watchlist(1) == []


@pytest.mark.asyncio
async def test_add_unknown_movie(service):
    with pytest.raises(NotFoundError):
        await service.add_to_watchlist(1, 99)


@pytest.mark.asyncio
async def test_watchlists_are_per_user(service, make_movie):
    heat = await make_movie(title="Heat")
    ronin = await make_movie(title="Ronin")

    await service.add_to_watchlist(1, heat.id)
    await service.add_to_watchlist(1, ronin.id)
    await service.add_to_watchlist(2, heat.id)

    mine = await service.get_watchlist(1)
    theirs = await service.get_watchlist(2)

    assert [i.movie.title for i in mine] == ["Heat", "Ronin"]
    assert [i.movie.title for i in theirs] == ["Heat"]

    with pytest.raises(NotFoundError):
        await service.remove_from_watchlist(2, ronin.id)


@pytest.mark.asyncio
async def test_readding_after_removal_gets_a_fresh_id(service, make_movie):
    movie = await make_movie(title="Heat")

    first = await service.add_to_watchlist(1, movie.id)
    await service.remove_from_watchlist(1, movie.id)
    second = await service.add_to_watchlist(1, movie.id)

    assert second.id > first.id


@pytest.mark.asyncio
async def test_concurrent_duplicate_adds_insert_once(service, store, make_movie):
    movie = await make_movie(title="Heat")

    results = await asyncio.gather(
        *(service.add_to_watchlist(1, movie.id) for _ in range(5)),
        return_exceptions=True
    )

    assert sum(not isinstance(r, Exception) for r in results) == 1
    assert sum(isinstance(r, ConflictError) for r in results) == 4
    assert store.count(WATCHLISTS) == 1
