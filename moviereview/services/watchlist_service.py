import logging
from typing import List

from ..exceptions import ConflictError, NotFoundError
from ..repositories.store import RecordStore
from ..repositories.movie_repository import MovieRepository
from ..repositories.watchlist_repository import WatchlistRepository
from ..schemas.watchlist import WatchlistItem

logger = logging.getLogger(__name__)


class WatchlistService:
    def __init__(self, store: RecordStore, movie_repo: MovieRepository, watchlist_repo: WatchlistRepository):
        self.store = store
        self.movie_repo = movie_repo
        self.watchlist_repo = watchlist_repo

    async def get_watchlist(self, user_id: int) -> List[WatchlistItem]:
        items = []
        for entry in await self.watchlist_repo.get_for_user(user_id):
            movie = await self.movie_repo.get_by_id(entry.movie_id)
            items.append(WatchlistItem(**entry.model_dump(), movie=movie))
        return items

    async def add_to_watchlist(self, user_id: int, movie_id: int) -> WatchlistItem:
        async with self.store.lock:
            movie = await self.movie_repo.get_by_id(movie_id)
            if movie is None:
                raise NotFoundError("Movie not found")

            if await self.watchlist_repo.get_entry(user_id, movie_id):
                raise ConflictError("Movie already in watchlist")

            entry = await self.watchlist_repo.add_entry(user_id, movie_id)

        logger.info("Watchlist entry added", extra={"user_id": user_id, "movie_id": movie_id})
        return WatchlistItem(**entry.model_dump(), movie=movie)

    async def remove_from_watchlist(self, user_id: int, movie_id: int) -> None:
        async with self.store.lock:
            if await self.watchlist_repo.get_entry(user_id, movie_id) is None:
                raise NotFoundError("Movie not in watchlist")
            await self.watchlist_repo.remove_entry(user_id, movie_id)

        logger.info("Watchlist entry removed", extra={"user_id": user_id, "movie_id": movie_id})
