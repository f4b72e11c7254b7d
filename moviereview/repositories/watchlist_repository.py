from datetime import datetime, timezone
from typing import List, Optional

from ..models.watchlist import WatchlistEntry
from .store import RecordStore, WATCHLISTS


class WatchlistRepository:
    def __init__(self, store: RecordStore):
        self.store = store

    async def get_for_user(self, user_id: int) -> List[WatchlistEntry]:
        return [w for w in self.store.find_all(WATCHLISTS) if w.user_id == user_id]

    async def get_entry(self, user_id: int, movie_id: int) -> Optional[WatchlistEntry]:
        return next(
            (w for w in self.store.find_all(WATCHLISTS) if w.user_id == user_id and w.movie_id == movie_id),
            None
        )

    async def add_entry(self, user_id: int, movie_id: int) -> WatchlistEntry:
        entry = WatchlistEntry(user_id=user_id, movie_id=movie_id, date_added=datetime.now(timezone.utc))
        self.store.insert(WATCHLISTS, entry)
        return entry

    async def remove_entry(self, user_id: int, movie_id: int) -> int:
        return self.store.remove(WATCHLISTS, lambda w: w.user_id == user_id and w.movie_id == movie_id)
