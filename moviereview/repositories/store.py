import asyncio
import itertools
from typing import Callable, Dict, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

ACCOUNTS = "accounts"
MOVIES = "movies"
REVIEWS = "reviews"
WATCHLISTS = "watchlists"

COLLECTIONS = (ACCOUNTS, MOVIES, REVIEWS, WATCHLISTS)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore:
    """
    In-memory home of every record in the system.

    Each collection keeps its own id counter, so ids keep increasing after
    removals and are never handed out twice. Multi-step writes that check a
    uniqueness rule before inserting must hold `lock` for the whole sequence.
    """

    def __init__(self):
        self._collections: Dict[str, List[BaseModel]] = {name: [] for name in COLLECTIONS}
        self._counters: Dict[str, Iterator[int]] = {name: itertools.count(1) for name in COLLECTIONS}
        self.lock = asyncio.Lock()

    def _collection(self, collection: str) -> List[BaseModel]:
        try:
            return self._collections[collection]
        except KeyError:
            raise KeyError(f"Unknown collection: {collection}") from None

    def insert(self, collection: str, record: RecordT) -> int:
        records = self._collection(collection)
        record.id = next(self._counters[collection])
        records.append(record)
        return record.id

    def get_by_id(self, collection: str, record_id: int) -> Optional[BaseModel]:
        return next((r for r in self._collection(collection) if r.id == record_id), None)

    def find_all(self, collection: str) -> List[BaseModel]:
        return list(self._collection(collection))

    def remove(self, collection: str, predicate: Callable[[BaseModel], bool]) -> int:
        records = self._collection(collection)
        kept = [r for r in records if not predicate(r)]
        removed = len(records) - len(kept)
        records[:] = kept
        return removed

    def count(self, collection: str) -> int:
        return len(self._collection(collection))
