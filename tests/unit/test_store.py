
from datetime import datetime, timezone

import pytest

from moviereview.models.watchlist import WatchlistEntry
from moviereview.repositories.store import RecordStore, WATCHLISTS, MOVIES


def _entry(user_id=1, movie_id=1):
    return WatchlistEntry(user_id=user_id, movie_id=movie_id, date_added=datetime.now(timezone.utc))


def test_insert_assigns_increasing_ids_per_collection():
    store = RecordStore()

    first = store.insert(WATCHLISTS, _entry(movie_id=1))
    second = store.insert(WATCHLISTS, _entry(movie_id=2))

    assert (first, second) == (1, 2)
    assert store.get_by_id(WATCHLISTS, 2).movie_id == 2
    # Other collections keep their own counters
    assert store.find_all(MOVIES) == []


def test_ids_are_not_reused_after_remove():
    store = RecordStore()
    store.insert(WATCHLISTS, _entry(movie_id=1))
    store.insert(WATCHLISTS, _entry(movie_id=2))

    removed = store.remove(WATCHLISTS, lambda w: w.movie_id == 2)
    new_id = store.insert(WATCHLISTS, _entry(movie_id=3))

    assert removed == 1
    assert new_id == 3
    assert [w.id for w in store.find_all(WATCHLISTS)] == [1, 3]


def test_get_by_id_missing_returns_none():
    store = RecordStore()
    assert store.get_by_id(MOVIES, 42) is None


def test_remove_without_match_returns_zero():
    store = RecordStore()
    store.insert(WATCHLISTS, _entry())
    assert store.remove(WATCHLISTS, lambda w: w.user_id == 99) == 0
    assert store.count(WATCHLISTS) == 1


def test_find_all_returns_copy_in_insertion_order():
    store = RecordStore()
    for movie_id in (3, 1, 2):
        store.insert(WATCHLISTS, _entry(movie_id=movie_id))

    records = store.find_all(WATCHLISTS)
    records.clear()

    assert [w.movie_id for w in store.find_all(WATCHLISTS)] == [3, 1, 2]


def test_unknown_collection_raises_key_error():
    store = RecordStore()
    with pytest.raises(KeyError):
        store.find_all("directors")
