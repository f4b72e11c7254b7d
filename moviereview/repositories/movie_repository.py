from typing import List, Optional, Dict, Any
from urllib.parse import quote

from ..models.movie import Movie
from .store import RecordStore, MOVIES


def default_poster_url(title: str) -> str:
    return f"https://via.placeholder.com/300x450?text={quote(title)}"


class MovieRepository:
    def __init__(self, store: RecordStore):
        self.store = store

    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        return self.store.get_by_id(MOVIES, movie_id)

    async def get_all(self) -> List[Movie]:
        """All catalog entries in insertion order."""
        return self.store.find_all(MOVIES)

    async def create_movie(self, data: Dict[str, Any]) -> Movie:
        data = dict(data)
        if not data.get("poster_url"):
            data["poster_url"] = default_poster_url(data["title"])
        # Derived fields always start empty; only the aggregator moves them
        data["average_rating"] = 0.0
        data["total_reviews"] = 0
        movie = Movie(**data)
        self.store.insert(MOVIES, movie)
        return movie

    async def update_rating(self, movie: Movie, average_rating: float, total_reviews: int) -> Movie:
        movie.average_rating = average_rating
        movie.total_reviews = total_reviews
        return movie
