import logging
import math
import unicodedata
from typing import Callable, Dict, List

from ..exceptions import NotFoundError
from ..models.movie import Movie
from ..repositories.movie_repository import MovieRepository
from ..repositories.review_repository import ReviewRepository
from ..repositories.user_repository import UserRepository
from ..schemas.movie import MovieCreate, MovieDetail, MovieListCriteria, MovieListResponse
from .review_service import with_authors

logger = logging.getLogger(__name__)

FEATURED_COUNT = 6


def title_sort_key(movie: Movie):
    # Accent- and case-insensitive first, raw title breaks ties deterministically
    folded = unicodedata.normalize("NFKD", movie.title)
    folded = "".join(c for c in folded if not unicodedata.combining(c)).casefold()
    return folded, movie.title


def sort_movies(movies: List[Movie], sort_by: str) -> List[Movie]:
    """Stable sort: title ascending, year/rating descending. Unknown keys sort by title."""
    if sort_by == "year":
        return sorted(movies, key=lambda m: m.release_year, reverse=True)
    if sort_by == "rating":
        return sorted(movies, key=lambda m: m.average_rating, reverse=True)
    return sorted(movies, key=title_sort_key)


def _matches_search(movie: Movie, term: str) -> bool:
    return (
        term in movie.title.lower()
        or term in movie.director.lower()
        or any(term in member.name.lower() for member in movie.cast)
    )


def _build_filters(criteria: MovieListCriteria) -> List[Callable[[Movie], bool]]:
    filters = []
    if criteria.genre:
        genre = criteria.genre.lower()
        filters.append(lambda m: any(genre in g.lower() for g in m.genre))
    if criteria.year is not None:
        filters.append(lambda m: m.release_year == criteria.year)
    if criteria.search:
        term = criteria.search.lower()
        filters.append(lambda m: _matches_search(m, term))
    return filters


class CatalogService:
    def __init__(self, movie_repo: MovieRepository, review_repo: ReviewRepository, user_repo: UserRepository):
        self.movie_repo = movie_repo
        self.review_repo = review_repo
        self.user_repo = user_repo

    async def list_movies(self, criteria: MovieListCriteria) -> MovieListResponse:
        """
        Browse the catalog.
        Steps:
        1. Keep movies passing every filter (genre, year, search)
        2. Sort the whole filtered set
        3. Cut the requested page window out of it
        """
        filters = _build_filters(criteria)
        movies = [m for m in await self.movie_repo.get_all() if all(f(m) for f in filters)]
        movies = sort_movies(movies, criteria.sort_by)

        start = (criteria.page - 1) * criteria.limit
        page = movies[start:start + criteria.limit]

        return MovieListResponse(
            movies=page,
            total_count=len(movies),
            current_page=criteria.page,
            total_pages=math.ceil(len(movies) / criteria.limit),
        )

    async def featured(self) -> List[Movie]:
        movies = await self.movie_repo.get_all()
        return sorted(movies, key=lambda m: m.average_rating, reverse=True)[:FEATURED_COUNT]

    async def get_movie_detail(self, movie_id: int) -> MovieDetail:
        movie = await self.movie_repo.get_by_id(movie_id)
        if movie is None:
            raise NotFoundError("Movie not found")

        reviews = await with_authors(await self.review_repo.get_for_movie(movie_id), self.user_repo)
        return MovieDetail(**movie.model_dump(), reviews=reviews)

    async def create_movie(self, movie_data: MovieCreate) -> Movie:
        data: Dict = movie_data.model_dump()
        movie = await self.movie_repo.create_movie(data)
        logger.info("Movie created", extra={"movie_id": movie.id, "title": movie.title})
        return movie
