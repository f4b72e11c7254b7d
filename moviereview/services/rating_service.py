import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from ..repositories.movie_repository import MovieRepository
from ..repositories.review_repository import ReviewRepository

logger = logging.getLogger(__name__)


def average_rating(ratings: Iterable[int]) -> Tuple[float, int]:
    """Mean of `ratings` rounded half-up to one decimal, plus the count. (0.0, 0) when empty."""
    ratings = list(ratings)
    if not ratings:
        return 0.0, 0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)), len(ratings)


class RatingAggregator:
    """
    Recomputes a movie's average rating and review count from scratch.
    Runs on the review write path only; reads serve the values cached on the movie.
    """
    def __init__(self, movie_repo: MovieRepository, review_repo: ReviewRepository):
        self.movie_repo = movie_repo
        self.review_repo = review_repo

    async def recompute(self, movie_id: int) -> Tuple[float, int]:
        reviews = await self.review_repo.get_for_movie(movie_id)
        average, count = average_rating(r.rating for r in reviews)

        movie = await self.movie_repo.get_by_id(movie_id)
        if movie is not None:
            await self.movie_repo.update_rating(movie, average, count)

        logger.info(
            "Rating recomputed",
            extra={"movie_id": movie_id, "average_rating": average, "total_reviews": count}
        )
        return average, count
