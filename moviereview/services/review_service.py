import logging
from typing import List

from ..exceptions import ConflictError, NotFoundError, ValidationError
from ..models.review import Review
from ..repositories.store import RecordStore
from ..repositories.movie_repository import MovieRepository
from ..repositories.review_repository import ReviewRepository
from ..repositories.user_repository import UserRepository
from ..schemas.review import ReviewWithAuthor
from .rating_service import RatingAggregator

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown User"


async def with_authors(reviews: List[Review], user_repo: UserRepository) -> List[ReviewWithAuthor]:
    joined = []
    for review in reviews:
        author = await user_repo.get_by_id(review.user_id)
        joined.append(ReviewWithAuthor(
            **review.model_dump(),
            username=author.username if author else UNKNOWN_AUTHOR,
            user_profile_picture=author.profile_picture if author else None,
        ))
    return joined


def _validate_review(rating: int, review_text: str) -> str:
    errors = []
    if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
        errors.append({"field": "rating", "message": "Rating must be an integer between 1 and 5"})
    review_text = (review_text or "").strip()
    if not review_text:
        errors.append({"field": "reviewText", "message": "Review text must not be empty"})
    if errors:
        raise ValidationError(errors=errors)
    return review_text


class ReviewService:
    def __init__(
        self,
        store: RecordStore,
        movie_repo: MovieRepository,
        review_repo: ReviewRepository,
        user_repo: UserRepository,
        aggregator: RatingAggregator
    ):
        self.store = store
        self.movie_repo = movie_repo
        self.review_repo = review_repo
        self.user_repo = user_repo
        self.aggregator = aggregator

    async def add_review(self, movie_id: int, user_id: int, rating: int, review_text: str) -> ReviewWithAuthor:
        review_text = _validate_review(rating, review_text)

        async with self.store.lock:
            if await self.movie_repo.get_by_id(movie_id) is None:
                raise NotFoundError("Movie not found")

            if await self.review_repo.get_by_user_and_movie(user_id, movie_id):
                raise ConflictError("You have already reviewed this movie")

            review = await self.review_repo.create_review(movie_id, user_id, rating, review_text)
            await self.aggregator.recompute(movie_id)

        logger.info("Review created", extra={"review_id": review.id, "movie_id": movie_id, "user_id": user_id})
        joined = await with_authors([review], self.user_repo)
        return joined[0]

    async def list_reviews(self, movie_id: int) -> List[ReviewWithAuthor]:
        if await self.movie_repo.get_by_id(movie_id) is None:
            raise NotFoundError("Movie not found")
        reviews = await self.review_repo.get_for_movie(movie_id)
        return await with_authors(reviews, self.user_repo)
