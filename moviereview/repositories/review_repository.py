from datetime import datetime, timezone
from typing import List, Optional

from ..models.review import Review
from .store import RecordStore, REVIEWS


class ReviewRepository:
    def __init__(self, store: RecordStore):
        self.store = store

    async def get_for_movie(self, movie_id: int) -> List[Review]:
        return [r for r in self.store.find_all(REVIEWS) if r.movie_id == movie_id]

    async def get_for_user(self, user_id: int) -> List[Review]:
        return [r for r in self.store.find_all(REVIEWS) if r.user_id == user_id]

    async def get_by_user_and_movie(self, user_id: int, movie_id: int) -> Optional[Review]:
        return next(
            (r for r in self.store.find_all(REVIEWS) if r.user_id == user_id and r.movie_id == movie_id),
            None
        )

    async def create_review(self, movie_id: int, user_id: int, rating: int, review_text: str) -> Review:
        review = Review(
            movie_id=movie_id,
            user_id=user_id,
            rating=rating,
            review_text=review_text,
            timestamp=datetime.now(timezone.utc),
        )
        self.store.insert(REVIEWS, review)
        return review
