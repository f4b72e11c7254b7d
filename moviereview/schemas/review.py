from typing import Optional

from pydantic import Field

from ..models.base import CamelModel
from ..models.review import Review


class ReviewCreate(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    review_text: str = Field(..., min_length=1, max_length=2000)


class ReviewWithAuthor(Review):
    """Review joined with the author's public profile fields."""
    username: str
    user_profile_picture: Optional[str] = None


class UserReview(Review):
    """Review joined with the reviewed movie, for profile pages."""
    movie_title: str
    movie_poster: Optional[str] = None
