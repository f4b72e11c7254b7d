from datetime import datetime

from .base import CamelModel


class Review(CamelModel):
    id: int = 0
    movie_id: int
    user_id: int
    rating: int
    review_text: str
    timestamp: datetime
