from datetime import datetime

from .base import CamelModel


class WatchlistEntry(CamelModel):
    id: int = 0
    user_id: int
    movie_id: int
    date_added: datetime
