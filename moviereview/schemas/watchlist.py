from typing import Optional

from pydantic import Field

from ..models.base import CamelModel
from ..models.movie import Movie
from ..models.watchlist import WatchlistEntry


class WatchlistAdd(CamelModel):
    movie_id: int = Field(..., ge=1)


class WatchlistItem(WatchlistEntry):
    movie: Optional[Movie] = None


class MessageResponse(CamelModel):
    message: str
