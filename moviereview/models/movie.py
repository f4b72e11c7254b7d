from enum import Enum
from typing import List

from pydantic import Field

from .base import CamelModel

EARLIEST_RELEASE_YEAR = 1888  # Roundhay Garden Scene
RELEASE_YEAR_HORIZON = 10


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    BIOGRAPHY = "Biography"
    COMEDY = "Comedy"
    CRIME = "Crime"
    DOCUMENTARY = "Documentary"
    DRAMA = "Drama"
    FAMILY = "Family"
    FANTASY = "Fantasy"
    FILM_NOIR = "Film-Noir"
    HISTORY = "History"
    HORROR = "Horror"
    MUSIC = "Music"
    MUSICAL = "Musical"
    MYSTERY = "Mystery"
    ROMANCE = "Romance"
    SCI_FI = "Sci-Fi"
    SPORT = "Sport"
    THRILLER = "Thriller"
    WAR = "War"
    WESTERN = "Western"


class CastMember(CamelModel):
    name: str = Field(..., min_length=1)
    role: str = "Actor"


class Movie(CamelModel):
    """
    Catalog entry. `average_rating` and `total_reviews` are owned by the
    RatingAggregator and never taken from client input.
    """
    id: int = 0
    title: str
    genre: List[str]
    release_year: int
    director: str
    cast: List[CastMember] = []
    synopsis: str = ""
    poster_url: str
    average_rating: float = 0.0
    total_reviews: int = 0
