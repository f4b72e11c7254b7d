from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from ..models.base import CamelModel
from ..models.movie import Movie, CastMember, Genre, EARLIEST_RELEASE_YEAR, RELEASE_YEAR_HORIZON
from .review import ReviewWithAuthor

SORT_FIELDS = ("title", "year", "rating")


class MovieCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    genre: List[Genre] = Field(..., min_length=1)
    release_year: int
    director: str = Field(..., min_length=1, max_length=100)
    cast: List[CastMember] = []
    synopsis: str = Field("", max_length=2000)
    poster_url: Optional[str] = None

    @field_validator("release_year")
    @classmethod
    def release_year_in_range(cls, value: int) -> int:
        latest = datetime.now().year + RELEASE_YEAR_HORIZON
        if not EARLIEST_RELEASE_YEAR <= value <= latest:
            raise ValueError(f"release year must be between {EARLIEST_RELEASE_YEAR} and {latest}")
        return value


class MovieListCriteria(CamelModel):
    """Filter, sort and page parameters of a catalog listing."""
    # Search terms are matched as typed, surrounding whitespace included
    model_config = ConfigDict(str_strip_whitespace=False)

    search: Optional[str] = None
    genre: Optional[str] = None
    year: Optional[int] = None
    sort_by: str = "title"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)


class MovieListResponse(CamelModel):
    movies: List[Movie]
    total_count: int
    current_page: int
    total_pages: int


class MovieDetail(Movie):
    reviews: List[ReviewWithAuthor] = []
