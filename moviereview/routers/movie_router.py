from fastapi import APIRouter, Depends, Query, Request, status
from typing import List, Optional

from ..schemas.movie import MovieCreate, MovieDetail, MovieListCriteria, MovieListResponse
from ..schemas.review import ReviewCreate, ReviewWithAuthor
from ..models.movie import Movie
from ..models.user import Account
from ..dependencies import get_catalog_service, get_current_user, get_review_service
from ..services.catalog_service import CatalogService
from ..services.review_service import ReviewService
from ..limiter import limiter

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=MovieListResponse)
async def list_movies(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    search: Optional[str] = None,
    genre: Optional[str] = None,
    year: Optional[int] = None,
    sort_by: str = Query("title", alias="sortBy"),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Browse movie catalog
    """
    criteria = MovieListCriteria(
        search=search, genre=genre, year=year, sort_by=sort_by, page=page, limit=limit
    )
    return await service.list_movies(criteria)


# Must stay above /{movie_id} so "featured" is not parsed as an id
@router.get("/featured", response_model=List[Movie])
async def featured_movies(service: CatalogService = Depends(get_catalog_service)):
    """Top rated movies"""
    return await service.featured()


@router.get("/{movie_id}", response_model=MovieDetail)
async def get_movie(movie_id: int, service: CatalogService = Depends(get_catalog_service)):
    return await service.get_movie_detail(movie_id)


@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
async def create_movie(
    movie_data: MovieCreate,
    current_user: Account = Depends(get_current_user),
    service: CatalogService = Depends(get_catalog_service)
):
    return await service.create_movie(movie_data)


@router.get("/{movie_id}/reviews", response_model=List[ReviewWithAuthor])
async def list_reviews(movie_id: int, service: ReviewService = Depends(get_review_service)):
    return await service.list_reviews(movie_id)


@router.post("/{movie_id}/reviews", response_model=ReviewWithAuthor, status_code=status.HTTP_201_CREATED)
@limiter.limit("20/minute")
async def add_review(
    movie_id: int,
    review_data: ReviewCreate,
    request: Request,
    current_user: Account = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service)
):
    """
    Submit a rating and review. One review per user per movie.
    """
    return await service.add_review(movie_id, current_user.id, review_data.rating, review_data.review_text)
