from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from .config import settings
from .core.security import decode_access_token
from .exceptions import ForbiddenError, UnauthorizedError
from .models.user import Account
from .repositories.store import RecordStore
from .repositories.movie_repository import MovieRepository
from .repositories.review_repository import ReviewRepository
from .repositories.user_repository import UserRepository
from .repositories.watchlist_repository import WatchlistRepository
from .services.auth_service import AuthService
from .services.catalog_service import CatalogService
from .services.rating_service import RatingAggregator
from .services.review_service import ReviewService
from .services.user_service import UserService
from .services.watchlist_service import WatchlistService


# The store is created with the app (see main.create_app) and lives on app.state
def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_auth_service(store: RecordStore = Depends(get_store)) -> AuthService:
    return AuthService(store, UserRepository(store))


def get_catalog_service(store: RecordStore = Depends(get_store)) -> CatalogService:
    return CatalogService(MovieRepository(store), ReviewRepository(store), UserRepository(store))


def get_review_service(store: RecordStore = Depends(get_store)) -> ReviewService:
    movie_repo = MovieRepository(store)
    review_repo = ReviewRepository(store)
    return ReviewService(
        store,
        movie_repo,
        review_repo,
        UserRepository(store),
        RatingAggregator(movie_repo, review_repo)
    )


def get_watchlist_service(store: RecordStore = Depends(get_store)) -> WatchlistService:
    return WatchlistService(store, MovieRepository(store), WatchlistRepository(store))


def get_user_service(store: RecordStore = Depends(get_store)) -> UserService:
    return UserService(store, UserRepository(store), ReviewRepository(store), MovieRepository(store))


# Auth Dependencies
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)


async def get_current_user(token: str = Depends(oauth2_scheme), store: RecordStore = Depends(get_store)) -> Account:
    if not token:
        raise UnauthorizedError()

    payload = decode_access_token(token)
    if payload is None or payload.get("sub") is None:
        raise ForbiddenError("Invalid token")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise ForbiddenError("Invalid token")

    user = await UserRepository(store).get_by_id(user_id)
    if user is None:
        raise ForbiddenError("Invalid token")
    return user
