from fastapi import APIRouter, Depends, status
from typing import List

from ..exceptions import ForbiddenError
from ..models.user import Account
from ..schemas.auth import UserProfile, UserPublic, UserUpdate
from ..schemas.watchlist import MessageResponse, WatchlistAdd, WatchlistItem
from ..dependencies import get_current_user, get_user_service, get_watchlist_service
from ..services.user_service import UserService
from ..services.watchlist_service import WatchlistService

router = APIRouter(prefix="/users", tags=["users"])


def _require_owner(current_user: Account, user_id: int, action: str):
    if current_user.id != user_id:
        raise ForbiddenError(f"Not authorized to {action} this watchlist")


@router.get("/{user_id}", response_model=UserProfile)
async def get_profile(
    user_id: int,
    current_user: Account = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    return await service.get_profile(user_id)


@router.put("/{user_id}", response_model=UserPublic)
async def update_profile(
    user_id: int,
    update: UserUpdate,
    current_user: Account = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    return await service.update_profile(current_user.id, user_id, update)


@router.get("/{user_id}/watchlist", response_model=List[WatchlistItem])
async def get_watchlist(
    user_id: int,
    current_user: Account = Depends(get_current_user),
    service: WatchlistService = Depends(get_watchlist_service)
):
    _require_owner(current_user, user_id, "view")
    return await service.get_watchlist(user_id)


@router.post("/{user_id}/watchlist", response_model=WatchlistItem, status_code=status.HTTP_201_CREATED)
async def add_to_watchlist(
    user_id: int,
    item: WatchlistAdd,
    current_user: Account = Depends(get_current_user),
    service: WatchlistService = Depends(get_watchlist_service)
):
    _require_owner(current_user, user_id, "modify")
    return await service.add_to_watchlist(user_id, item.movie_id)


@router.delete("/{user_id}/watchlist/{movie_id}", response_model=MessageResponse)
async def remove_from_watchlist(
    user_id: int,
    movie_id: int,
    current_user: Account = Depends(get_current_user),
    service: WatchlistService = Depends(get_watchlist_service)
):
    _require_owner(current_user, user_id, "modify")
    await service.remove_from_watchlist(user_id, movie_id)
    return {"message": "Movie removed from watchlist"}
