
from fastapi import APIRouter, Depends, Request, status

from ..schemas.auth import UserCreate, UserLogin, AuthResponse
from ..dependencies import get_auth_service
from ..services.auth_service import AuthService
from ..limiter import limiter

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
async def register(
    user_data: UserCreate,
    request: Request,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user and return a session token"""
    return await service.register_user(user_data)


@router.post("/login", response_model=AuthResponse)
@limiter.limit("10/minute")
async def login(
    login_data: UserLogin,
    request: Request,
    service: AuthService = Depends(get_auth_service)
):
    """Login with email and password to get a JWT token"""
    return await service.authenticate_user(login_data)
