from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from ..models.base import CamelModel
from .review import UserReview


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdate(CamelModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    profile_picture: Optional[str] = None


class UserPublic(CamelModel):
    """Account fields that are safe to hand back to any client."""
    id: int
    username: str
    email: str
    profile_picture: str


class UserProfile(UserPublic):
    join_date: datetime
    reviews: List[UserReview] = []


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserPublic
