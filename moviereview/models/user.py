from datetime import datetime

from pydantic import Field

from .base import CamelModel


class Account(CamelModel):
    id: int = 0
    username: str
    email: str
    hashed_password: str = Field(..., exclude=True)
    profile_picture: str
    join_date: datetime
