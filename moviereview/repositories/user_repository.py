
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote

from ..models.user import Account
from .store import RecordStore, ACCOUNTS


def default_profile_picture(username: str) -> str:
    return f"https://ui-avatars.com/api/?name={quote(username)}&background=random"


class UserRepository:
    def __init__(self, store: RecordStore):
        self.store = store

    async def get_by_id(self, user_id: int) -> Optional[Account]:
        return self.store.get_by_id(ACCOUNTS, user_id)

    async def get_by_username(self, username: str) -> Optional[Account]:
        return next((u for u in self.store.find_all(ACCOUNTS) if u.username == username), None)

    async def get_by_email(self, email: str) -> Optional[Account]:
        email = email.strip().lower()
        return next((u for u in self.store.find_all(ACCOUNTS) if u.email == email), None)

    async def create_user(
        self,
        username: str,
        email: str,
        hashed_password: str,
        profile_picture: Optional[str] = None
    ) -> Account:
        account = Account(
            username=username,
            email=email.strip().lower(),
            hashed_password=hashed_password,
            profile_picture=profile_picture or default_profile_picture(username),
            join_date=datetime.now(timezone.utc),
        )
        self.store.insert(ACCOUNTS, account)
        return account

    async def update_user(
        self,
        account: Account,
        username: Optional[str] = None,
        email: Optional[str] = None,
        profile_picture: Optional[str] = None
    ) -> Account:
        if username:
            account.username = username
        if email:
            account.email = email.strip().lower()
        if profile_picture:
            account.profile_picture = profile_picture
        return account
