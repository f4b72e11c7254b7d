
import logging

from fastapi.concurrency import run_in_threadpool

from ..exceptions import ConflictError, InvalidCredentialsError
from ..models.user import Account
from ..repositories.store import RecordStore
from ..repositories.user_repository import UserRepository
from ..schemas.auth import UserCreate, UserLogin, UserPublic, AuthResponse
from ..core.security import verify_password, get_password_hash, create_user_token

logger = logging.getLogger(__name__)


def _auth_response(account: Account, message: str) -> AuthResponse:
    return AuthResponse(
        message=message,
        token=create_user_token(account.id, account.username),
        user=UserPublic.model_validate(account),
    )


class AuthService:
    def __init__(self, store: RecordStore, user_repo: UserRepository):
        self.store = store
        self.user_repo = user_repo

    async def register_user(self, user_data: UserCreate) -> AuthResponse:
        # Argon2 is deliberately slow; keep it off the event loop
        hashed_password = await run_in_threadpool(get_password_hash, user_data.password)

        async with self.store.lock:
            if await self.user_repo.get_by_username(user_data.username):
                raise ConflictError("Username already registered")
            if await self.user_repo.get_by_email(user_data.email):
                raise ConflictError("Email already registered")

            account = await self.user_repo.create_user(user_data.username, user_data.email, hashed_password)

        logger.info("User registered", extra={"user_id": account.id})
        return _auth_response(account, "User created successfully")

    async def authenticate_user(self, login_data: UserLogin) -> AuthResponse:
        user = await self.user_repo.get_by_email(login_data.email)
        if not user:
            raise InvalidCredentialsError()
        if not await run_in_threadpool(verify_password, login_data.password, user.hashed_password):
            raise InvalidCredentialsError()

        return _auth_response(user, "Login successful")
