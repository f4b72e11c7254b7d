import logging

from ..exceptions import ConflictError, ForbiddenError, NotFoundError
from ..repositories.store import RecordStore
from ..repositories.movie_repository import MovieRepository
from ..repositories.review_repository import ReviewRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import UserProfile, UserPublic, UserUpdate
from ..schemas.review import UserReview

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        store: RecordStore,
        user_repo: UserRepository,
        review_repo: ReviewRepository,
        movie_repo: MovieRepository
    ):
        self.store = store
        self.user_repo = user_repo
        self.review_repo = review_repo
        self.movie_repo = movie_repo

    async def get_profile(self, user_id: int) -> UserProfile:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        reviews = []
        for review in await self.review_repo.get_for_user(user_id):
            movie = await self.movie_repo.get_by_id(review.movie_id)
            reviews.append(UserReview(
                **review.model_dump(),
                movie_title=movie.title if movie else "Unknown Movie",
                movie_poster=movie.poster_url if movie else None,
            ))

        return UserProfile(
            id=user.id,
            username=user.username,
            email=user.email,
            profile_picture=user.profile_picture,
            join_date=user.join_date,
            reviews=reviews,
        )

    async def update_profile(self, caller_id: int, user_id: int, update: UserUpdate) -> UserPublic:
        if caller_id != user_id:
            raise ForbiddenError("Not authorized to update this profile")

        async with self.store.lock:
            user = await self.user_repo.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")

            if update.username:
                other = await self.user_repo.get_by_username(update.username)
                if other and other.id != user_id:
                    raise ConflictError("Username already taken")
            if update.email:
                other = await self.user_repo.get_by_email(update.email)
                if other and other.id != user_id:
                    raise ConflictError("Email already in use")

            await self.user_repo.update_user(
                user,
                username=update.username,
                email=update.email,
                profile_picture=update.profile_picture,
            )

        logger.info("Profile updated", extra={"user_id": user_id})
        return UserPublic.model_validate(user)
