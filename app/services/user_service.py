"""User Service - administrator accounts"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import AuthenticationError, DuplicateKeyError, InvalidInputError
from app.core.security import get_password_hash, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


def normalize_username(username: str) -> str:
    return username.strip().lower()


class UserService:
    """Service layer for user-related operations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _check_password_length(password: str) -> None:
        if len(password) < settings.PASSWORD_MIN_LENGTH:
            raise InvalidInputError(
                f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
            )

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User or None if not found
        """
        return await self.db.get(User, user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username (case-insensitive).

        Returns:
            User or None if not found
        """
        result = await self.db.execute(
            select(User).where(User.username == normalize_username(username))
        )
        return result.scalar_one_or_none()

    async def _commit_unique(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise DuplicateKeyError("Username already exists") from exc

    async def register(self, username: str, password: str, admin_name: str) -> User:
        """
        Create an administrator account.

        Raises:
            InvalidInputError: password shorter than PASSWORD_MIN_LENGTH
            DuplicateKeyError: username already taken
        """
        self._check_password_length(password)
        if await self.get_by_username(username):
            raise DuplicateKeyError("Username already exists")

        user = User(
            username=normalize_username(username),
            hashed_password=get_password_hash(password),
            admin_name=admin_name.strip(),
        )
        self.db.add(user)
        await self._commit_unique()
        await self.db.refresh(user)
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Authenticate user with username and password.

        Returns:
            User if authenticated, None otherwise
        """
        user = await self.get_by_username(username)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    async def update_profile(
        self,
        user_id: UUID,
        admin_name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        current_password: Optional[str] = None,
    ) -> Optional[User]:
        """
        Update the fields that were provided. A new password is only accepted
        together with the correct current password.

        Raises:
            InvalidInputError: password given without current_password, or too short
            AuthenticationError: current_password is wrong
            DuplicateKeyError: new username already taken

        Returns:
            Updated user or None if not found
        """
        user = await self.get_by_id(user_id)
        if not user:
            return None

        if password:
            if not current_password:
                raise InvalidInputError("Current password is required to update password")
            if not verify_password(current_password, user.hashed_password):
                raise AuthenticationError("Current password is incorrect")
            self._check_password_length(password)
            user.hashed_password = get_password_hash(password)

        if admin_name:
            user.admin_name = admin_name.strip()

        if username:
            new_username = normalize_username(username)
            if new_username != user.username:
                if await self.get_by_username(new_username):
                    raise DuplicateKeyError("Username already exists")
                user.username = new_username

        await self._commit_unique()
        await self.db.refresh(user)
        return user
