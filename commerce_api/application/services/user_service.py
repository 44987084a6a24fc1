"""Application service (use case) for user accounts and admin bootstrap."""

import logging

import bcrypt

from commerce_api.application.interfaces import UserRepository
from commerce_api.application.schemas.user import UserCreate
from commerce_api.domain.entities import DeletionResult, Role, User
from commerce_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

# Upper bound bcrypt accepts for a password
_BCRYPT_MAX_BYTES = 72


class UserService:
    """User CRUD. Authentication and sessions are handled elsewhere."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def get_user_by_email(self, email: str) -> User:
        user = await self._repository.get_by_email(email.strip().lower())
        if user is None:
            raise EntityNotFoundError("User", email, field="email")
        return user

    async def list_users_by_role(self, role: Role) -> list[User]:
        return await self._repository.get_all_by_role(role)

    async def register_user(self, data: UserCreate) -> User:
        email = data.email.strip().lower()
        if not email or not data.password:
            raise InvalidArgumentError("User email and password cannot be empty")
        secret = data.password.encode("utf-8")
        if len(secret) > _BCRYPT_MAX_BYTES:
            raise InvalidArgumentError(
                f"Password cannot be longer than {_BCRYPT_MAX_BYTES} bytes"
            )
        if await self._repository.exists_by_email(email):
            raise DuplicateEntityError("User", "email", email)

        user = User(
            email=email,
            password_hash=bcrypt.hashpw(secret, bcrypt.gensalt()).decode("ascii"),
            first_name=data.first_name,
            last_name=data.last_name,
            role=data.role,
        )
        created = await self._repository.create(user)
        logger.info("Registered user %s with role %s", created.id, created.role.value)
        return created

    async def delete_user(self, user_id: str) -> DeletionResult:
        if not await self._repository.delete(user_id):
            return DeletionResult(False, f"User with id: {user_id} not found")
        logger.info("Deleted user %s", user_id)
        return DeletionResult(True, f"User with id: {user_id} was successfully deleted")

    async def ensure_admin(self, email: str, password: str) -> User | None:
        """Create the bootstrap administrator unless an ADMIN already exists.

        Returns the created user, or None when nothing was done.
        """
        if await self._repository.get_all_by_role(Role.ADMIN):
            logger.debug("Admin user already present — skipping seed")
            return None
        if not password:
            logger.warning("ADMIN_PASSWORD is not configured; admin user was not seeded")
            return None

        admin = await self.register_user(
            UserCreate(
                email=email,
                password=password,
                first_name="ADMIN",
                last_name="ADMIN",
                role=Role.ADMIN,
            )
        )
        logger.info("Seeded admin user %s", admin.email)
        return admin
