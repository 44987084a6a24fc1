"""Abstract repository interface (port) for user persistence."""

from abc import ABC, abstractmethod

from commerce_api.domain.entities import Role, User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def get_all_by_role(self, role: Role) -> list[User]:
        ...

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete a user. Returns True if deleted, False if not found."""
        ...
