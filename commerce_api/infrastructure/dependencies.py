"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_api.application.services import (
    ClientService,
    InventoryService,
    OrderService,
    UserService,
)
from commerce_api.infrastructure.database.session import get_db_session
from commerce_api.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyInventoryRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyUserRepository,
)


async def get_client_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService instance with its repository wired up."""
    repository = SQLAlchemyClientRepository(session)
    yield ClientService(repository)


async def get_inventory_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[InventoryService, None]:
    """Provides an InventoryService instance with its repository wired up."""
    repository = SQLAlchemyInventoryRepository(session)
    yield InventoryService(repository)


async def get_order_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[OrderService, None]:
    """Provides an OrderService instance with its repository wired up."""
    repository = SQLAlchemyOrderRepository(session)
    yield OrderService(repository)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its repository wired up."""
    repository = SQLAlchemyUserRepository(session)
    yield UserService(repository)
