"""Client endpoints — lookups, partial updates and pending-order management."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from commerce_api.application.schemas.client import (
    ClientSchema,
    ClientUpdate,
    MessageResponse,
    OrderDetailSchema,
    OrderStatusUpdate,
)
from commerce_api.application.services import ClientService
from commerce_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from commerce_api.infrastructure.dependencies import get_client_service

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=list[ClientSchema])
async def search_clients(
    keyword: str = Query("", description="Matches name, email or address"),
    service: ClientService = Depends(get_client_service),
) -> list[ClientSchema]:
    """Search clients by free-text keyword."""
    try:
        return await service.get_by_keyword(keyword)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/by-order/{order_id}", response_model=ClientSchema)
async def get_client_by_order(
    order_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientSchema:
    """Retrieve the client that owns a pending order."""
    try:
        return await service.get_by_order_id(order_id)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{client_id}", response_model=ClientSchema)
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientSchema:
    """Retrieve a single client by ID."""
    try:
        return await service.get_by_id(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=ClientSchema, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientSchema,
    service: ClientService = Depends(get_client_service),
) -> ClientSchema:
    """Create a new client."""
    try:
        return await service.create(data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.patch("/{client_id}", response_model=ClientSchema)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientSchema:
    """Partially update a client; omitted fields keep their stored values."""
    try:
        return await service.update_by_id(data, client_id)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{client_id}/orders", response_model=ClientSchema)
async def upsert_client_order(
    client_id: str,
    order: OrderDetailSchema,
    service: ClientService = Depends(get_client_service),
) -> ClientSchema:
    """Add a pending order, or patch status and total of an existing one."""
    try:
        return await service.update_order_by_client_id(order, client_id)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{client_id}/orders/{order_id}/status", response_model=ClientSchema)
async def update_client_order_status(
    client_id: str,
    order_id: str,
    data: OrderStatusUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientSchema:
    try:
        return await service.update_order_status_by_client_id(order_id, data.status, client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{client_id}", response_model=MessageResponse)
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> MessageResponse:
    """Delete a client by ID."""
    result = await service.delete_by_id(client_id)
    if not result.deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)


@router.delete("/{client_id}/orders/{order_id}", response_model=MessageResponse)
async def delete_client_order(
    client_id: str,
    order_id: str,
    service: ClientService = Depends(get_client_service),
) -> MessageResponse:
    """Remove a pending order from a client."""
    result = await service.delete_order_by_id(client_id, order_id)
    if not result.deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)
