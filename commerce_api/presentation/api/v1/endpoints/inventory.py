"""Inventory CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from commerce_api.application.mappers import inventory_mapper
from commerce_api.application.schemas.client import MessageResponse
from commerce_api.application.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)
from commerce_api.application.services import InventoryService
from commerce_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from commerce_api.infrastructure.dependencies import get_inventory_service

router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.get("", response_model=list[InventoryItemResponse])
async def list_items(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: InventoryService = Depends(get_inventory_service),
) -> list[InventoryItemResponse]:
    items = await service.list_items(skip=skip, limit=limit)
    return [inventory_mapper.to_dto(i) for i in items]


@router.get("/{item_id}", response_model=InventoryItemResponse)
async def get_item(
    item_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryItemResponse:
    try:
        item = await service.get_item(item_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return inventory_mapper.to_dto(item)


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    data: InventoryItemCreate,
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryItemResponse:
    try:
        item = await service.create_item(data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return inventory_mapper.to_dto(item)


@router.patch("/{item_id}", response_model=InventoryItemResponse)
async def update_item(
    item_id: str,
    data: InventoryItemUpdate,
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryItemResponse:
    try:
        item = await service.update_item(item_id, data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return inventory_mapper.to_dto(item)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(
    item_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> MessageResponse:
    result = await service.delete_item(item_id)
    if not result.deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)
