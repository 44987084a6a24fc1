"""Order endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from commerce_api.application.schemas.order import OrderCreate, OrderResponse
from commerce_api.application.services import OrderService
from commerce_api.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from commerce_api.infrastructure.dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("/by-client/{client_id}", response_model=list[OrderResponse])
async def list_client_orders(
    client_id: str,
    service: OrderService = Depends(get_order_service),
) -> list[OrderResponse]:
    try:
        orders = await service.list_orders_by_client(client_id)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return [OrderResponse.model_validate(o, from_attributes=True) for o in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    try:
        order = await service.get_order_by_id(order_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return OrderResponse.model_validate(order, from_attributes=True)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    data: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Place an order; the total is computed from its lines."""
    try:
        order = await service.create_order(data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return OrderResponse.model_validate(order, from_attributes=True)
