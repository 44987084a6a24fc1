"""User endpoints. Responses never include password hashes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from commerce_api.application.schemas.client import MessageResponse
from commerce_api.application.schemas.user import UserCreate, UserResponse
from commerce_api.application.services import UserService
from commerce_api.domain.entities import Role
from commerce_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from commerce_api.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    role: Role = Query(Role.CLIENT, description="Only users with this role"),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    users = await service.list_users_by_role(role)
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.get("/by-email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.get_user_by_email(email)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.register_user(data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    result = await service.delete_user(user_id)
    if not result.deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)
