"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from commerce_api.presentation.api.v1.endpoints.health import router as health_router
from commerce_api.presentation.api.v1.endpoints.clients import router as clients_router
from commerce_api.presentation.api.v1.endpoints.inventory import router as inventory_router
from commerce_api.presentation.api.v1.endpoints.orders import router as orders_router
from commerce_api.presentation.api.v1.endpoints.users import router as users_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(inventory_router)
router.include_router(orders_router)
router.include_router(users_router)
