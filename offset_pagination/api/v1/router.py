from fastapi import APIRouter
from offset_pagination.api.v1.customers import router as customers_router

router = APIRouter(prefix="/api/v1")
router.include_router(customers_router)
