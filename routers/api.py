from fastapi import APIRouter
from routers.user_router import user_router
from routers.table_router import table_router
from routers.reservation_router import reservation_router

router = APIRouter()

router.include_router(user_router)
router.include_router(table_router)
router.include_router(reservation_router)
