from fastapi import APIRouter

from .stk_push import stk_push_router
from .callback import callback_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(stk_push_router, tags=["STK Push"])
router.include_router(callback_router, tags=["Callbacks"])
