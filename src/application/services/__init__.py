"""Application services (use cases)."""

from .stk_push_service import StkPushService
from .callback_service import CallbackService

__all__ = [
    "StkPushService",
    "CallbackService",
]
