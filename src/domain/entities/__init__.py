"""
Domain Entities
"""

from .credentials import Credentials
from .stk_push import StkPushRequest, TRANSACTION_TYPE_PAYBILL
from .callback import StkCallback, CallbackMetadataItem

__all__ = [
    "Credentials",
    "StkPushRequest",
    "TRANSACTION_TYPE_PAYBILL",
    "StkCallback",
    "CallbackMetadataItem",
]
