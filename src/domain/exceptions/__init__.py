"""Domain Exceptions - Request violations and gateway errors."""

from .base import DomainException
from .stk_push import InvalidStkPushRequestException
from .gateway import (
    GatewayException,
    GatewayAuthException,
    GatewayTimeoutException,
)

__all__ = [
    "DomainException",
    "InvalidStkPushRequestException",
    "GatewayException",
    "GatewayAuthException",
    "GatewayTimeoutException",
]
