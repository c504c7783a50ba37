"""Pydantic schemas for API request/response validation."""

from .stk_push import StkPushRequestSchema
from .error import ErrorResponseSchema

__all__ = [
    "StkPushRequestSchema",
    "ErrorResponseSchema",
]
