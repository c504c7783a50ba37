"""
Daraja request-building helpers.

Pure functions that derive the values the Daraja API expects:
the OAuth basic credential, the STK Push timestamp and password,
and the STK Push request body.
"""

from .security import (
    TIMESTAMP_FORMAT,
    basic_auth_header,
    generate_password,
    generate_timestamp,
)
from .payload import build_stk_push_payload

__all__ = [
    "TIMESTAMP_FORMAT",
    "basic_auth_header",
    "generate_password",
    "generate_timestamp",
    "build_stk_push_payload",
]
