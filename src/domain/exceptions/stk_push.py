"""STK Push request exceptions."""

from typing import List

from .base import DomainException


class InvalidStkPushRequestException(DomainException):
    """Raised when an STK Push request is missing required fields."""

    def __init__(self, missing_fields: List[str]):
        super().__init__(
            message=f"Missing required fields: {', '.join(missing_fields)}",
            code="INVALID_STK_PUSH_REQUEST",
        )
        self.missing_fields = missing_fields
