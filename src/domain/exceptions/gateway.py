"""Payment gateway (Daraja) exceptions."""

from typing import Any

from .base import DomainException


class GatewayException(DomainException):
    """Raised when the payment gateway call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
        operation: str = "stk_push",
    ):
        super().__init__(
            message=message,
            code="GATEWAY_ERROR",
        )
        self.status_code = status_code
        self.detail = detail
        self.operation = operation


class GatewayAuthException(GatewayException):
    """Raised when an access token cannot be obtained."""

    def __init__(
        self,
        message: str = "Failed to obtain access token",
        status_code: int | None = None,
        detail: Any = None,
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            detail=detail,
            operation="token",
        )
        self.code = "GATEWAY_AUTH_ERROR"


class GatewayTimeoutException(GatewayException):
    """Raised when the payment gateway times out."""

    def __init__(self, operation: str = "stk_push"):
        super().__init__(
            message="Payment gateway request timed out",
            operation=operation,
        )
        self.code = "GATEWAY_TIMEOUT"
