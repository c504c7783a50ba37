"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from src.core.metrics import record_push
from src.domain.exceptions import (
    DomainException,
    GatewayException,
    InvalidStkPushRequestException,
)
from .request_context import RequestContextMiddleware, get_request_id

logger = structlog.get_logger(__name__)

STK_PUSH_FAILED_MESSAGE = "STK Push failed"


def _request_id(request: Request) -> str | None:
    # The catch-all handler runs after the request contextvar is reset
    return (
        get_request_id()
        or getattr(request.state, "request_id", None)
        or request.headers.get(RequestContextMiddleware.HEADER_NAME)
    )


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    code: str,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "code": code,
            "request_id": _request_id(request),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed bodies are client errors, reported as 400."""
        # loc is ("body", field, ...) for field errors; JSON decode errors
        # carry an integer offset instead of a field name
        fields = sorted(
            {
                err["loc"][1]
                for err in exc.errors()
                if len(err.get("loc", ())) > 1
                and err["loc"][0] == "body"
                and isinstance(err["loc"][1], str)
            }
        )
        if request.url.path.startswith("/stkpush"):
            record_push("rejected")
        message = (
            f"Invalid request fields: {', '.join(fields)}"
            if fields
            else "Request body must be a JSON object"
        )
        logger.info(
            "request_validation_failed",
            request_id=_request_id(request),
            path=request.url.path,
            fields=fields,
        )
        return _error_response(request, 400, message, "INVALID_REQUEST")

    @app.exception_handler(InvalidStkPushRequestException)
    async def invalid_stk_push_handler(
        request: Request,
        exc: InvalidStkPushRequestException,
    ) -> JSONResponse:
        """Handle missing-field errors."""
        return _error_response(request, 400, exc.message, exc.code)

    @app.exception_handler(GatewayException)
    async def gateway_error_handler(
        request: Request,
        exc: GatewayException,
    ) -> JSONResponse:
        """Every gateway failure is reported to the caller the same way."""
        logger.error(
            "gateway_error",
            request_id=_request_id(request),
            code=exc.code,
            operation=exc.operation,
            message=exc.message,
            status_code=exc.status_code,
            detail=exc.detail,
        )
        return _error_response(request, 500, STK_PUSH_FAILED_MESSAGE, exc.code)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=_request_id(request),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(request, 400, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for unexpected errors."""
        logger.exception(
            "unhandled_exception",
            request_id=_request_id(request),
            error_type=type(exc).__name__,
        )
        return _error_response(request, 500, "An unexpected error occurred.", "INTERNAL_ERROR")
