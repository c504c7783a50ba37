"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["STK Push failed"],
    )
    code: str = Field(
        ...,
        description="Error code",
        examples=["GATEWAY_ERROR"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "Missing required fields: phone, amount",
                    "code": "INVALID_STK_PUSH_REQUEST",
                    "request_id": "abc123",
                }
            ]
        }
    }
