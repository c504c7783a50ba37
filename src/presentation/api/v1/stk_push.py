"""STK Push API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.application.services import StkPushService
from src.core.dependencies import get_stk_push_service
from src.presentation.schemas import ErrorResponseSchema, StkPushRequestSchema

stk_push_router = APIRouter(
    prefix="/stkpush",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing or invalid fields"},
        500: {"model": ErrorResponseSchema, "description": "Gateway call failed"},
    },
)


@stk_push_router.post(
    "",
    status_code=200,
    response_class=JSONResponse,
    summary="Initiate STK Push",
    description="""
    Send a payment prompt to the customer's phone.

    Returns the gateway's response body unchanged.
    """,
    responses={
        200: {"description": "Gateway accepted the request"},
    },
)
async def initiate_stk_push(
    request: StkPushRequestSchema,
    stk_push_service: Annotated[StkPushService, Depends(get_stk_push_service)],
) -> JSONResponse:
    response = await stk_push_service.initiate(request.to_entity())

    return JSONResponse(status_code=200, content=response)
