"""STK Push service - orchestrates the payment-initiation use case."""

from typing import Any, Dict

import structlog

from src.core.metrics import record_push
from src.domain.entities import StkPushRequest
from src.domain.exceptions import GatewayException, InvalidStkPushRequestException
from src.domain.interfaces import PaymentGatewayClient

logger = structlog.get_logger(__name__)


class StkPushService:
    """
    Application service for STK Push use cases.
    """

    def __init__(self, gateway_client: PaymentGatewayClient):
        self._gateway = gateway_client

    async def initiate(self, request: StkPushRequest) -> Dict[str, Any]:
        """
        Validate and forward an STK Push request.

        Args:
            request: The inbound push request

        Returns:
            The gateway's response, unmodified

        Raises:
            InvalidStkPushRequestException: If any field is missing;
                no gateway call is made
            GatewayException: If the token fetch or push fails
        """
        missing = request.missing_fields()
        if missing:
            record_push("rejected")
            logger.info("stk_push_rejected", missing_fields=missing)
            raise InvalidStkPushRequestException(missing)

        log = logger.bind(
            account_reference=request.account_reference,
            amount=request.amount,
        )
        log.info("stk_push_requested")

        try:
            response = await self._gateway.stk_push(request)
        except GatewayException:
            record_push("failed")
            raise

        record_push("success")
        log.info("stk_push_completed")
        return response
