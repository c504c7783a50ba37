"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from src.domain.entities import StkPushRequest


class PaymentGatewayClient(ABC):
    """
    Abstract client for the payment gateway.

    Obtains access tokens and initiates STK Push payment prompts.
    """

    @abstractmethod
    async def get_access_token(self) -> str:
        """
        Fetch a fresh OAuth access token.

        Returns:
            The bearer token string

        Raises:
            GatewayAuthException: If the gateway rejects the credentials
            GatewayTimeoutException: If the request times out
            GatewayException: On any other transport failure
        """
        ...

    @abstractmethod
    async def stk_push(self, request: StkPushRequest) -> Dict[str, Any]:
        """
        Initiate an STK Push for a customer.

        Args:
            request: Phone, amount, reference and description

        Returns:
            The gateway's response body, unmodified

        Raises:
            GatewayAuthException: If the token fetch fails (no push is sent)
            GatewayException: If the push request fails
        """
        ...
