"""HTTP implementation of PaymentGatewayClient for the Daraja API."""

from typing import Any, Dict

import httpx
import structlog

from src.core.metrics import (
    track_gateway_latency,
    record_gateway_success,
    record_gateway_failure,
)
from src.domain.entities import Credentials, StkPushRequest
from src.domain.exceptions import (
    GatewayException,
    GatewayAuthException,
    GatewayTimeoutException,
)
from src.domain.interfaces import PaymentGatewayClient
from src.service.daraja import (
    basic_auth_header,
    build_stk_push_payload,
    generate_timestamp,
)

logger = structlog.get_logger(__name__)

TOKEN_PATH = "/oauth/v1/generate"
STK_PUSH_PATH = "/mpesa/stkpush/v1/processrequest"


def _response_detail(response: httpx.Response) -> Any:
    """Best-effort body of a failed gateway response for logging."""
    try:
        return response.json()
    except ValueError:
        return response.text[:500]


class HttpDarajaClient(PaymentGatewayClient):
    """
    HTTP client for the Daraja API.

    Every push fetches a fresh access token first. There are no retries;
    any failure is raised to the caller.
    """

    def __init__(
        self,
        credentials: Credentials,
        http_client: httpx.AsyncClient,
        base_url: str,
    ):
        self._credentials = credentials
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    async def get_access_token(self) -> str:
        url = f"{self._base_url}{TOKEN_PATH}"
        headers = {
            "Authorization": basic_auth_header(
                self._credentials.consumer_key,
                self._credentials.consumer_secret,
            ),
        }

        try:
            with track_gateway_latency("token"):
                response = await self._http.get(
                    url,
                    params={"grant_type": "client_credentials"},
                    headers=headers,
                )
        except httpx.TimeoutException:
            record_gateway_failure("token", "timeout")
            raise GatewayTimeoutException(operation="token")
        except httpx.HTTPError as e:
            record_gateway_failure("token", "transport")
            raise GatewayAuthException(message=f"Token request failed: {e}")

        if not response.is_success:
            record_gateway_failure("token", "http_error")
            raise GatewayAuthException(
                status_code=response.status_code,
                detail=_response_detail(response),
            )

        try:
            token = response.json().get("access_token")
        except (ValueError, AttributeError):
            token = None

        if not token or not isinstance(token, str):
            record_gateway_failure("token", "invalid_response")
            raise GatewayAuthException(
                message="Token response did not contain an access_token",
                status_code=response.status_code,
                detail=_response_detail(response),
            )

        record_gateway_success("token")
        return token

    async def stk_push(self, request: StkPushRequest) -> Dict[str, Any]:
        """
        Send an STK Push and return the gateway's response body.

        The timestamp and password are derived before the token fetch,
        so a slow token call does not shift the timestamp.
        """
        timestamp = generate_timestamp()
        payload = build_stk_push_payload(self._credentials, request, timestamp)
        token = await self.get_access_token()

        url = f"{self._base_url}{STK_PUSH_PATH}"
        headers = {"Authorization": f"Bearer {token}"}

        try:
            with track_gateway_latency("stk_push"):
                response = await self._http.post(url, json=payload, headers=headers)
        except httpx.TimeoutException:
            record_gateway_failure("stk_push", "timeout")
            raise GatewayTimeoutException(operation="stk_push")
        except httpx.HTTPError as e:
            record_gateway_failure("stk_push", "transport")
            raise GatewayException(message=f"STK Push request failed: {e}")

        if not response.is_success:
            record_gateway_failure("stk_push", "http_error")
            raise GatewayException(
                message="STK Push rejected by gateway",
                status_code=response.status_code,
                detail=_response_detail(response),
            )

        try:
            data = response.json()
        except ValueError:
            record_gateway_failure("stk_push", "invalid_response")
            raise GatewayException(
                message="STK Push response was not valid JSON",
                status_code=response.status_code,
                detail=response.text[:500],
            )

        record_gateway_success("stk_push")
        logger.info(
            "stk_push_accepted",
            checkout_request_id=data.get("CheckoutRequestID") if isinstance(data, dict) else None,
            response_code=data.get("ResponseCode") if isinstance(data, dict) else None,
        )
        return data
