"""
Fixtures for integration tests.

Provides:
- Test settings with fake merchant credentials
- A mock Daraja gateway served through httpx.MockTransport
- A test client for the FastAPI app with the outbound HTTP client replaced
"""

from typing import Any, AsyncGenerator, List, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.core.config import Settings
from src.core.dependencies import get_http_client
from src.main import create_app


TOKEN_PATH = "/oauth/v1/generate"
STK_PUSH_PATH = "/mpesa/stkpush/v1/processrequest"


# =============================================================================
# Mock Gateway
# =============================================================================

class MockDarajaGateway:
    """
    Stand-in for the Daraja API that records every request it receives.

    Responses are read at call time, so a test can change a status or body
    after the client fixture has been created.
    """

    def __init__(
        self,
        token_status: int = 200,
        token_body: Any = None,
        push_status: int = 200,
        push_body: Any = None,
        fail_with: Optional[str] = None,
        fail_on: Optional[str] = None,
    ):
        self.token_status = token_status
        self.token_body = token_body if token_body is not None else {
            "access_token": "test_access_token",
            "expires_in": "3599",
        }
        self.push_status = push_status
        self.push_body = push_body if push_body is not None else {
            "CheckoutRequestID": "ws_1",
        }
        self.fail_with = fail_with  # "timeout" or "connect"
        self.fail_on = fail_on  # "token" or "stk_push"
        self.requests: List[httpx.Request] = []

    @property
    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == TOKEN_PATH]

    @property
    def push_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == STK_PUSH_PATH]

    def _maybe_fail(self, operation: str, request: httpx.Request) -> None:
        if self.fail_on != operation:
            return
        if self.fail_with == "timeout":
            raise httpx.ReadTimeout("timed out", request=request)
        raise httpx.ConnectError("connection refused", request=request)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == TOKEN_PATH:
            self._maybe_fail("token", request)
            return httpx.Response(self.token_status, json=self.token_body)

        if request.url.path == STK_PUSH_PATH:
            self._maybe_fail("stk_push", request)
            return httpx.Response(self.push_status, json=self.push_body)

        return httpx.Response(404, json={"errorMessage": "Not found"})


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with fake credentials, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        consumer_key="test_key",
        consumer_secret="test_secret",
        business_shortcode="174379",
        passkey="test_passkey",
        callback_url="https://example.com/callback",
        daraja_base_url="https://daraja.test",
    )


@pytest.fixture
def mock_gateway() -> MockDarajaGateway:
    """Create a gateway that accepts every request."""
    return MockDarajaGateway()


@pytest.fixture
def failing_token_gateway() -> MockDarajaGateway:
    """Create a gateway that rejects the consumer credentials."""
    return MockDarajaGateway(
        token_status=401,
        token_body={"errorCode": "401.002.01", "errorMessage": "Error Occurred - Invalid Access Token"},
    )


async def _client_for(
    settings: Settings,
    gateway: MockDarajaGateway,
) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(settings)
    gateway_http = httpx.AsyncClient(transport=httpx.MockTransport(gateway.handler))

    app.dependency_overrides[get_http_client] = lambda: gateway_http

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    await gateway_http.aclose()


@pytest_asyncio.fixture
async def client(
    settings: Settings,
    mock_gateway: MockDarajaGateway,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose outbound calls go to ``mock_gateway``.
    """
    async for ac in _client_for(settings, mock_gateway):
        yield ac


@pytest_asyncio.fixture
async def client_with_failing_token(
    settings: Settings,
    failing_token_gateway: MockDarajaGateway,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where the token endpoint always fails."""
    async for ac in _client_for(settings, failing_token_gateway):
        yield ac


@pytest.fixture
def stk_push_request() -> dict:
    """A complete, valid /stkpush body."""
    return {
        "phone": "254712345678",
        "amount": 100,
        "reference": "INV001",
        "description": "Test",
    }
