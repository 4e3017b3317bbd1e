"""
Pytest configuration and shared fixtures.

This conftest.py provides:
- Settings pinned to known test domains
- A recording `httpx.MockTransport` standing in for the EMT servers
- HttpClient / selector fixtures wired to that transport
"""

from pathlib import Path
from typing import Callable

import httpx
import orjson
import pytest
from dotenv import load_dotenv

from emtmad.config import Settings
from emtmad.factory import create_service_client
from emtmad.models import Credentials
from emtmad.utils.clients import HttpClient

# Load test environment variables
TEST_ENV = Path(__file__).parent / ".env.test"
if TEST_ENV.exists():
    load_dotenv(TEST_ENV)


BUS_DOMAIN = "https://bus.test/emt-proxy-server/last/"
BIKE_DOMAIN = "https://bike.test:8443"
PARKING_DOMAIN = "https://parking.test/InfoParking.svc/json"


# ─── Pytest Configuration ────────────────────────────────────────────


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (full stack over a mock transport)")
    config.addinivalue_line("markers", "asyncio: Async tests using asyncio")


# ─── Settings / credentials ──────────────────────────────────────────


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        BUS_DOMAIN=BUS_DOMAIN,
        BIKE_DOMAIN=BIKE_DOMAIN,
        PARKING_DOMAIN=PARKING_DOMAIN,
        BIKE_SEGMENT="BiciMad",
        BIKE_STRAY_BRACE=True,
        PARKING_PATH_SEGMENTS="keys",
        HTTP_TIMEOUT=5.0,
        VERIFY_SSL=False,
        CA_BUNDLE=None,
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials("user1", "pass1")


# ─── Mock transport ──────────────────────────────────────────────────


class RecordingTransport:
    """Collects every request and answers through a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = self.echo

    @staticmethod
    def echo(request: httpx.Request) -> httpx.Response:
        body = request.content.decode() if request.content else ""
        return httpx.Response(
            200,
            content=orjson.dumps(
                {"method": request.method, "url": str(request.url), "body": body}
            ),
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def http_client(recorder, test_settings) -> HttpClient:
    # MockTransport holds no sockets, so the client needs no explicit close
    return HttpClient(settings=test_settings, transport=recorder.transport())


@pytest.fixture
def emt(http_client, test_settings):
    """Selector for ("user1", "pass1") sharing the mocked transport."""
    return create_service_client(
        "user1", "pass1", settings=test_settings, http_client=http_client
    )
