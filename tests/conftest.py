"""Pytest configuration and fixtures."""
import json
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import httpx
import pytest
import pytest_asyncio
from jose import jwt

from src.paper_invest.domain.dispatcher import ToolDispatcher
from src.paper_invest.infrastructure.auth.token_cache import TokenCache
from src.paper_invest.infrastructure.connections.paper_invest_connection import (
    PaperInvestConnection,
)

API_URL = "https://api.paperinvest.test/v1"
API_KEY = "pk_test_123"
START = datetime(2026, 1, 5, 14, 30, tzinfo=timezone.utc)


def make_jwt(expiry: Optional[datetime] = None, **claims: Any) -> str:
    """Mint a signed JWT; the adapter never checks the signature."""
    payload = {"sub": "user-1", **claims}
    if expiry is not None:
        payload["exp"] = int(expiry.timestamp())
    return jwt.encode(payload, "test-secret", algorithm="HS256")


class FrozenClock:
    """Manually advanced UTC clock."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class FakePaperInvestAPI:
    """In-process stand-in for the Paper Invest REST API.

    ``/auth/token`` hands out ``self.token``; every other path answers from
    ``self.routes`` (default ``200 {"ok": true}``) and is recorded.
    """

    def __init__(self, clock: FrozenClock):
        self.token = make_jwt(clock.now + timedelta(hours=1))
        self.auth_status = 200
        self.auth_body: Optional[Any] = None
        self.auth_error: Optional[Exception] = None
        self.auth_requests: list[httpx.Request] = []
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Callable[[], httpx.Response]] = {}

    @property
    def auth_calls(self) -> int:
        return len(self.auth_requests)

    def route(self, method: str, path: str, status: int = 200, body: Any = None, error=None):
        def respond() -> httpx.Response:
            if error is not None:
                raise error
            return httpx.Response(status, json=body)

        self.routes[(method, "/v1" + path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/auth/token":
            self.auth_requests.append(request)
            if self.auth_error is not None:
                raise self.auth_error
            if self.auth_status != 200:
                return httpx.Response(self.auth_status, json={"message": "invalid api key"})
            body = self.auth_body if self.auth_body is not None else {"token": self.token}
            return httpx.Response(200, json=body)

        self.requests.append(request)
        respond = self.routes.get((request.method, request.url.path))
        if respond is None:
            return httpx.Response(200, json={"ok": True})
        return respond()

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def fake_api(clock) -> FakePaperInvestAPI:
    return FakePaperInvestAPI(clock)


@pytest.fixture
def token_cache(fake_api, clock) -> TokenCache:
    return TokenCache(API_URL, timeout=5.0, clock=clock, transport=fake_api.transport)


@pytest_asyncio.fixture
async def connection(
    token_cache, fake_api
) -> AsyncGenerator[PaperInvestConnection, None]:
    conn = PaperInvestConnection(
        {"api_url": API_URL, "api_key": API_KEY, "timeout": 5.0},
        token_cache=token_cache,
        transport=fake_api.transport,
    )
    await conn.connect()
    yield conn
    await conn.disconnect()


@pytest.fixture
def dispatcher(connection) -> ToolDispatcher:
    return ToolDispatcher(connection)
