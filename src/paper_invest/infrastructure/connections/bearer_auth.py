# src/paper_invest/infrastructure/connections/bearer_auth.py
"""httpx auth flow attaching a cached bearer token to every request."""

from typing import AsyncGenerator

import httpx

from src.paper_invest.infrastructure.auth.token_cache import TokenCache


class BearerTokenAuth(httpx.Auth):
    """Ask the token cache for a token on each request.

    A 401 answer invalidates the token that was sent; the request is not
    replayed, the next one re-authenticates.
    """

    def __init__(self, token_cache: TokenCache, api_key: str):
        self._token_cache = token_cache
        self._api_key = api_key

    def sync_auth_flow(self, request):
        raise RuntimeError("BearerTokenAuth only supports httpx.AsyncClient")

    async def async_auth_flow(
        self, request: httpx.Request
    ) -> AsyncGenerator[httpx.Request, httpx.Response]:
        token = await self._token_cache.get_token(self._api_key)
        request.headers["Authorization"] = f"Bearer {token}"
        response = yield request
        if response.status_code == 401:
            self._token_cache.invalidate(token)
