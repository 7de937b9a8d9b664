# src/paper_invest/infrastructure/connections/paper_invest_connection.py
"""Async Paper Invest REST connection (the authenticated request gateway)."""

import logging
from typing import Any, Dict, Optional

import httpx

from src.paper_invest.core.errors import RemoteAPIError
from src.paper_invest.infrastructure.auth.token_cache import TokenCache
from .base import AsyncAPIConnection
from .bearer_auth import BearerTokenAuth

logger = logging.getLogger(__name__)


def decode_body(response: httpx.Response) -> Any:
    """JSON body when parseable, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class PaperInvestConnection(AsyncAPIConnection):
    """Paper Invest API connection; every request carries a bearer token."""

    def __init__(
        self,
        config: Dict[str, Any],
        token_cache: TokenCache,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(config)
        self._api_key = config.get("api_key") or ""
        self._base_url = config.get("api_url")
        self._timeout = config.get("timeout", 30.0)
        self._token_cache = token_cache
        self._transport = transport

    async def connect(self) -> bool:
        """Create the HTTP client. Authentication happens lazily per request."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
                auth=BearerTokenAuth(self._token_cache, self._api_key),
                transport=self._transport,
            )
            logger.info(f"✅ Paper Invest client ready ({self._base_url})")
        self._connected = True
        return True

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Issue one authenticated request and return the decoded body.

        Raises:
            AuthenticationError: token exchange failed
            RemoteAPIError: non-2xx answer or transport failure
        """
        if self._client is None:
            await self.connect()

        kwargs: Dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if json is not None:
            kwargs["json"] = json

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"❌ {method} {path} failed: {e}")
            raise RemoteAPIError(str(e) or e.__class__.__name__) from e

        if response.is_success:
            return decode_body(response)

        logger.warning(f"⚠️ {method} {path} returned {response.status_code}")
        raise RemoteAPIError.from_status(response.status_code, decode_body(response))
