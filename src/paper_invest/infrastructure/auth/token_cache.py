# src/paper_invest/infrastructure/auth/token_cache.py
"""Bearer token cache for the Paper Invest API.

The long-lived API key is exchanged at ``POST /auth/token`` for a short-lived
JWT. The token is reused until its ``exp`` claim passes; tokens whose claims
cannot be read are assumed valid for a fixed window (one hour by default).

Concurrent callers that find the cache empty or expired may each trigger a
refresh. That duplicate work is tolerated unless ``single_flight`` is
enabled, in which case callers share one pending refresh.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Tuple

import httpx
from jose import JWTError, jwt

from src.paper_invest.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=1)
AUTH_TOKEN_PATH = "/auth/token"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CachedToken:
    """A bearer token and the instant it stops being usable."""

    token: str
    expiry: datetime

    def is_valid(self, now: datetime) -> bool:
        return now < self.expiry


def token_expiry(
    token: str, issued_at: datetime, default_ttl: timedelta = DEFAULT_TOKEN_TTL
) -> Tuple[datetime, bool]:
    """Return ``(expiry, from_claims)`` for a token.

    The signature is not verified; only the ``exp`` claim is read. Any
    failure falls back to ``issued_at + default_ttl``.
    """
    try:
        claims = jwt.get_unverified_claims(token)
        return datetime.fromtimestamp(float(claims["exp"]), tz=timezone.utc), True
    except (JWTError, KeyError, TypeError, ValueError, OverflowError, OSError):
        return issued_at + default_ttl, False


class TokenCache:
    """Process-lifetime cache holding at most one bearer token."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 30.0,
        default_ttl: timedelta = DEFAULT_TOKEN_TTL,
        single_flight: bool = False,
        clock: Callable[[], datetime] = utc_now,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_url = api_url
        self._timeout = timeout
        self._default_ttl = default_ttl
        self._single_flight = single_flight
        self._clock = clock
        self._transport = transport
        self._cached: Optional[CachedToken] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def token(self) -> Optional[str]:
        return self._cached.token if self._cached else None

    @property
    def expiry(self) -> Optional[datetime]:
        return self._cached.expiry if self._cached else None

    @property
    def cached(self) -> Optional[CachedToken]:
        return self._cached

    async def get_token(self, api_key: str) -> str:
        """Return a valid bearer token, exchanging the API key if needed."""
        cached = self._cached
        if cached is not None and cached.is_valid(self._clock()):
            return cached.token

        if not self._single_flight:
            return await self._refresh(api_key)

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._refresh(api_key))
            self._pending.add_done_callback(self._clear_pending)
        return await asyncio.shield(self._pending)

    def invalidate(self, token: Optional[str] = None) -> None:
        """Drop the cached token.

        With ``token`` given, only drop it if it is still the cached one, so a
        stale rejection cannot discard a token refreshed in the meantime.
        """
        if self._cached is None:
            return
        if token is not None and self._cached.token != token:
            return
        logger.info("🔑 Cached bearer token invalidated")
        self._store(None)

    async def _refresh(self, api_key: str) -> str:
        issued_at = self._clock()
        token = await self._exchange(api_key)
        expiry, from_claims = token_expiry(token, issued_at, self._default_ttl)
        self._store(CachedToken(token=token, expiry=expiry))
        logger.info(
            f"✅ Bearer token refreshed, expires {expiry.isoformat()} "
            f"({'token claims' if from_claims else 'default window'})"
        )
        return token

    async def _exchange(self, api_key: str) -> str:
        try:
            async with httpx.AsyncClient(
                base_url=self._api_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(AUTH_TOKEN_PATH, json={"apiKey": api_key})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"❌ Token exchange rejected: {e.response.status_code}")
            raise AuthenticationError(
                f"Request failed with status code {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"❌ Token exchange failed: {e}")
            raise AuthenticationError(str(e) or e.__class__.__name__) from e
        except ValueError as e:
            raise AuthenticationError("response is not valid JSON") from e

        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthenticationError("response does not contain a token")
        return token

    def _store(self, cached: Optional[CachedToken]) -> None:
        # Only place the cache is mutated
        self._cached = cached

    def _clear_pending(self, _future: asyncio.Future) -> None:
        self._pending = None
