# AsyncAPIConnection – abstract base class
"""
Abstract async connection base class shared by outbound API connections.
Defines the async lifecycle driven by the MCP server lifespan:
connect, disconnect, is_healthy.
"""

import abc
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class AsyncAPIConnection(abc.ABC):
    """Async connection base class for external HTTP APIs"""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self._connected: bool = False
        self._client: Any = None

    @abc.abstractmethod
    async def connect(self) -> bool:
        """Open the connection, return True on success"""

    async def disconnect(self) -> bool:
        """Close the underlying client, subclasses may override"""
        if self._client is not None and hasattr(self._client, "aclose"):
            await self._client.aclose()
        self._client = None
        self._connected = False
        logger.info(f"✅ {self.__class__.__name__} disconnected")
        return True

    async def is_healthy(self) -> bool:
        """Default health check only reports whether the client is open"""
        return self._connected

    @property
    def connected(self) -> bool:
        return self._connected
