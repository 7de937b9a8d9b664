# src/paper_invest/core/errors.py
"""Error taxonomy for the Paper Invest MCP adapter.

Only ConfigurationError is fatal. Every other error is caught at the
dispatch boundary and returned to the MCP host as an error-flagged result.
"""

from typing import Any, Optional


class PaperInvestError(Exception):
    """Base class for all adapter errors."""


class ConfigurationError(PaperInvestError):
    """Required startup configuration is missing or invalid."""


class AuthenticationError(PaperInvestError):
    """Exchanging the API key for a bearer token failed."""

    def __init__(self, reason: str):
        super().__init__(f"Authentication failed: {reason}")
        self.reason = reason


class UnknownToolError(PaperInvestError):
    """Tool name is not part of the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class MissingArgumentsError(PaperInvestError):
    """Tool call arrived without an arguments object."""

    def __init__(self):
        super().__init__("No arguments provided")


class RemoteAPIError(PaperInvestError):
    """Non-success response (or transport failure) from the trading API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    @classmethod
    def from_status(cls, status_code: int, payload: Any = None) -> "RemoteAPIError":
        return cls(
            f"Request failed with status code {status_code}",
            status_code=status_code,
            payload=payload,
        )
