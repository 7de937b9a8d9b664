# src/paper_invest/infrastructure/connections/__init__.py
"""Outbound API connections."""

from .base import AsyncAPIConnection
from .bearer_auth import BearerTokenAuth
from .paper_invest_connection import PaperInvestConnection

__all__ = [
    "AsyncAPIConnection",
    "BearerTokenAuth",
    "PaperInvestConnection",
]
