# src/paper_invest/mcp/server.py
"""FastMCP server creation.

This module provides the MCP server exposing the Paper Invest tool catalog.
All tools are tagged by catalog group and by read/write access so hosts can
be given a subset of the catalog.

Tags:
- account: account details, rename, freeze (3 tools)
- portfolio: create, inspect, reset portfolios (4 tools)
- position: equity and option positions (2 tools)
- trading: orders (7 tools)
- market-data: quotes and market hours (4 tools)
- activity: activity log and day trades (2 tools)
- margin: margin upgrade (1 tool)
- read / write: whether the tool changes remote state
"""

from collections import Counter
from contextlib import asynccontextmanager
from typing import Optional

from fastmcp import FastMCP

from src.paper_invest.core.dependencies import Container
from src.paper_invest.domain.catalog import TOOL_CATALOG
from src.paper_invest.domain.types import ToolSpec
from src.paper_invest.mcp.tools.catalog_tools import (
    register_catalog_tools,
    reject_missing_arguments,
)
from src.paper_invest.utils.logger import logger

SERVER_NAME = "paper-invest"
SERVER_VERSION = "1.0.0"


@asynccontextmanager
async def mcp_lifespan(mcp: FastMCP):
    """MCP server lifespan - manages the Paper Invest connection."""
    logger.info("🚀 Starting MCP server", name=mcp.name)

    connection = Container.paper_invest()
    await connection.connect()
    logger.info("✅ Paper Invest connection established")

    try:
        yield
    finally:
        logger.info("🛑 Shutting down MCP server")
        await connection.disconnect()


def create_mcp_server() -> FastMCP:
    """Create the MCP server with the full tool catalog.

    Returns:
        FastMCP: MCP server instance with all tools and tags
    """
    mcp = FastMCP(name=SERVER_NAME, version=SERVER_VERSION, lifespan=mcp_lifespan)

    count = register_catalog_tools(mcp)
    reject_missing_arguments(mcp)
    logger.info("✅ MCP server created", name=mcp.name, tools=count)
    return mcp


def create_filtered_mcp_server(
    include_tags: Optional[set[str]] = None,
    exclude_tags: Optional[set[str]] = None,
    name: Optional[str] = None,
) -> FastMCP:
    """Create an MCP server exposing only part of the catalog.

    Examples:
        # Read-only server, no order placement or account changes
        readonly = create_filtered_mcp_server(exclude_tags={"write"})

        # Market data only
        market = create_filtered_mcp_server(include_tags={"market-data"})

    Args:
        include_tags: Only include tools with any of these tags
        exclude_tags: Exclude tools with any of these tags
        name: Custom server name (defaults to "paper-invest-filtered")
    """
    server_name = name or f"{SERVER_NAME}-filtered"
    catalog = [
        spec
        for spec in TOOL_CATALOG
        if _matches(spec, include_tags=include_tags, exclude_tags=exclude_tags)
    ]

    mcp = FastMCP(name=server_name, version=SERVER_VERSION, lifespan=mcp_lifespan)
    count = register_catalog_tools(mcp, catalog)
    reject_missing_arguments(mcp)

    logger.info(
        f"✅ Filtered MCP server '{server_name}' created",
        tools=count,
        include_tags=sorted(include_tags or []),
        exclude_tags=sorted(exclude_tags or []),
    )
    return mcp


def _matches(
    spec: ToolSpec,
    include_tags: Optional[set[str]] = None,
    exclude_tags: Optional[set[str]] = None,
) -> bool:
    tags = spec.tags
    if include_tags and not tags & include_tags:
        return False
    if exclude_tags and tags & exclude_tags:
        return False
    return True


def get_tools_by_tag(tag: str) -> list[str]:
    """Get list of tool names carrying a tag."""
    return [spec.name for spec in TOOL_CATALOG if tag in spec.tags]


def get_all_tags() -> set[str]:
    """Get all available tags in the server."""
    tags: set[str] = set()
    for spec in TOOL_CATALOG:
        tags |= spec.tags
    return tags


def get_server_info() -> dict:
    """Get MCP server information."""
    counts = Counter(tag for spec in TOOL_CATALOG for tag in spec.tags)
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "total_tools": len(TOOL_CATALOG),
        "tags": {tag: {"count": counts[tag]} for tag in sorted(counts)},
        "api_url": Container.config().paper_invest.api_url,
    }
