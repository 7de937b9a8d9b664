# src/paper_invest/mcp/tools/catalog_tools.py
"""MCP tools generated from the Paper Invest tool catalog.
Each catalog entry becomes one FastMCP tool with its declared JSON schema.
Calls are forwarded to the dispatcher; error outcomes are raised as
ToolError so the host receives an error-flagged result.
"""

from typing import Any, Dict, Iterable, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import (
    CallToolRequest,
    CallToolResult,
    ServerResult,
    TextContent,
    ToolAnnotations,
)

from src.paper_invest.core.dependencies import Container
from src.paper_invest.domain.catalog import TOOL_CATALOG
from src.paper_invest.domain.types import ToolSpec


class CatalogTool(Tool):
    """FastMCP tool backed by a catalog entry."""

    @classmethod
    def from_spec(cls, spec: ToolSpec) -> "CatalogTool":
        return cls(
            name=spec.name,
            description=spec.description,
            parameters=spec.input_schema,
            tags=spec.tags,
            annotations=ToolAnnotations(readOnlyHint=spec.read_only),
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        outcome = await Container.dispatcher().dispatch(self.name, arguments)
        if outcome.is_error:
            raise ToolError(outcome.text)
        return ToolResult(content=[TextContent(type="text", text=outcome.text)])


def register_catalog_tools(
    mcp: FastMCP, catalog: Optional[Iterable[ToolSpec]] = None
) -> int:
    """Register catalog tools on the server, return how many were added."""
    count = 0
    for spec in catalog if catalog is not None else TOOL_CATALOG:
        mcp.add_tool(CatalogTool.from_spec(spec))
        count += 1
    return count


def reject_missing_arguments(mcp: FastMCP) -> None:
    """Answer calls that carry no ``arguments`` object with an error result.

    The MCP SDK substitutes ``{}`` for absent arguments before FastMCP
    resolves the tool, so the check has to wrap the raw request handler.
    """
    handlers = mcp._mcp_server.request_handlers
    call_tool = handlers[CallToolRequest]

    async def handler(req: CallToolRequest) -> ServerResult:
        if req.params.arguments is not None:
            return await call_tool(req)
        outcome = await Container.dispatcher().dispatch(req.params.name, None)
        return ServerResult(
            CallToolResult(
                content=[TextContent(type="text", text=outcome.text)],
                isError=outcome.is_error,
            )
        )

    handlers[CallToolRequest] = handler
