"""ToolDispatcher – resolves a tool call against the catalog and runs it.

Every per-call failure (missing arguments, unknown tool, authentication,
remote API errors) is turned into an error-flagged ``ToolOutcome`` here so
the MCP host always receives a structured answer.
"""

import json
from typing import Any, Dict, Iterable, Mapping, Optional

from src.paper_invest.core.errors import (
    MissingArgumentsError,
    PaperInvestError,
    RemoteAPIError,
    UnknownToolError,
)
from src.paper_invest.domain.catalog import TOOLS_BY_NAME
from src.paper_invest.domain.types import ToolInvocation, ToolOutcome, ToolSpec
from src.paper_invest.utils.logger import logger


def format_success(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_error(error: Exception) -> str:
    payload = getattr(error, "payload", None)
    detail = json.dumps(payload, ensure_ascii=False) if payload is not None else ""
    return f"Error: {error}\n{detail}"


class ToolDispatcher:
    def __init__(self, connection, catalog: Optional[Iterable[ToolSpec]] = None):
        self.connection = connection
        self.specs: Dict[str, ToolSpec] = (
            dict(TOOLS_BY_NAME)
            if catalog is None
            else {spec.name: spec for spec in catalog}
        )

    def resolve(self, invocation: ToolInvocation) -> ToolSpec:
        spec = self.specs.get(invocation.name)
        if spec is None:
            raise UnknownToolError(invocation.name)
        return spec

    async def execute(self, invocation: ToolInvocation) -> Any:
        """Run one invocation and return the decoded response body.

        Raises PaperInvestError subclasses; ``dispatch`` is the variant that
        never raises.
        """
        spec = self.resolve(invocation)
        request = spec.build_request(invocation.arguments)
        return await self.connection.request(
            request.method.value,
            request.path,
            params=request.params,
            json=request.json,
        )

    async def dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolOutcome:
        logger.info("Tool call", tool=name)
        try:
            if arguments is None:
                raise MissingArgumentsError()
            data = await self.execute(ToolInvocation(name=name, arguments=arguments))
        except PaperInvestError as e:
            status = e.status_code if isinstance(e, RemoteAPIError) else None
            logger.warning(
                "Tool call failed",
                tool=name,
                error=str(e),
                error_type=e.__class__.__name__,
                status_code=status,
            )
            return ToolOutcome(text=format_error(e), is_error=True)
        except Exception as e:
            logger.error("Tool call crashed", tool=name, exc_info=True)
            return ToolOutcome(text=format_error(e), is_error=True)

        logger.info("Tool call succeeded", tool=name)
        return ToolOutcome(text=format_success(data))
