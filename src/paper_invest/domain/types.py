"""Data types for the Paper Invest tool catalog.

A ``ToolSpec`` declares one MCP tool and the single REST call it maps to:
HTTP method, path template, query defaults and how the request body is
assembled from the tool arguments.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Set, Tuple
from urllib.parse import quote


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ToolCategory(str, Enum):
    """Catalog groups, published as MCP tool tags."""

    ACCOUNT = "account"
    PORTFOLIO = "portfolio"
    POSITION = "position"
    TRADING = "trading"
    MARKET_DATA = "market-data"
    ACTIVITY = "activity"
    MARGIN = "margin"


class BodyMode(str, Enum):
    """How the JSON body is built from the tool arguments."""

    NONE = "none"  # no body
    ARGUMENTS = "arguments"  # every argument, plus body defaults
    FIELDS = "fields"  # only the named arguments that were supplied
    FIELD_VALUE = "field_value"  # the value of one argument is the body


def apply_default(arguments: Mapping[str, Any], key: str, default: Any) -> Any:
    """Missing, null, empty, zero and false values all take the default."""
    value = arguments.get(key)
    return value if value else default


@dataclass(frozen=True)
class OutboundRequest:
    """One HTTP call ready to hand to the connection."""

    method: HttpMethod
    path: str
    params: Optional[Dict[str, Any]] = None
    json: Any = None


@dataclass(frozen=True)
class ToolSpec:
    """Declarative description of one tool."""

    name: str
    description: str
    category: ToolCategory
    method: HttpMethod
    path: str
    properties: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    required: Tuple[str, ...] = ()
    read_only: bool = True
    query_defaults: Dict[str, Any] = field(default_factory=dict)
    query_optional: Tuple[str, ...] = ()
    body: BodyMode = BodyMode.NONE
    body_fields: Tuple[str, ...] = ()
    body_defaults: Dict[str, Any] = field(default_factory=dict)
    # Trailing path segment appended only when the argument is supplied
    optional_segment: Optional[str] = None

    @property
    def input_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "object", "properties": self.properties}
        if self.required:
            schema["required"] = list(self.required)
        return schema

    @property
    def tags(self) -> Set[str]:
        return {self.category.value, "read" if self.read_only else "write"}

    @property
    def path_params(self) -> Tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    def build_request(self, arguments: Mapping[str, Any]) -> OutboundRequest:
        """Translate tool arguments into the outbound HTTP call.

        Missing arguments are not rejected here; the remote API decides.
        """
        path = self.path.format(
            **{name: _segment(arguments.get(name)) for name in self.path_params}
        )
        if self.optional_segment and arguments.get(self.optional_segment):
            path = f"{path}/{_segment(arguments[self.optional_segment])}"

        params = None
        if self.query_defaults or self.query_optional:
            params = {
                key: apply_default(arguments, key, default)
                for key, default in self.query_defaults.items()
            }
            for key in self.query_optional:
                if arguments.get(key):
                    params[key] = arguments[key]

        return OutboundRequest(
            method=self.method, path=path, params=params, json=self._body(arguments)
        )

    def _body(self, arguments: Mapping[str, Any]) -> Any:
        if self.body is BodyMode.ARGUMENTS:
            body = dict(arguments)
            for key, default in self.body_defaults.items():
                body[key] = apply_default(arguments, key, default)
            return body
        if self.body is BodyMode.FIELDS:
            return {key: arguments[key] for key in self.body_fields if key in arguments}
        if self.body is BodyMode.FIELD_VALUE:
            return arguments.get(self.body_fields[0])
        return None


@dataclass(frozen=True)
class ToolInvocation:
    """A single tool call; lives only for one dispatch."""

    name: str
    arguments: Mapping[str, Any]


@dataclass(frozen=True)
class ToolOutcome:
    """Text content returned to the MCP host, flagged when it is an error."""

    text: str
    is_error: bool = False


def _segment(value: Any) -> str:
    return quote("" if value is None else str(value), safe="")
