"""Static catalog of Paper Invest tools.

Each entry is published to MCP hosts as-is (name, description, input
schema) and drives the dispatcher, so the listing and the HTTP mapping
cannot drift apart.
"""

from typing import Any, Dict, List, Optional

from src.paper_invest.domain.types import (
    BodyMode,
    HttpMethod,
    ToolCategory,
    ToolSpec,
)


def _string(description: Optional[str] = None) -> Dict[str, Any]:
    prop: Dict[str, Any] = {"type": "string"}
    if description:
        prop["description"] = description
    return prop


def _number(description: Optional[str] = None) -> Dict[str, Any]:
    prop: Dict[str, Any] = {"type": "number"}
    if description:
        prop["description"] = description
    return prop


ORDER_SIDES = ["BUY_TO_OPEN", "SELL_TO_CLOSE", "SELL_TO_OPEN", "BUY_TO_CLOSE"]
ORDER_TYPES = ["MARKET", "LIMIT", "STOP", "STOP_LIMIT"]
TIME_IN_FORCE = ["DAY", "GTC", "IOC", "FOK"]


TOOL_CATALOG: List[ToolSpec] = [
    # === ACCOUNT MANAGEMENT ===
    ToolSpec(
        name="get_account",
        description="Get account details by ID",
        category=ToolCategory.ACCOUNT,
        method=HttpMethod.GET,
        path="/accounts/{accountId}",
        properties={"accountId": _string("Account ID")},
        required=("accountId",),
    ),
    ToolSpec(
        name="update_account",
        description="Update account details",
        category=ToolCategory.ACCOUNT,
        method=HttpMethod.PUT,
        path="/accounts/{accountId}",
        properties={
            "accountId": _string("Account ID"),
            "name": _string("New account name"),
        },
        required=("accountId",),
        read_only=False,
        body=BodyMode.FIELDS,
        body_fields=("name",),
    ),
    ToolSpec(
        name="freeze_account",
        description="Freeze a trading account",
        category=ToolCategory.ACCOUNT,
        method=HttpMethod.PUT,
        path="/accounts/{accountId}/freeze",
        properties={"accountId": _string("Account ID to freeze")},
        required=("accountId",),
        read_only=False,
    ),
    # === PORTFOLIO OPERATIONS ===
    ToolSpec(
        name="create_portfolio",
        description="Create a new portfolio",
        category=ToolCategory.PORTFOLIO,
        method=HttpMethod.POST,
        path="/accounts/portfolios",
        properties={
            "accountId": _string("Account ID"),
            "name": _string("Portfolio name"),
            "type": _string("Portfolio type (e.g., INDIVIDUAL, IRA)"),
        },
        required=("accountId", "name", "type"),
        read_only=False,
        body=BodyMode.ARGUMENTS,
    ),
    ToolSpec(
        name="get_portfolio",
        description="Get portfolio details",
        category=ToolCategory.PORTFOLIO,
        method=HttpMethod.GET,
        path="/accounts/portfolios/{portfolioId}",
        properties={"portfolioId": _string("Portfolio ID")},
        required=("portfolioId",),
    ),
    ToolSpec(
        name="get_account_portfolios",
        description="Get all portfolios for an account",
        category=ToolCategory.PORTFOLIO,
        method=HttpMethod.GET,
        path="/accounts/{accountId}/portfolios",
        properties={"accountId": _string("Account ID")},
        required=("accountId",),
    ),
    ToolSpec(
        name="reset_portfolio",
        description="Reset portfolio to initial state",
        category=ToolCategory.PORTFOLIO,
        method=HttpMethod.POST,
        path="/accounts/portfolios/{portfolioId}/reset",
        properties={"portfolioId": _string("Portfolio ID to reset")},
        required=("portfolioId",),
        read_only=False,
    ),
    # === POSITIONS ===
    ToolSpec(
        name="get_portfolio_equities",
        description="Get all equity positions in a portfolio",
        category=ToolCategory.POSITION,
        method=HttpMethod.GET,
        path="/accounts/portfolios/{portfolioId}/equities",
        properties={"portfolioId": _string("Portfolio ID")},
        required=("portfolioId",),
    ),
    ToolSpec(
        name="get_portfolio_options",
        description="Get all option positions in a portfolio",
        category=ToolCategory.POSITION,
        method=HttpMethod.GET,
        path="/accounts/portfolios/{portfolioId}/options",
        properties={"portfolioId": _string("Portfolio ID")},
        required=("portfolioId",),
    ),
    # === TRADING ===
    ToolSpec(
        name="create_order",
        description="Create a new trading order",
        category=ToolCategory.TRADING,
        method=HttpMethod.POST,
        path="/orders",
        properties={
            "portfolioId": _string("Portfolio ID"),
            "symbol": _string("Stock symbol"),
            "quantity": _number("Number of shares"),
            "side": {"type": "string", "enum": ORDER_SIDES, "description": "Order side"},
            "type": {"type": "string", "enum": ORDER_TYPES, "description": "Order type"},
            "timeInForce": {
                "type": "string",
                "enum": TIME_IN_FORCE,
                "description": "Time in force (default: DAY)",
            },
            "limitPrice": _number("Limit price (for limit orders)"),
            "stopPrice": _number("Stop price (for stop orders)"),
            "assetClass": _string("Asset class (default: EQUITY)"),
            "session": _string("Trading session (default: REGULAR)"),
        },
        required=("portfolioId", "symbol", "quantity", "side", "type"),
        read_only=False,
        body=BodyMode.ARGUMENTS,
        body_defaults={
            "assetClass": "EQUITY",
            "session": "REGULAR",
            "timeInForce": "DAY",
        },
    ),
    ToolSpec(
        name="create_batch_orders",
        description="Create multiple orders at once",
        category=ToolCategory.TRADING,
        method=HttpMethod.POST,
        path="/orders/batch",
        properties={
            "orders": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "portfolioId": _string(),
                        "symbol": _string(),
                        "quantity": _number(),
                        "side": _string(),
                        "type": _string(),
                    },
                },
                "description": "Array of order objects",
            }
        },
        required=("orders",),
        read_only=False,
        body=BodyMode.FIELD_VALUE,
        body_fields=("orders",),
    ),
    ToolSpec(
        name="get_order",
        description="Get order details by ID",
        category=ToolCategory.TRADING,
        method=HttpMethod.GET,
        path="/orders/{orderId}",
        properties={"orderId": _string("Order ID")},
        required=("orderId",),
    ),
    ToolSpec(
        name="cancel_order",
        description="Cancel an existing order",
        category=ToolCategory.TRADING,
        method=HttpMethod.PUT,
        path="/orders/{orderId}/cancel",
        properties={"orderId": _string("Order ID to cancel")},
        required=("orderId",),
        read_only=False,
    ),
    ToolSpec(
        name="get_account_orders",
        description="Get orders for an account",
        category=ToolCategory.TRADING,
        method=HttpMethod.GET,
        path="/orders/account/{accountId}",
        properties={
            "accountId": _string("Account ID"),
            "page": _number("Page number (default: 1)"),
            "limit": _number("Results per page (default: 10)"),
        },
        required=("accountId",),
        query_defaults={"page": 1, "limit": 10},
    ),
    ToolSpec(
        name="cancel_all_account_orders",
        description="Cancel all orders for an account",
        category=ToolCategory.TRADING,
        method=HttpMethod.DELETE,
        path="/orders/account/{accountId}",
        properties={"accountId": _string("Account ID")},
        required=("accountId",),
        read_only=False,
    ),
    ToolSpec(
        name="get_today_filled_orders",
        description="Get all orders filled today",
        category=ToolCategory.TRADING,
        method=HttpMethod.GET,
        path="/orders/filled/today",
        properties={
            "page": _number("Page number (default: 1)"),
            "limit": _number("Results per page (default: 10)"),
        },
        query_defaults={"page": 1, "limit": 10},
    ),
    # === MARKET DATA ===
    ToolSpec(
        name="get_quote",
        description="Get real-time quote for a symbol",
        category=ToolCategory.MARKET_DATA,
        method=HttpMethod.GET,
        path="/market-data/quote/{symbol}",
        properties={"symbol": _string("Stock symbol")},
        required=("symbol",),
    ),
    ToolSpec(
        name="get_batch_quotes",
        description="Get real-time quotes for multiple symbols",
        category=ToolCategory.MARKET_DATA,
        method=HttpMethod.POST,
        path="/market-data/quotes/batch",
        properties={
            "symbols": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of stock symbols",
            }
        },
        required=("symbols",),
        body=BodyMode.FIELDS,
        body_fields=("symbols",),
    ),
    ToolSpec(
        name="get_market_hours",
        description="Get market hours for an exchange",
        category=ToolCategory.MARKET_DATA,
        method=HttpMethod.GET,
        path="/market-data/market-hours",
        properties={"exchange": _string("Exchange name (optional)")},
        optional_segment="exchange",
    ),
    ToolSpec(
        name="is_market_open",
        description="Check if market is open for a symbol",
        category=ToolCategory.MARKET_DATA,
        method=HttpMethod.GET,
        path="/market-data/is-market-open/{symbol}",
        properties={"symbol": _string("Stock symbol")},
        required=("symbol",),
    ),
    # === ACTIVITY LOG ===
    ToolSpec(
        name="get_portfolio_activities",
        description="Get activity log for a portfolio",
        category=ToolCategory.ACTIVITY,
        method=HttpMethod.GET,
        path="/activity-log/portfolio/{portfolioId}",
        properties={
            "portfolioId": _string("Portfolio ID"),
            "page": _number("Page number (default: 1)"),
            "limit": _number("Results per page (default: 20)"),
            "category": _string("Filter by category (optional)"),
        },
        required=("portfolioId",),
        query_defaults={"page": 1, "limit": 20},
        query_optional=("category",),
    ),
    ToolSpec(
        name="get_day_trades",
        description="Get day trade activity for a portfolio",
        category=ToolCategory.ACTIVITY,
        method=HttpMethod.GET,
        path="/accounts/portfolios/{portfolioId}/day-trades",
        properties={
            "portfolioId": _string("Portfolio ID"),
            "page": _number("Page number (default: 1)"),
            "limit": _number("Results per page (default: 50)"),
        },
        required=("portfolioId",),
        query_defaults={"page": 1, "limit": 50},
    ),
    # === MARGIN TRADING ===
    ToolSpec(
        name="upgrade_to_margin",
        description="Upgrade portfolio to margin account",
        category=ToolCategory.MARGIN,
        method=HttpMethod.PUT,
        path="/accounts/portfolios/{portfolioId}/margin-upgrade",
        properties={
            "portfolioId": _string("Portfolio ID"),
            "marginAgreement": {
                "type": "boolean",
                "description": "User agrees to margin terms",
            },
        },
        required=("portfolioId", "marginAgreement"),
        read_only=False,
        body=BodyMode.FIELDS,
        body_fields=("marginAgreement",),
    ),
]

TOOLS_BY_NAME: Dict[str, ToolSpec] = {spec.name: spec for spec in TOOL_CATALOG}
