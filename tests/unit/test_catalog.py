"""Tests for the tool catalog and request construction."""
import pytest

from src.paper_invest.domain.catalog import TOOL_CATALOG, TOOLS_BY_NAME
from src.paper_invest.domain.types import HttpMethod, ToolCategory


def build(tool, /, **arguments):
    return TOOLS_BY_NAME[tool].build_request(arguments)


class TestCatalogStructure:
    """Test the static catalog."""

    def test_names_are_unique(self):
        names = [spec.name for spec in TOOL_CATALOG]
        assert len(names) == len(set(names)) == 23

    def test_required_fields_are_declared(self):
        for spec in TOOL_CATALOG:
            schema = spec.input_schema
            assert schema["type"] == "object"
            assert spec.description
            for field in schema.get("required", []):
                assert field in schema["properties"], f"{spec.name}: {field}"

    def test_path_params_are_declared(self):
        for spec in TOOL_CATALOG:
            for param in spec.path_params:
                assert param in spec.properties, f"{spec.name}: {param}"

    def test_order_enums(self):
        props = TOOLS_BY_NAME["create_order"].properties
        assert props["side"]["enum"] == [
            "BUY_TO_OPEN",
            "SELL_TO_CLOSE",
            "SELL_TO_OPEN",
            "BUY_TO_CLOSE",
        ]
        assert props["type"]["enum"] == ["MARKET", "LIMIT", "STOP", "STOP_LIMIT"]
        assert props["timeInForce"]["enum"] == ["DAY", "GTC", "IOC", "FOK"]

    def test_tools_without_required_fields_omit_required(self):
        assert "required" not in TOOLS_BY_NAME["get_today_filled_orders"].input_schema
        assert "required" not in TOOLS_BY_NAME["get_market_hours"].input_schema

    def test_write_tools_are_tagged(self):
        writes = {spec.name for spec in TOOL_CATALOG if "write" in spec.tags}
        assert "create_order" in writes
        assert "cancel_all_account_orders" in writes
        assert "get_batch_quotes" not in writes
        assert TOOLS_BY_NAME["get_quote"].tags == {ToolCategory.MARKET_DATA.value, "read"}

    def test_lookup_by_name(self):
        assert set(TOOLS_BY_NAME) == {spec.name for spec in TOOL_CATALOG}
        assert "place_trade" not in TOOLS_BY_NAME


class TestPaths:
    """Test method and path rendering."""

    @pytest.mark.parametrize(
        "name,arguments,method,path",
        [
            ("get_account", {"accountId": "a1"}, HttpMethod.GET, "/accounts/a1"),
            ("update_account", {"accountId": "a1"}, HttpMethod.PUT, "/accounts/a1"),
            ("freeze_account", {"accountId": "a1"}, HttpMethod.PUT, "/accounts/a1/freeze"),
            ("create_portfolio", {}, HttpMethod.POST, "/accounts/portfolios"),
            ("get_portfolio", {"portfolioId": "p1"}, HttpMethod.GET, "/accounts/portfolios/p1"),
            ("get_account_portfolios", {"accountId": "a1"}, HttpMethod.GET, "/accounts/a1/portfolios"),
            ("reset_portfolio", {"portfolioId": "p1"}, HttpMethod.POST, "/accounts/portfolios/p1/reset"),
            ("get_portfolio_equities", {"portfolioId": "p1"}, HttpMethod.GET, "/accounts/portfolios/p1/equities"),
            ("get_portfolio_options", {"portfolioId": "p1"}, HttpMethod.GET, "/accounts/portfolios/p1/options"),
            ("create_order", {}, HttpMethod.POST, "/orders"),
            ("create_batch_orders", {"orders": []}, HttpMethod.POST, "/orders/batch"),
            ("get_order", {"orderId": "o1"}, HttpMethod.GET, "/orders/o1"),
            ("cancel_order", {"orderId": "o1"}, HttpMethod.PUT, "/orders/o1/cancel"),
            ("get_account_orders", {"accountId": "a1"}, HttpMethod.GET, "/orders/account/a1"),
            ("cancel_all_account_orders", {"accountId": "a1"}, HttpMethod.DELETE, "/orders/account/a1"),
            ("get_today_filled_orders", {}, HttpMethod.GET, "/orders/filled/today"),
            ("get_quote", {"symbol": "AAPL"}, HttpMethod.GET, "/market-data/quote/AAPL"),
            ("get_batch_quotes", {"symbols": []}, HttpMethod.POST, "/market-data/quotes/batch"),
            ("is_market_open", {"symbol": "AAPL"}, HttpMethod.GET, "/market-data/is-market-open/AAPL"),
            ("get_portfolio_activities", {"portfolioId": "p1"}, HttpMethod.GET, "/activity-log/portfolio/p1"),
            ("get_day_trades", {"portfolioId": "p1"}, HttpMethod.GET, "/accounts/portfolios/p1/day-trades"),
            ("upgrade_to_margin", {"portfolioId": "p1"}, HttpMethod.PUT, "/accounts/portfolios/p1/margin-upgrade"),
        ],
    )
    def test_method_and_path(self, name, arguments, method, path):
        request = TOOLS_BY_NAME[name].build_request(arguments)
        assert request.method is method
        assert request.path == path

    def test_market_hours_optional_exchange(self):
        assert build("get_market_hours").path == "/market-data/market-hours"
        assert build("get_market_hours", exchange="NYSE").path == "/market-data/market-hours/NYSE"

    def test_path_segments_are_escaped(self):
        assert build("get_quote", symbol="BRK/B").path == "/market-data/quote/BRK%2FB"

    def test_missing_path_argument_is_left_to_remote(self):
        assert build("get_order").path == "/orders/"


class TestDefaults:
    """Test default values applied to optional fields."""

    def test_create_order_defaults(self):
        request = build(
            "create_order",
            portfolioId="p1",
            symbol="AAPL",
            quantity=10,
            side="BUY_TO_OPEN",
            type="MARKET",
        )

        assert request.json == {
            "portfolioId": "p1",
            "symbol": "AAPL",
            "quantity": 10,
            "side": "BUY_TO_OPEN",
            "type": "MARKET",
            "timeInForce": "DAY",
            "assetClass": "EQUITY",
            "session": "REGULAR",
        }
        assert request.params is None

    def test_create_order_keeps_supplied_values(self):
        request = build(
            "create_order",
            portfolioId="p1",
            symbol="AAPL",
            quantity=1,
            side="SELL_TO_OPEN",
            type="LIMIT",
            limitPrice=182.5,
            timeInForce="GTC",
            assetClass="OPTION",
            session="EXTENDED",
        )

        assert request.json["timeInForce"] == "GTC"
        assert request.json["assetClass"] == "OPTION"
        assert request.json["session"] == "EXTENDED"
        assert request.json["limitPrice"] == 182.5

    def test_empty_string_takes_default(self):
        assert build("create_order", session="").json["session"] == "REGULAR"

    @pytest.mark.parametrize(
        "name,arguments,params",
        [
            ("get_account_orders", {"accountId": "a1"}, {"page": 1, "limit": 10}),
            ("get_account_orders", {"accountId": "a1", "page": 3, "limit": 25}, {"page": 3, "limit": 25}),
            ("get_today_filled_orders", {}, {"page": 1, "limit": 10}),
            ("get_portfolio_activities", {"portfolioId": "p1"}, {"page": 1, "limit": 20}),
            ("get_day_trades", {"portfolioId": "p1"}, {"page": 1, "limit": 50}),
            ("get_day_trades", {"portfolioId": "p1", "page": 0}, {"page": 1, "limit": 50}),
        ],
    )
    def test_pagination_defaults(self, name, arguments, params):
        assert TOOLS_BY_NAME[name].build_request(arguments).params == params

    def test_activity_category_filter(self):
        assert build("get_portfolio_activities", portfolioId="p1", category="TRADE").params == {
            "page": 1,
            "limit": 20,
            "category": "TRADE",
        }

    def test_get_requests_without_query_send_no_params(self):
        assert build("get_quote", symbol="AAPL").params is None


class TestBodies:
    """Test request body assembly."""

    def test_get_requests_have_no_body(self):
        for spec in TOOL_CATALOG:
            if spec.method is HttpMethod.GET:
                assert spec.build_request({"portfolioId": "p1"}).json is None, spec.name

    def test_action_endpoints_have_no_body(self):
        assert build("freeze_account", accountId="a1").json is None
        assert build("reset_portfolio", portfolioId="p1").json is None
        assert build("cancel_order", orderId="o1").json is None
        assert build("cancel_all_account_orders", accountId="a1").json is None

    def test_create_portfolio_sends_all_arguments(self):
        arguments = {"accountId": "a1", "name": "Growth", "type": "IRA"}
        assert build("create_portfolio", **arguments).json == arguments

    def test_update_account_sends_only_name(self):
        assert build("update_account", accountId="a1", name="Main").json == {"name": "Main"}
        assert build("update_account", accountId="a1").json == {}

    def test_batch_orders_body_is_the_array(self):
        orders = [
            {"portfolioId": "p1", "symbol": "AAPL", "quantity": 1, "side": "BUY_TO_OPEN", "type": "MARKET"},
            {"portfolioId": "p1", "symbol": "MSFT", "quantity": 2, "side": "BUY_TO_OPEN", "type": "MARKET"},
        ]
        assert build("create_batch_orders", orders=orders).json == orders

    def test_batch_quotes_body(self):
        assert build("get_batch_quotes", symbols=["AAPL", "MSFT"]).json == {
            "symbols": ["AAPL", "MSFT"]
        }

    def test_margin_agreement_false_is_sent(self):
        assert build("upgrade_to_margin", portfolioId="p1", marginAgreement=False).json == {
            "marginAgreement": False
        }
