"""
Tests for the MCP handlers and container wiring.

The container is built with an httpx.MockTransport, so every layer below the
handlers is real except the network.
"""
import asyncio

import httpx
import pytest

from sec_filings_mcp.adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from sec_filings_mcp.container import Container

from conftest import SecRouter, aapl_submissions


def make_handlers(router: SecRouter) -> MCPHandlers:
    container = Container(user_agent="test@example.com", transport=httpx.MockTransport(router))
    return MCPHandlers(container)


def run(coro):
    return asyncio.run(coro)


class TestContainer:
    """Test dependency injection container."""

    def test_container_creates_all_services(self):
        container = Container(user_agent="test@example.com")

        assert container.sec is not None
        assert container.directory is not None
        assert container.overview is not None
        assert container.company is not None
        assert container.filings is not None
        assert container.search is not None
        assert container.insider_trades is not None
        assert container.report is not None

    def test_directory_and_lookup_share_client(self):
        container = Container(user_agent="test@example.com", ticker_cache_ttl=60)
        assert container.directory.source is container.sec
        assert container.lookup.submissions is container.sec
        assert container.directory.ttl == 60


class TestToolSchemas:
    def test_every_tool_has_a_handler(self):
        for name in TOOL_SCHEMAS:
            assert hasattr(MCPHandlers, name)
            assert TOOL_SCHEMAS[name]["name"] == name


class TestOverview:
    def test_success(self, sec_router):
        result = run(make_handlers(sec_router).overview("aapl"))

        assert result["success"] is True
        assert result["ticker"] == "AAPL"
        assert result["name"] == "Apple Inc."
        assert result["recent_filings_count"] == 5
        assert result["data_source"] == "SEC EDGAR (live)"
        assert "fetched_at" in result

    def test_not_found_lists_known_tickers(self, sec_router):
        result = run(make_handlers(sec_router).overview("ZZZZ"))

        assert result["success"] is False
        assert result["error"] == "Ticker ZZZZ not found"
        assert result["available_tickers"][:2] == ["AAPL", "MSFT"]


class TestCompany:
    def test_success(self, sec_router):
        result = run(make_handlers(sec_router).company("AAPL"))

        assert result["success"] is True
        assert result["ein"] == "942404110"
        assert result["former_names"][0]["name"] == "APPLE COMPUTER INC"

    def test_not_found_does_not_fetch_submissions(self, sec_router):
        result = run(make_handlers(sec_router).company("ZZZZ"))

        assert result == {"success": False, "error": "Ticker ZZZZ not found"}
        assert sec_router.paths() == ["/files/company_tickers.json"]

    def test_upstream_failure(self, sec_router):
        # MSFT resolves but has no canned submissions -> 404
        result = run(make_handlers(sec_router).company("MSFT"))

        assert result["success"] is False
        assert "404" in result["error"]

    def test_invalid_ticker(self, sec_router):
        result = run(make_handlers(sec_router).company(""))

        assert result["success"] is False
        assert "ticker" in result["error"]
        assert sec_router.requests == []


class TestFilings:
    def test_filtered(self, sec_router):
        result = run(make_handlers(sec_router).filings("AAPL", form_type="10-K"))

        assert result["success"] is True
        assert result["total_filings"] == 5
        assert result["filtered_count"] == 1
        assert result["filings"][0]["document_url"] == (
            "https://www.sec.gov/Archives/edgar/data/320193/000032019323000106/aapl-20230930.htm"
        )

    def test_limit_clamped_to_100(self, sec_router):
        result = run(make_handlers(sec_router).filings("AAPL", limit=1000))
        assert result["limit"] == 100

    def test_no_filing_data(self):
        payload = aapl_submissions()
        del payload["filings"]
        router = SecRouter(submissions={"0000320193": payload})

        result = run(make_handlers(router).filings("AAPL"))

        assert result["success"] is True
        assert result["error"] == "No filings found"
        assert result["filings"] == []
        assert result["filtered_count"] == 0

    def test_ragged_columns_fail_cleanly(self):
        payload = aapl_submissions()
        payload["filings"]["recent"]["primaryDocument"].pop()
        router = SecRouter(submissions={"0000320193": payload})

        result = run(make_handlers(router).filings("AAPL"))

        assert result["success"] is False
        assert "Malformed submissions payload" in result["error"]


class TestSearch:
    def test_success(self, sec_router):
        result = run(make_handlers(sec_router).search("apple", limit=5))

        assert result["success"] is True
        assert result["result_count"] == 2
        assert result["results"][0] == {"ticker": "AAPL", "name": "Apple Inc.", "cik": "0000320193"}
        assert result["total_companies"] == 5

    def test_directory_unavailable(self):
        router = SecRouter(tickers_status=500)
        result = run(make_handlers(router).search("apple"))

        assert result["success"] is False
        assert "500" in result["error"]


class TestInsiderTrades:
    def test_success(self, sec_router):
        result = run(make_handlers(sec_router).insider_trades("AAPL"))

        assert result["success"] is True
        assert [t["form"] for t in result["trades"]] == ["4", "3"]
        assert result["insider_filings_count"] == 2
        assert result["trades"][0]["report_owner"] == "2023-11-16"

    def test_no_filing_data(self):
        payload = aapl_submissions()
        payload["filings"] = {}
        router = SecRouter(submissions={"0000320193": payload})

        result = run(make_handlers(router).insider_trades("AAPL"))

        assert result["success"] is True
        assert result["trades"] == []
        assert result["insider_filings_count"] == 0


class TestReport:
    def test_success(self, sec_router):
        result = run(make_handlers(sec_router).report("AAPL"))

        assert result["success"] is True
        assert result["profile"]["name"] == "Apple Inc."
        assert result["filings_summary"]["total_filings"] == 5
        assert result["filings_summary"]["by_type"]["10-K"] == 1
        assert result["recent_by_type"]["10-K"][0] == {
            "date": "2023-11-03",
            "accession_number": "0000320193-23-000106",
            "document": "aapl-20230930.htm",
        }


class TestDispatch:
    def test_routes_by_name(self, sec_router):
        result = run(make_handlers(sec_router).dispatch("filings", {"ticker": "AAPL", "limit": 2}))
        assert result["filtered_count"] == 2

    def test_overview_defaults_to_aapl(self, sec_router):
        result = run(make_handlers(sec_router).dispatch("overview", {}))
        assert result["ticker"] == "AAPL"

    def test_unknown_tool(self, sec_router):
        with pytest.raises(ValueError, match="Unknown tool"):
            run(make_handlers(sec_router).dispatch("analytics", {}))

    def test_directory_cached_across_tools(self, sec_router):
        handlers = make_handlers(sec_router)
        run(handlers.overview("AAPL"))
        run(handlers.report("AAPL"))

        assert sec_router.paths().count("/files/company_tickers.json") == 1
