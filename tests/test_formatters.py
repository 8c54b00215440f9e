"""
Tests for BBG Lite text formatters
"""
from sec_filings_mcp.formatters import format_filings, format_report, format_result, format_search


class TestFormatters:
    def test_error(self):
        text = format_result("company", {"success": False, "error": "Ticker ZZZZ not found"})
        assert text == "ERROR: Ticker ZZZZ not found"

    def test_error_with_known_tickers(self):
        text = format_result("overview", {
            "success": False,
            "error": "Ticker ZZZZ not found",
            "available_tickers": ["AAPL", "MSFT"]
        })
        assert "KNOWN TICKERS: AAPL, MSFT" in text

    def test_filings(self):
        text = format_filings({
            "success": True,
            "ticker": "AAPL",
            "company_name": "Apple Inc.",
            "form_type": "10-K",
            "total_filings": 1000,
            "filtered_count": 1,
            "filings": [{
                "form": "10-K",
                "filing_date": "2023-11-03",
                "document_url": "https://www.sec.gov/Archives/edgar/data/320193/000032019323000106/aapl-20230930.htm",
            }],
        })
        assert text.startswith("AAPL (Apple Inc.) 10-K FILINGS")
        assert "2023-11-03" in text
        assert "Showing 1 of 1,000 filings" in text

    def test_filings_empty(self):
        text = format_filings({"success": True, "ticker": "SHEL", "filings": []})
        assert "NO FILINGS FOUND" in text

    def test_search_no_matches(self):
        text = format_search({"success": True, "query": "zzz", "results": [], "result_count": 0, "total_companies": 5})
        assert "NO MATCHES FOUND" in text

    def test_report_sorted_by_count(self):
        text = format_report({
            "success": True,
            "profile": {"ticker": "AAPL", "name": "Apple Inc.", "cik": "320193"},
            "filings_summary": {"total_filings": 5, "by_type": {"10-K": 1, "4": 4}},
            "recent_by_type": {
                "10-K": [{"date": "2023-11-03"}],
                "4": [{"date": "2023-11-20"}, {"date": "2023-11-19"}, {"date": "2023-11-18"}],
            },
        })
        lines = text.splitlines()
        form_4 = next(i for i, line in enumerate(lines) if line.startswith("4 "))
        form_10k = next(i for i, line in enumerate(lines) if line.startswith("10-K"))
        assert form_4 < form_10k

    def test_unknown_tool_falls_back_to_json(self):
        assert format_result("other", {"success": True}) == '{\n  "success": true\n}'
