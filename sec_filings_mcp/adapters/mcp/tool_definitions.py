"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by the stdio server, the HTTP/SSE server and the CLI.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "overview": {
        "name": "overview",
        "description": """Basic company info by ticker (name, CIK, SIC, filing count).

overview("AAPL") → {name: "Apple Inc.", cik: "0000320193", recent_filings_count: 1000}
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ticker": {
                    "type": "string",
                    "description": "Stock ticker (e.g. AAPL, MSFT, NVDA)",
                    "default": "AAPL"
                }
            },
            "required": []
        }
    },
    "company": {
        "name": "company",
        "description": """Full company profile by ticker: business info, fiscal year, entity type, addresses.

company("NVDA") → {name, cik, ein, sic, fiscal_year_end, addresses, former_names, ...}
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ticker": {
                    "type": "string",
                    "description": "Stock ticker (e.g. AAPL, MSFT, NVDA)"
                }
            },
            "required": ["ticker"]
        }
    },
    "filings": {
        "name": "filings",
        "description": """Recent SEC filings by ticker, newest first, with document URLs.

filings("TSLA") → latest 20 filings of any type
filings("TSLA", form_type="10-K") → TSLA's 10-Ks
filings("TSLA", form_type="8-K", limit=5) → 5 most recent 8-Ks
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ticker": {
                    "type": "string",
                    "description": "Stock ticker (e.g. TSLA, AAPL)"
                },
                "form_type": {
                    "type": "string",
                    "description": "Filter by form type: 10-K, 10-Q, 8-K, 4, DEF 14A, etc."
                },
                "limit": {
                    "type": "integer",
                    "description": "Max filings to return (1-100)",
                    "default": 20
                }
            },
            "required": ["ticker"]
        }
    },
    "search": {
        "name": "search",
        "description": """Search company tickers by name or ticker substring.

search("apple") → AAPL Apple Inc., ...
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Company name or ticker fragment"
                },
                "limit": {
                    "type": "integer",
                    "description": "Max results (1-50)",
                    "default": 10
                }
            },
            "required": ["query"]
        }
    },
    "insider_trades": {
        "name": "insider_trades",
        "description": """Recent insider activity (Form 3/4/5 filings) for a company.

insider_trades("TSLA") → 10 most recent ownership filings with document URLs
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ticker": {
                    "type": "string",
                    "description": "Stock ticker (e.g. TSLA, AAPL)"
                },
                "limit": {
                    "type": "integer",
                    "description": "Max Form 3/4/5 filings (1-50)",
                    "default": 10
                }
            },
            "required": ["ticker"]
        }
    },
    "report": {
        "name": "report",
        "description": """Company report: profile, filing counts by form type, 3 most recent filings per type.

report("MSFT") → {profile, filings_summary: {total_filings, by_type}, recent_by_type}
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ticker": {
                    "type": "string",
                    "description": "Stock ticker (e.g. AAPL, MSFT)"
                }
            },
            "required": ["ticker"]
        }
    }
}
