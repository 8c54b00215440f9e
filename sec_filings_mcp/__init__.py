"""
sec-filings-mcp - SEC EDGAR company lookups as MCP tools

Resolves tickers to CIKs through a cached ticker directory and reshapes
submission records into profiles, filing lists, insider activity and reports.
"""
__version__ = "1.0.0"
