"""
sec-filings MCP Server (stdio / streamable-http)

MCP delivery layer - wraps the hexagonal core's handlers as FastMCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import MCPHandlers
from .config import get_host, get_port, get_ticker_cache_ttl, get_timeout, get_user_agent
from .container import Container

# Suppress per-request INFO logs
logging.getLogger("httpx").setLevel(logging.WARNING)

# Initialize MCP server with HTTP config
mcp = FastMCP("sec-filings", host=get_host(), port=get_port())

handlers = MCPHandlers(Container(
    user_agent=get_user_agent(),
    timeout=get_timeout(),
    ticker_cache_ttl=get_ticker_cache_ttl()
))


@mcp.tool()
async def overview(ticker: str = "AAPL") -> dict:
    """
    Basic company info by ticker: name, CIK, SIC code and recent filing count.

    Args:
        ticker: Stock ticker (e.g., "AAPL", "MSFT")

    Returns:
        Dictionary with company basics. Unknown tickers return an error
        plus a sample of known tickers.
    """
    return await handlers.overview(ticker=ticker)


@mcp.tool()
async def company(ticker: str) -> dict:
    """
    Full company profile: business info, fiscal year end, entity type, addresses.

    Args:
        ticker: Stock ticker (e.g., "AAPL", "MSFT", "NVDA")
    """
    return await handlers.company(ticker=ticker)


@mcp.tool()
async def filings(ticker: str, form_type: Optional[str] = None, limit: int = 20) -> dict:
    """
    Recent SEC filings by ticker, newest first, with document URLs.

    Args:
        ticker: Stock ticker (e.g., "TSLA")
        form_type: Optional form filter ("10-K", "10-Q", "8-K", "4", "DEF 14A", ...)
        limit: Max filings to return (1-100, default 20)

    Example:
        filings("TSLA", form_type="10-K", limit=5)
        → {total_filings: 1000, filtered_count: 5, filings: [{form, filing_date, document_url, ...}]}
    """
    return await handlers.filings(ticker=ticker, form_type=form_type, limit=limit)


@mcp.tool()
async def search(query: str, limit: int = 10) -> dict:
    """
    Search company tickers by name or ticker fragment.

    Args:
        query: Company name to search for (e.g., "apple")
        limit: Max results (1-50, default 10)
    """
    return await handlers.search(query=query, limit=limit)


@mcp.tool()
async def insider_trades(ticker: str, limit: int = 10) -> dict:
    """
    Recent insider activity (Form 3/4/5 filings) for a company.

    Args:
        ticker: Stock ticker
        limit: Max Form 3/4/5 filings (1-50, default 10)
    """
    return await handlers.insider_trades(ticker=ticker, limit=limit)


@mcp.tool()
async def report(ticker: str) -> dict:
    """
    Company report: profile, filing counts by form type, and the three most
    recent filings of each type.

    Args:
        ticker: Stock ticker
    """
    return await handlers.report(ticker=ticker)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="sec-filings: SEC EDGAR company lookups over MCP."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument("--host", default=get_host(), help="Bind host for streamable-http (env: HOST)")
    parser.add_argument("--port", type=int, default=get_port(), help="Bind port for streamable-http (env: PORT)")
    parser.add_argument("--user-agent", default=get_user_agent(), help="User-Agent sent to SEC (env: USER_AGENT)")
    parser.add_argument("--timeout", type=float, default=get_timeout(), help="Upstream timeout in seconds (env: SEC_TIMEOUT)")
    parser.add_argument(
        "--ticker-cache-ttl",
        type=float,
        default=get_ticker_cache_ttl(),
        help="Ticker directory TTL in seconds (env: TICKER_CACHE_TTL)"
    )
    return parser


def configure(args: argparse.Namespace) -> None:
    """Apply command-line overrides to the server settings and handlers."""
    global handlers

    mcp.settings.host = args.host
    mcp.settings.port = args.port
    handlers = MCPHandlers(Container(
        user_agent=args.user_agent,
        timeout=args.timeout,
        ticker_cache_ttl=args.ticker_cache_ttl
    ))


def main(argv: Optional[list[str]] = None):
    """Main entry point for the MCP server."""
    args = build_parser().parse_args(argv)
    configure(args)

    if args.transport == "streamable-http":
        logging.basicConfig(level=logging.INFO)
        logging.getLogger(__name__).info(
            f"Starting sec-filings on http://{mcp.settings.host}:{mcp.settings.port}"
        )
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
