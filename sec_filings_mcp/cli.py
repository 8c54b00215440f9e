#!/usr/bin/env python3
"""
CLI for sec-filings MCP - test tools without MCP restart

Usage:
  sec-filings list-tools                     # Show MCP tool definitions
  sec-filings overview AAPL                  # Basic company info
  sec-filings company NVDA                   # Full company profile
  sec-filings filings TSLA                   # Latest 20 filings
  sec-filings filings TSLA --form 10-K -n 5  # Latest 5 10-Ks
  sec-filings search apple                   # Search ticker directory
  sec-filings insider-trades TSLA            # Form 3/4/5 filings
  sec-filings report MSFT                    # Grouped company report
  sec-filings report MSFT --json             # Raw structured output
  sec-filings filings TSLA --timeout 10      # Override SEC_TIMEOUT

Fast iteration: Uses hexagonal core directly (no MCP layer)
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .config import get_ticker_cache_ttl, get_timeout, get_user_agent
from .container import Container
from .formatters import format_result


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_schema in TOOL_SCHEMAS.values():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


def container_from_args(args: argparse.Namespace) -> Container:
    """Build the container from CLI flags (which default to the env settings)"""
    return Container(
        user_agent=args.user_agent,
        timeout=args.timeout,
        ticker_cache_ttl=args.ticker_cache_ttl
    )


async def tool_command(
    name: str,
    arguments: dict[str, Any],
    as_json: bool,
    container: Optional[Container] = None
) -> int:
    """Run one tool through the MCP handlers and print the result"""
    try:
        if container is None:
            container = Container(
                user_agent=get_user_agent(),
                timeout=get_timeout(),
                ticker_cache_ttl=get_ticker_cache_ttl()
            )
        handlers = MCPHandlers(container)

        result = await handlers.dispatch(name, arguments)

        if as_json:
            print(json.dumps(result, indent=2))
        else:
            print(format_result(name, result))

        if not result["success"]:
            return 1

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


def build_parser() -> argparse.ArgumentParser:
    # Shared by every tool subcommand so flags work after the ticker
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print raw JSON instead of BBG Lite text")
    common.add_argument("--user-agent", default=get_user_agent(), help="User-Agent sent to SEC (env: USER_AGENT)")
    common.add_argument("--timeout", type=float, default=get_timeout(), help="Upstream timeout in seconds (env: SEC_TIMEOUT)")
    common.add_argument(
        "--ticker-cache-ttl",
        type=float,
        default=get_ticker_cache_ttl(),
        help="Ticker directory TTL in seconds (env: TICKER_CACHE_TTL)"
    )

    parser = argparse.ArgumentParser(
        description="sec-filings CLI - Test MCP tools without server restart"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    overview_parser = subparsers.add_parser("overview", parents=[common], help="Basic company info")
    overview_parser.add_argument("ticker", nargs="?", default="AAPL", help="Stock ticker (default: AAPL)")

    company_parser = subparsers.add_parser("company", parents=[common], help="Full company profile")
    company_parser.add_argument("ticker", help="Stock ticker (e.g., NVDA)")

    filings_parser = subparsers.add_parser("filings", parents=[common], help="Recent filings")
    filings_parser.add_argument("ticker", help="Stock ticker (e.g., TSLA)")
    filings_parser.add_argument("--form", dest="form_type", help="Form type filter (e.g., 10-K)")
    filings_parser.add_argument("-n", "--limit", type=int, default=20, help="Max filings (default: 20, max 100)")

    search_parser = subparsers.add_parser("search", parents=[common], help="Search ticker directory")
    search_parser.add_argument("query", help="Company name or ticker fragment")
    search_parser.add_argument("-n", "--limit", type=int, default=10, help="Max results (default: 10, max 50)")

    insider_parser = subparsers.add_parser("insider-trades", parents=[common], help="Form 3/4/5 filings")
    insider_parser.add_argument("ticker", help="Stock ticker (e.g., TSLA)")
    insider_parser.add_argument("-n", "--limit", type=int, default=10, help="Max filings (default: 10, max 50)")

    report_parser = subparsers.add_parser("report", parents=[common], help="Grouped company report")
    report_parser.add_argument("ticker", help="Stock ticker (e.g., MSFT)")

    return parser


def main(argv: Optional[list[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "list-tools":
        return asyncio.run(list_tools_command())

    if args.command in ("overview", "company", "report"):
        name, arguments = args.command, {"ticker": args.ticker}
    elif args.command == "filings":
        name, arguments = "filings", {
            "ticker": args.ticker,
            "form_type": args.form_type,
            "limit": args.limit
        }
    elif args.command == "search":
        name, arguments = "search", {"query": args.query, "limit": args.limit}
    elif args.command == "insider-trades":
        name, arguments = "insider_trades", {"ticker": args.ticker, "limit": args.limit}
    else:
        parser.print_help()
        return 1

    return asyncio.run(tool_command(name, arguments, args.json, container_from_args(args)))


if __name__ == "__main__":
    sys.exit(main())
