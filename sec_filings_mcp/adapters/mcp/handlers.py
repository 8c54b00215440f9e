"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.

Every handler returns a dict with a "success" flag. A ticker that does not
resolve and a company without filings are reported in the payload; upstream
failures come back as {"success": False, "error": ...}.
"""
import asyncio
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Optional

from ...container import Container
from ...core import (
    FilingsQuery,
    InsiderTradesQuery,
    NoFilingData,
    SearchQuery,
    TickerNotFound,
    TickerQuery,
)

logger = logging.getLogger(__name__)

DATA_SOURCE = "SEC EDGAR (live)"
AVAILABLE_TICKERS_HINT = 20


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _failure(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def overview(self, ticker: str = "AAPL") -> dict[str, Any]:
        """Basic company info; lists some known tickers on a miss"""
        try:
            query = TickerQuery(ticker)
            result = await asyncio.to_thread(self.container.overview.execute, query)
            return {
                "success": True,
                **asdict(result),
                "fetched_at": _now(),
                "data_source": DATA_SOURCE
            }

        except TickerNotFound as e:
            return {
                **_failure(str(e)),
                "available_tickers": self.container.directory.tickers(AVAILABLE_TICKERS_HINT)
            }
        except Exception as e:
            logger.exception(f"overview failed for {ticker}")
            return _failure(f"Failed to get overview for {ticker}: {str(e)}")

    async def company(self, ticker: str) -> dict[str, Any]:
        """Full company profile"""
        try:
            query = TickerQuery(ticker)
            result = await asyncio.to_thread(self.container.company.execute, query)
            return {"success": True, **asdict(result), "fetched_at": _now()}

        except TickerNotFound as e:
            return _failure(str(e))
        except Exception as e:
            logger.exception(f"company failed for {ticker}")
            return _failure(f"Failed to get company profile for {ticker}: {str(e)}")

    async def filings(
        self,
        ticker: str,
        form_type: Optional[str] = None,
        limit: int = 20
    ) -> dict[str, Any]:
        """Recent filings with optional form type filter"""
        try:
            query = FilingsQuery(ticker, form_type=form_type, limit=limit)
            result = await asyncio.to_thread(self.container.filings.execute, query)
            return {
                "success": True,
                **asdict(result),
                "form_type": query.form_type,
                "limit": query.limit,
                "fetched_at": _now()
            }

        except TickerNotFound as e:
            return _failure(str(e))
        except NoFilingData as e:
            return {
                "success": True,
                "error": str(e),
                "ticker": e.ticker,
                "total_filings": 0,
                "filtered_count": 0,
                "filings": [],
                "fetched_at": _now()
            }
        except Exception as e:
            logger.exception(f"filings failed for {ticker}")
            return _failure(f"Failed to list filings for {ticker}: {str(e)}")

    async def search(self, query: str, limit: int = 10) -> dict[str, Any]:
        """Search tickers by company name or ticker"""
        try:
            search_query = SearchQuery(query, limit=limit)
            result = await asyncio.to_thread(self.container.search.execute, search_query)
            return {
                "success": True,
                "query": result.query,
                "result_count": len(result.results),
                "results": [
                    {"ticker": entry.ticker, "name": entry.title, "cik": entry.cik}
                    for entry in result.results
                ],
                "total_companies": result.total_companies,
                "fetched_at": _now()
            }

        except Exception as e:
            logger.exception(f"search failed for {query!r}")
            return _failure(f"Search failed: {str(e)}")

    async def insider_trades(self, ticker: str, limit: int = 10) -> dict[str, Any]:
        """Recent Form 3/4/5 filings"""
        try:
            query = InsiderTradesQuery(ticker, limit=limit)
            result = await asyncio.to_thread(self.container.insider_trades.execute, query)
            return {"success": True, **asdict(result), "fetched_at": _now()}

        except TickerNotFound as e:
            return _failure(str(e))
        except NoFilingData as e:
            return {
                "success": True,
                "error": str(e),
                "ticker": e.ticker,
                "insider_filings_count": 0,
                "trades": [],
                "fetched_at": _now()
            }
        except Exception as e:
            logger.exception(f"insider_trades failed for {ticker}")
            return _failure(f"Failed to get insider trades for {ticker}: {str(e)}")

    async def report(self, ticker: str) -> dict[str, Any]:
        """Profile plus filings grouped by form type"""
        try:
            query = TickerQuery(ticker)
            result = await asyncio.to_thread(self.container.report.execute, query)
            return {
                "success": True,
                "profile": {
                    "ticker": result.ticker,
                    "name": result.name,
                    "cik": result.cik,
                    "sic": result.sic,
                    "sic_description": result.sic_description,
                    "category": result.category,
                    "entity_type": result.entity_type,
                    "fiscal_year_end": result.fiscal_year_end,
                    "state_of_incorporation": result.state_of_incorporation,
                },
                "filings_summary": {
                    "total_filings": result.total_filings,
                    "by_type": result.by_type,
                },
                "recent_by_type": {
                    form: [asdict(ref) for ref in refs]
                    for form, refs in result.recent_by_type.items()
                },
                "fetched_at": _now()
            }

        except TickerNotFound as e:
            return _failure(str(e))
        except Exception as e:
            logger.exception(f"report failed for {ticker}")
            return _failure(f"Failed to build report for {ticker}: {str(e)}")

    async def dispatch(self, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Dispatch a tool call by name"""
        if name == "overview":
            return await self.overview(ticker=arguments.get("ticker", "AAPL"))

        elif name == "company":
            return await self.company(ticker=arguments["ticker"])

        elif name == "filings":
            return await self.filings(
                ticker=arguments["ticker"],
                form_type=arguments.get("form_type"),
                limit=arguments.get("limit", 20)
            )

        elif name == "search":
            return await self.search(
                query=arguments["query"],
                limit=arguments.get("limit", 10)
            )

        elif name == "insider_trades":
            return await self.insider_trades(
                ticker=arguments["ticker"],
                limit=arguments.get("limit", 10)
            )

        elif name == "report":
            return await self.report(ticker=arguments["ticker"])

        else:
            raise ValueError(f"Unknown tool: {name}")
