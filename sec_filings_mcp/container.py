"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

import httpx

from .adapters import SecHttpClient
from .config import DEFAULT_TICKER_CACHE_TTL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .core import (
    CompanyLookup,
    TickerDirectory,
    OverviewService,
    CompanyProfileService,
    ListFilingsService,
    SearchTickersService,
    InsiderTradesService,
    CompanyReportService,
)


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        ticker_cache_ttl: float = DEFAULT_TICKER_CACHE_TTL,
        transport: Optional[httpx.BaseTransport] = None
    ):
        # Adapters (infrastructure)
        self.sec = SecHttpClient(user_agent, timeout=timeout, transport=transport)

        # Process-wide ticker directory
        self.directory = TickerDirectory(self.sec, ttl_seconds=ticker_cache_ttl)
        self.lookup = CompanyLookup(self.directory, self.sec)

        # Services (use cases)
        self.overview = OverviewService(self.lookup)
        self.company = CompanyProfileService(self.lookup)
        self.filings = ListFilingsService(self.lookup)
        self.search = SearchTickersService(self.directory)
        self.insider_trades = InsiderTradesService(self.lookup)
        self.report = CompanyReportService(self.lookup)
