"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- ports.py: Port interfaces (abstractions for SEC EDGAR)
- directory.py: Ticker directory TTL cache
- projections.py: Submission record -> response views
- queries.py: Validated tool inputs
- services.py: Application services (use cases)
"""
from .domain import DirectoryEntry, DirectorySnapshot, Filing, SubmissionRecord
from .errors import (
    InvalidQuery,
    NoFilingData,
    SecFilingsError,
    TickerNotFound,
    UpstreamUnavailable,
)
from .ports import DirectorySource, SubmissionSource
from .directory import TickerDirectory
from .queries import FilingsQuery, InsiderTradesQuery, SearchQuery, TickerQuery
from .services import (
    CompanyLookup,
    OverviewService,
    CompanyProfileService,
    ListFilingsService,
    SearchTickersService,
    InsiderTradesService,
    CompanyReportService,
)

__all__ = [
    # Domain models
    "DirectoryEntry",
    "DirectorySnapshot",
    "Filing",
    "SubmissionRecord",
    # Errors
    "SecFilingsError",
    "TickerNotFound",
    "UpstreamUnavailable",
    "NoFilingData",
    "InvalidQuery",
    # Ports
    "DirectorySource",
    "SubmissionSource",
    # Cache
    "TickerDirectory",
    # Queries
    "TickerQuery",
    "FilingsQuery",
    "SearchQuery",
    "InsiderTradesQuery",
    # Services
    "CompanyLookup",
    "OverviewService",
    "CompanyProfileService",
    "ListFilingsService",
    "SearchTickersService",
    "InsiderTradesService",
    "CompanyReportService",
]
