"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. Each one refreshes the ticker
directory, resolves the ticker, fetches the submission record and hands it
to the projection engine. No transport concerns live here.
"""
from dataclasses import dataclass

from .directory import TickerDirectory
from .domain import DirectoryEntry, SubmissionRecord, submission_from_json
from .errors import TickerNotFound
from .ports import SubmissionSource
from .projections import (
    CompanyOverview,
    CompanyProfile,
    CompanyReport,
    FilingsList,
    InsiderTrades,
    project_filings,
    project_insider_trades,
    project_overview,
    project_profile,
    project_report,
)
from .queries import FilingsQuery, InsiderTradesQuery, SearchQuery, TickerQuery


class CompanyLookup:
    """Resolve a ticker and fetch its submission record"""

    def __init__(self, directory: TickerDirectory, submissions: SubmissionSource):
        self.directory = directory
        self.submissions = submissions

    def load(self, ticker: str) -> tuple[DirectoryEntry, SubmissionRecord]:
        """
        Raises TickerNotFound before any submission fetch if the ticker
        is not in the directory.
        """
        self.directory.ensure_fresh()
        entry = self.directory.resolve(ticker)
        if entry is None:
            raise TickerNotFound(ticker)
        payload = self.submissions.fetch_submissions(entry.cik)
        return entry, submission_from_json(payload)


class OverviewService:
    """Use case: Basic company info by ticker"""

    def __init__(self, lookup: CompanyLookup):
        self.lookup = lookup

    def execute(self, query: TickerQuery) -> CompanyOverview:
        _, record = self.lookup.load(query.ticker)
        return project_overview(query.ticker, record)


class CompanyProfileService:
    """Use case: Full company profile by ticker"""

    def __init__(self, lookup: CompanyLookup):
        self.lookup = lookup

    def execute(self, query: TickerQuery) -> CompanyProfile:
        _, record = self.lookup.load(query.ticker)
        return project_profile(query.ticker, record)


class ListFilingsService:
    """Use case: Recent filings with optional form type filter"""

    def __init__(self, lookup: CompanyLookup):
        self.lookup = lookup

    def execute(self, query: FilingsQuery) -> FilingsList:
        entry, record = self.lookup.load(query.ticker)
        return project_filings(
            query.ticker,
            entry.cik,
            record,
            form_type=query.form_type,
            limit=query.limit
        )


@dataclass
class TickerSearchResult:
    query: str
    results: list[DirectoryEntry]
    total_companies: int


class SearchTickersService:
    """Use case: Search the ticker directory by name or ticker"""

    def __init__(self, directory: TickerDirectory):
        self.directory = directory

    def execute(self, query: SearchQuery) -> TickerSearchResult:
        self.directory.ensure_fresh()
        return TickerSearchResult(
            query=query.query,
            results=self.directory.search(query.query, query.limit),
            total_companies=self.directory.size,
        )


class InsiderTradesService:
    """Use case: Recent Form 3/4/5 filings for a company"""

    def __init__(self, lookup: CompanyLookup):
        self.lookup = lookup

    def execute(self, query: InsiderTradesQuery) -> InsiderTrades:
        entry, record = self.lookup.load(query.ticker)
        return project_insider_trades(query.ticker, entry.cik, record, limit=query.limit)


class CompanyReportService:
    """Use case: Profile, filing counts by type and recent filings per type"""

    def __init__(self, lookup: CompanyLookup):
        self.lookup = lookup

    def execute(self, query: TickerQuery) -> CompanyReport:
        _, record = self.lookup.load(query.ticker)
        return project_report(query.ticker, record)
