"""
Filing Projection Engine

Deterministic transformations from a SubmissionRecord into response views.
No I/O happens here.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .domain import Filing, SubmissionRecord
from .errors import NoFilingData

ARCHIVES_BASE = "https://www.sec.gov/Archives/edgar/data"

# Ownership-change forms (initial, change, annual statements)
INSIDER_FORMS = frozenset({"3", "4", "5"})

RECENT_PER_TYPE = 3


def document_url(cik: str, accession_number: str, primary_document: str) -> str:
    """Canonical archive URL for a filing's primary document.

    Leading zeros are stripped from the CIK, dashes from the accession number.
    """
    cik_segment = cik.lstrip("0")
    accession_segment = accession_number.replace("-", "")
    return f"{ARCHIVES_BASE}/{cik_segment}/{accession_segment}/{primary_document}"


@dataclass(frozen=True)
class FilingView:
    """A filing as returned by the filings list"""
    form: str
    filing_date: str
    accession_number: str
    primary_document: str
    document_url: str
    description: Optional[str] = None


@dataclass(frozen=True)
class InsiderTradeView:
    """A Form 3/4/5 filing"""
    form: str
    filing_date: str
    accession_number: str
    document_url: str
    report_owner: Optional[str] = None


@dataclass(frozen=True)
class RecentFilingRef:
    """Short reference kept per form type in the grouped report"""
    date: str
    accession_number: str
    document: str


@dataclass
class CompanyOverview:
    ticker: str
    name: Optional[str]
    cik: Optional[str]
    sic: Optional[str]
    sic_description: Optional[str]
    recent_filings_count: int


@dataclass
class CompanyProfile:
    ticker: str
    name: Optional[str]
    cik: Optional[str]
    ein: Optional[str]
    sic: Optional[str]
    sic_description: Optional[str]
    category: Optional[str]
    entity_type: Optional[str]
    fiscal_year_end: Optional[str]
    state_of_incorporation: Optional[str]
    phone: Optional[str]
    addresses: dict[str, Any]
    website: Optional[str]
    former_names: list[Any]


@dataclass
class FilingsList:
    ticker: str
    company_name: Optional[str]
    total_filings: int
    filtered_count: int
    filings: list[FilingView]


@dataclass
class InsiderTrades:
    ticker: str
    company_name: Optional[str]
    insider_filings_count: int
    trades: list[InsiderTradeView]


@dataclass
class CompanyReport:
    ticker: str
    name: Optional[str]
    cik: Optional[str]
    sic: Optional[str]
    sic_description: Optional[str]
    category: Optional[str]
    entity_type: Optional[str]
    fiscal_year_end: Optional[str]
    state_of_incorporation: Optional[str]
    total_filings: int
    by_type: dict[str, int] = field(default_factory=dict)
    recent_by_type: dict[str, list[RecentFilingRef]] = field(default_factory=dict)


def project_overview(ticker: str, record: SubmissionRecord) -> CompanyOverview:
    return CompanyOverview(
        ticker=ticker,
        name=record.name,
        cik=record.cik,
        sic=record.sic,
        sic_description=record.sic_description,
        recent_filings_count=len(record.filings),
    )


def project_profile(ticker: str, record: SubmissionRecord) -> CompanyProfile:
    return CompanyProfile(
        ticker=ticker,
        name=record.name,
        cik=record.cik,
        ein=record.ein,
        sic=record.sic,
        sic_description=record.sic_description,
        category=record.category,
        entity_type=record.entity_type,
        fiscal_year_end=record.fiscal_year_end,
        state_of_incorporation=record.state_of_incorporation,
        phone=record.phone,
        addresses=record.addresses,
        website=record.website,
        former_names=record.former_names,
    )


def project_filings(
    ticker: str,
    cik: str,
    record: SubmissionRecord,
    form_type: Optional[str] = None,
    limit: int = 20
) -> FilingsList:
    """Filings in upstream order (newest first), optionally filtered by form.

    Raises NoFilingData when the record carries no filing history.
    """
    if not record.has_filings:
        raise NoFilingData(ticker)

    wanted = form_type.upper() if form_type else None
    views: list[FilingView] = []
    for filing in record.filings:
        if len(views) >= limit:
            break
        if wanted and filing.form.upper() != wanted:
            continue
        views.append(FilingView(
            form=filing.form,
            filing_date=filing.filing_date,
            accession_number=filing.accession_number,
            primary_document=filing.primary_document,
            document_url=document_url(cik, filing.accession_number, filing.primary_document),
            description=filing.description,
        ))

    return FilingsList(
        ticker=ticker,
        company_name=record.name,
        total_filings=len(record.filings),
        filtered_count=len(views),
        filings=views,
    )


def project_insider_trades(
    ticker: str,
    cik: str,
    record: SubmissionRecord,
    limit: int = 10
) -> InsiderTrades:
    """Form 3/4/5 filings in upstream order, capped at limit"""
    if not record.has_filings:
        raise NoFilingData(ticker)

    trades: list[InsiderTradeView] = []
    for filing in record.filings:
        if len(trades) >= limit:
            break
        if filing.form not in INSIDER_FORMS:
            continue
        trades.append(InsiderTradeView(
            form=filing.form,
            filing_date=filing.filing_date,
            accession_number=filing.accession_number,
            document_url=document_url(cik, filing.accession_number, filing.primary_document),
            report_owner=filing.report_date,
        ))

    return InsiderTrades(
        ticker=ticker,
        company_name=record.name,
        insider_filings_count=len(trades),
        trades=trades,
    )


def group_by_form(filings: list[Filing]) -> tuple[dict[str, int], dict[str, list[RecentFilingRef]]]:
    """Count every filing per form and keep the first few per form.

    Single pass over the whole history; encounter order is preserved.
    """
    counts: dict[str, int] = {}
    recent: dict[str, list[RecentFilingRef]] = {}
    for filing in filings:
        counts[filing.form] = counts.get(filing.form, 0) + 1
        refs = recent.setdefault(filing.form, [])
        if len(refs) < RECENT_PER_TYPE:
            refs.append(RecentFilingRef(
                date=filing.filing_date,
                accession_number=filing.accession_number,
                document=filing.primary_document,
            ))
    return counts, recent


def project_report(ticker: str, record: SubmissionRecord) -> CompanyReport:
    """Profile subset plus per-form counts and recent filings.

    A record without filings yields zero counts rather than an error.
    """
    counts, recent = group_by_form(record.filings)
    return CompanyReport(
        ticker=ticker,
        name=record.name,
        cik=record.cik,
        sic=record.sic,
        sic_description=record.sic_description,
        category=record.category,
        entity_type=record.entity_type,
        fiscal_year_end=record.fiscal_year_end,
        state_of_incorporation=record.state_of_incorporation,
        total_filings=len(record.filings),
        by_type=counts,
        recent_by_type=recent,
    )
