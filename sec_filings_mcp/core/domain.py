"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts:
the ticker directory, the raw submission record and the per-filing view.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import UpstreamUnavailable


@dataclass(frozen=True)
class DirectoryEntry:
    """One row of the SEC ticker directory"""
    ticker: str  # uppercase
    cik: str  # 10-digit zero-padded
    title: str


@dataclass(frozen=True)
class DirectorySnapshot:
    """Full ticker directory as of one successful fetch"""
    entries: dict[str, DirectoryEntry] = field(default_factory=dict)
    fetched_at: float = 0.0  # monotonic seconds

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass(frozen=True)
class Filing:
    """A single filing from a company's recent filing history"""
    form: str
    filing_date: str  # YYYY-MM-DD format
    accession_number: str
    primary_document: str
    description: Optional[str] = None
    report_date: Optional[str] = None


@dataclass
class SubmissionRecord:
    """Company profile plus filing history from data.sec.gov/submissions"""
    name: Optional[str]
    cik: Optional[str]
    ein: Optional[str] = None
    sic: Optional[str] = None
    sic_description: Optional[str] = None
    category: Optional[str] = None
    entity_type: Optional[str] = None
    fiscal_year_end: Optional[str] = None
    state_of_incorporation: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    former_names: list[Any] = field(default_factory=list)
    addresses: dict[str, Any] = field(default_factory=dict)
    filings: list[Filing] = field(default_factory=list)
    has_filings: bool = True  # False when the "recent" block is missing


REQUIRED_COLUMNS = ("form", "filingDate", "accessionNumber", "primaryDocument")


def _column(recent: dict[str, Any], key: str, index: int) -> Any:
    values = recent.get(key) or []
    return values[index] if index < len(values) else None


def filings_from_recent(recent: Optional[dict[str, Any]]) -> list[Filing]:
    """Convert the upstream parallel-array "recent" block into Filing records.

    Position i across every array describes one filing. The required columns
    must all have the same length, otherwise the payload is rejected with
    UpstreamUnavailable. Optional columns (description, report date) may be
    shorter or missing; empty strings are normalized to None.
    """
    if not recent:
        return []

    columns = {key: recent.get(key) or [] for key in REQUIRED_COLUMNS}
    lengths = {key: len(values) for key, values in columns.items()}
    if len(set(lengths.values())) > 1:
        raise UpstreamUnavailable(f"Malformed submissions payload: column lengths differ {lengths}")

    filings = []
    for i, form in enumerate(columns["form"]):
        filings.append(Filing(
            form=form,
            filing_date=columns["filingDate"][i],
            accession_number=columns["accessionNumber"][i],
            primary_document=columns["primaryDocument"][i],
            description=_column(recent, "primaryDocDescription", i) or None,
            report_date=_column(recent, "reportDate", i) or None,
        ))
    return filings


def submission_from_json(payload: dict[str, Any]) -> SubmissionRecord:
    """Build a SubmissionRecord from the submissions JSON payload"""
    recent = (payload.get("filings") or {}).get("recent")
    return SubmissionRecord(
        name=payload.get("name"),
        cik=payload.get("cik"),
        ein=payload.get("ein"),
        sic=payload.get("sic"),
        sic_description=payload.get("sicDescription"),
        category=payload.get("category"),
        entity_type=payload.get("entityType"),
        fiscal_year_end=payload.get("fiscalYearEnd"),
        state_of_incorporation=payload.get("stateOfIncorporation"),
        phone=payload.get("phone"),
        website=payload.get("website"),
        former_names=payload.get("formerNames") or [],
        addresses=payload.get("addresses") or {},
        filings=filings_from_recent(recent),
        has_filings=recent is not None,
    )
