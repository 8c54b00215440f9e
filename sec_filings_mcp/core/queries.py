"""
Tool inputs

One dataclass per tool, enumerating each option and its default. Construction
validates and clamps, so services only ever see sane values.
"""
from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidQuery

FILINGS_LIMIT_DEFAULT = 20
FILINGS_LIMIT_MAX = 100
SEARCH_LIMIT_DEFAULT = 10
SEARCH_LIMIT_MAX = 50
INSIDER_LIMIT_DEFAULT = 10
INSIDER_LIMIT_MAX = 50


def clean_ticker(ticker: Any) -> str:
    if not isinstance(ticker, str) or not ticker.strip():
        raise InvalidQuery("ticker must be a non-empty string")
    return ticker.strip().upper()


def clamp_limit(limit: Any, maximum: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(limit, bool) or not isinstance(limit, (int, float)):
        raise InvalidQuery(f"limit must be a number, got {limit!r}")
    return max(1, min(int(limit), maximum))


@dataclass(frozen=True)
class TickerQuery:
    """Input for overview, company and report"""
    ticker: str

    def __post_init__(self):
        object.__setattr__(self, "ticker", clean_ticker(self.ticker))


@dataclass(frozen=True)
class FilingsQuery:
    """Input for filings

    limit: default 20, caps returned filing count (1-100)
    form_type: optional exact form filter, case-insensitive
    """
    ticker: str
    form_type: Optional[str] = None
    limit: int = FILINGS_LIMIT_DEFAULT

    def __post_init__(self):
        object.__setattr__(self, "ticker", clean_ticker(self.ticker))
        form_type = self.form_type.strip() if isinstance(self.form_type, str) else None
        object.__setattr__(self, "form_type", form_type or None)
        object.__setattr__(self, "limit", clamp_limit(self.limit, FILINGS_LIMIT_MAX))


@dataclass(frozen=True)
class SearchQuery:
    """Input for search

    limit: default 10, caps returned matches (1-50)
    """
    query: str
    limit: int = SEARCH_LIMIT_DEFAULT

    def __post_init__(self):
        if not isinstance(self.query, str):
            raise InvalidQuery("query must be a string")
        object.__setattr__(self, "limit", clamp_limit(self.limit, SEARCH_LIMIT_MAX))


@dataclass(frozen=True)
class InsiderTradesQuery:
    """Input for insider_trades

    limit: default 10, caps returned Form 3/4/5 filings (1-50)
    """
    ticker: str
    limit: int = INSIDER_LIMIT_DEFAULT

    def __post_init__(self):
        object.__setattr__(self, "ticker", clean_ticker(self.ticker))
        object.__setattr__(self, "limit", clamp_limit(self.limit, INSIDER_LIMIT_MAX))
