"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with SEC EDGAR,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Any


class DirectorySource(ABC):
    """Port for fetching the full ticker directory"""

    @abstractmethod
    def fetch_directory(self) -> dict[str, Any]:
        """Return the raw company_tickers.json payload.

        Values look like {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."}.
        Raises UpstreamUnavailable on failure.
        """
        pass


class SubmissionSource(ABC):
    """Port for fetching a company's submission record"""

    @abstractmethod
    def fetch_submissions(self, cik: str) -> dict[str, Any]:
        """Return the raw submissions JSON for a 10-digit CIK.

        Raises UpstreamUnavailable on failure.
        """
        pass
