"""
SEC EDGAR Adapter

Implements DirectorySource and SubmissionSource ports over plain HTTPS using httpx.
SEC requires a descriptive User-Agent on every request.
"""
import logging
from typing import Any, Optional

import httpx

from ..core.errors import UpstreamUnavailable
from ..core.ports import DirectorySource, SubmissionSource

logger = logging.getLogger(__name__)

TICKER_DIRECTORY_URL = "https://www.sec.gov/files/company_tickers.json"
SUBMISSIONS_BASE = "https://data.sec.gov"
DEFAULT_TIMEOUT_SECONDS = 30.0


class SecHttpClient(DirectorySource, SubmissionSource):
    """SEC EDGAR JSON fetcher"""

    def __init__(
        self,
        user_agent: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self._client = httpx.Client(
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            timeout=timeout,
            transport=transport
        )

    def _get_json(self, url: str, what: str) -> Any:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"SEC request failed for {what}: {e}")
            raise UpstreamUnavailable(f"Failed to load {what}: {e}") from e

        if response.status_code == 429:
            raise UpstreamUnavailable(
                "Rate limited by SEC.gov: exceeded the 10 requests/second limit",
                status_code=429
            )
        if not response.is_success:
            raise UpstreamUnavailable(
                f"SEC API error loading {what}: {response.status_code}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamUnavailable(f"Invalid JSON from SEC for {what}") from e

    def fetch_directory(self) -> dict[str, Any]:
        """Fetch company_tickers.json"""
        return self._get_json(TICKER_DIRECTORY_URL, "tickers")

    def fetch_submissions(self, cik: str) -> dict[str, Any]:
        """Fetch submissions/CIK##########.json"""
        url = f"{SUBMISSIONS_BASE}/submissions/CIK{cik}.json"
        return self._get_json(url, f"submissions for CIK{cik}")

    def close(self) -> None:
        self._client.close()
