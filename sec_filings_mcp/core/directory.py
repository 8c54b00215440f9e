"""
Ticker Directory Cache

Process-wide, time-bounded mapping from ticker symbol to CIK and company title.
The snapshot is only replaced after a successful fetch, so a refresh failure
leaves the previous (stale) snapshot servable.
"""
import logging
import threading
import time
from typing import Any, Callable, Optional

from .domain import DirectoryEntry, DirectorySnapshot
from .errors import UpstreamUnavailable
from .ports import DirectorySource

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600


def pad_cik(cik: Any) -> str:
    """Normalize a CIK (int or str) to a 10-digit zero-padded string"""
    return str(cik).strip().zfill(10)


def build_snapshot(payload: dict[str, Any], fetched_at: float) -> DirectorySnapshot:
    """Build a snapshot from the company_tickers.json payload.

    Raises UpstreamUnavailable if the payload is not the expected
    mapping of rows with ticker, cik_str and title.
    """
    entries: dict[str, DirectoryEntry] = {}
    try:
        for row in payload.values():
            ticker = row["ticker"].upper()
            entries[ticker] = DirectoryEntry(
                ticker=ticker,
                cik=pad_cik(row["cik_str"]),
                title=row["title"],
            )
    except (AttributeError, KeyError, TypeError) as e:
        raise UpstreamUnavailable(f"Malformed ticker directory payload: {e!r}") from e
    return DirectorySnapshot(entries=entries, fetched_at=fetched_at)


class TickerDirectory:
    """TTL cache over the SEC ticker directory"""

    def __init__(
        self,
        source: DirectorySource,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.source = source
        self.ttl = ttl_seconds
        self._clock = clock
        self._snapshot = DirectorySnapshot()
        self._refresh_lock = threading.Lock()

    @property
    def snapshot(self) -> DirectorySnapshot:
        return self._snapshot

    @property
    def size(self) -> int:
        return len(self._snapshot.entries)

    def _is_fresh(self, snapshot: DirectorySnapshot) -> bool:
        if snapshot.is_empty:
            return False
        return self._clock() - snapshot.fetched_at < self.ttl

    def ensure_fresh(self) -> None:
        """Populate the snapshot if empty or older than the TTL.

        Raises UpstreamUnavailable if the fetch fails; the previous snapshot
        is kept in that case.
        """
        if self._is_fresh(self._snapshot):
            return

        with self._refresh_lock:
            # Another thread may have refreshed while we waited
            if self._is_fresh(self._snapshot):
                return

            stale = self._snapshot
            try:
                fresh = build_snapshot(self.source.fetch_directory(), self._clock())
            except Exception:
                if not stale.is_empty:
                    logger.warning(
                        f"Ticker directory refresh failed, {len(stale.entries)} stale entries still servable"
                    )
                raise

            self._snapshot = fresh
            logger.info(f"Ticker directory refreshed: {self.size} entries")

    def resolve(self, ticker: str) -> Optional[DirectoryEntry]:
        """Case-insensitive lookup. Does not refresh."""
        return self._snapshot.entries.get(ticker.strip().upper())

    def search(self, query: str, limit: int) -> list[DirectoryEntry]:
        """Substring match on ticker or title, in directory order.

        Callers clamp `limit`; zero or negative returns nothing.
        """
        if limit <= 0:
            return []

        needle = query.lower()
        results = []
        for ticker, entry in self._snapshot.entries.items():
            if needle in entry.title.lower() or needle in ticker.lower():
                results.append(entry)
                if len(results) >= limit:
                    break
        return results

    def tickers(self, n: int) -> list[str]:
        """First n tickers in directory order"""
        return list(self._snapshot.entries)[:max(n, 0)]
