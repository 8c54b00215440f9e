"""
Errors raised by the core.

TickerNotFound and NoFilingData are recovered into descriptive payloads by the
services and handlers. UpstreamUnavailable propagates to the tool boundary.
"""


class SecFilingsError(Exception):
    """Base class for all sec-filings-mcp errors"""


class TickerNotFound(SecFilingsError):
    """Ticker is not present in the current directory snapshot"""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__(f"Ticker {ticker} not found")


class UpstreamUnavailable(SecFilingsError):
    """SEC request failed, returned a non-success status or an unusable payload"""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class NoFilingData(SecFilingsError):
    """Resolved company has no filing history"""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__("No filings found")


class InvalidQuery(SecFilingsError, ValueError):
    """Tool input failed validation"""
