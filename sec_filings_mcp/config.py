"""
Runtime configuration from environment variables.

- PORT: HTTP server port (default: 5002)
- HOST: HTTP server bind address (default: 127.0.0.1)
- USER_AGENT: Sent to SEC on every request (SEC rejects anonymous clients)
- SEC_TIMEOUT: Upstream request timeout in seconds (default: 30)
- TICKER_CACHE_TTL: Ticker directory TTL in seconds (default: 3600)
"""
import os

DEFAULT_PORT = 5002
DEFAULT_HOST = "127.0.0.1"
DEFAULT_USER_AGENT = "sec-filings-mcp research contact@example.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_TICKER_CACHE_TTL = 3600.0


def _get_float(name: str, default: float) -> float:
    value = os.environ.get(name, str(default))
    try:
        return float(value)
    except ValueError:
        msg = f"Invalid {name} value: {value}"
        raise ValueError(msg) from None


def get_port() -> int:
    """Get server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PORT value: {port_str}"
        raise ValueError(msg) from None


def get_host() -> str:
    """Get bind address from environment or use default"""
    return os.environ.get("HOST", DEFAULT_HOST)


def get_user_agent() -> str:
    """Get user agent from environment or use default"""
    return os.environ.get("USER_AGENT", DEFAULT_USER_AGENT)


def get_timeout() -> float:
    """Get upstream timeout (seconds) from environment or use default"""
    return _get_float("SEC_TIMEOUT", DEFAULT_TIMEOUT)


def get_ticker_cache_ttl() -> float:
    """Get ticker directory TTL (seconds) from environment or use default"""
    return _get_float("TICKER_CACHE_TTL", DEFAULT_TICKER_CACHE_TTL)
