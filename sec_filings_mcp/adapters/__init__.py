"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- sec.py: SEC EDGAR JSON fetcher (httpx)
- mcp/: MCP tool schemas and handlers
"""
from .sec import SecHttpClient

__all__ = [
    "SecHttpClient",
]
