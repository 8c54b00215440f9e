"""
Tests for server command-line configuration and logging
"""
import logging

import pytest

from sec_filings_mcp import server
from sec_filings_mcp.server_http import LOG_DATEFMT, LOG_FORMAT, MillisecondFormatter


@pytest.fixture
def restore_server(monkeypatch):
    monkeypatch.setattr(server, "handlers", server.handlers)
    monkeypatch.setattr(server.mcp.settings, "host", server.mcp.settings.host)
    monkeypatch.setattr(server.mcp.settings, "port", server.mcp.settings.port)


class TestStdioServerFlags:
    def test_defaults(self):
        args = server.build_parser().parse_args([])
        assert args.transport == "stdio"

    def test_configure_applies_overrides(self, restore_server):
        args = server.build_parser().parse_args([
            "--transport", "streamable-http",
            "--host", "0.0.0.0",
            "--port", "9001",
            "--user-agent", "acme ops@acme.test",
            "--timeout", "4",
            "--ticker-cache-ttl", "90",
        ])

        server.configure(args)

        assert server.mcp.settings.host == "0.0.0.0"
        assert server.mcp.settings.port == 9001
        container = server.handlers.container
        assert container.sec.user_agent == "acme ops@acme.test"
        assert container.sec.timeout == 4.0
        assert container.directory.ttl == 90.0

    def test_rejects_unknown_transport(self):
        with pytest.raises(SystemExit):
            server.build_parser().parse_args(["--transport", "sse"])


class TestMillisecondFormatter:
    def test_format(self):
        formatter = MillisecondFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
        record = logging.LogRecord("sec", logging.INFO, __file__, 1, "ticker directory refreshed", None, None)
        record.created = 1700000000.25

        assert formatter.format(record) == "[2023/11/14 22:13:20:2500] [INFO] ticker directory refreshed"
