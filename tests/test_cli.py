"""
Tests for the command line interface.
"""

import os
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from gridqueue.main import cli


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the CLI from reconfiguring logging for the whole test session."""
    with patch("gridqueue.main.configure_logging"):
        yield


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, mcp_stub, *args):
    with patch.dict(os.environ, {"MCP_HOST": "grid", "MCP_PORT": "9000"}, clear=False):
        return runner.invoke(cli, list(args), obj={"transport": mcp_stub.transport})


def test_send(runner, mcp_stub):
    mcp_stub.register("send", {"success": True})

    result = invoke(runner, mcp_stub, "send", "crawler_webcrawler", "hello")

    assert result.exit_code == 0, result.output
    assert "Message sent to crawler_webcrawler" in result.output
    assert mcp_stub.calls[0].url == "http://grid:9000/yacy/grid/mcp/messages/send.json"
    assert mcp_stub.calls[0].params["message"] == "hello"


def test_host_and_port_override(runner, mcp_stub):
    mcp_stub.register("available", {"success": True, "available": 4})

    result = invoke(runner, mcp_stub, "--host", "other", "--port", "8100", "available", "crawler_webcrawler")

    assert result.exit_code == 0, result.output
    assert mcp_stub.calls[0].url == "http://other:8100/yacy/grid/mcp/messages/available.json"


def test_available_reports_broker(runner, mcp_stub):
    mcp_stub.register("available", {"success": True, "available": 4, "service": "amqp://broker:5672"})

    result = invoke(runner, mcp_stub, "available", "crawler_webcrawler")

    assert result.exit_code == 0, result.output
    assert "4" in result.output
    assert "broker: amqp://broker:5672" in result.output


def test_receive(runner, mcp_stub):
    mcp_stub.register("receive", {"success": True, "message": "payload"})

    result = invoke(runner, mcp_stub, "receive", "crawler_webcrawler", "--timeout", "250")

    assert result.exit_code == 0, result.output
    assert "payload" in result.output
    assert mcp_stub.calls[0].params["timeout"] == "250"


def test_check(runner, mcp_stub):
    mcp_stub.register("status", {"system": {}})
    mcp_stub.register("available", {"success": True, "available": 0})

    result = invoke(runner, mcp_stub, "check", "crawler_webcrawler")

    assert result.exit_code == 0, result.output
    assert "reachable" in result.output


def test_remote_failure_exits_nonzero(runner, mcp_stub):
    mcp_stub.register("send", {"success": False, "comment": "queue full"})

    result = invoke(runner, mcp_stub, "send", "crawler_webcrawler", "hello")

    assert result.exit_code != 0
    assert "queue full" in result.output


def test_transport_failure_exits_nonzero(runner, mcp_stub):
    mcp_stub.register("available", httpx.ConnectError)

    result = invoke(runner, mcp_stub, "available", "crawler_webcrawler")

    assert result.exit_code != 0
    assert "cannot reach MCP" in result.output


def test_invalid_key(runner, mcp_stub):
    result = invoke(runner, mcp_stub, "available", "webcrawler")

    assert result.exit_code != 0
    assert "Invalid queue key" in result.output
    assert mcp_stub.call_count == 0
