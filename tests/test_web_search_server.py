"""Tests for server wiring and the console entry point."""

import io
import json
import sys

import pytest

from claude_search_mcp.mcp.servers.web_search_server import create_server, run
from claude_search_mcp.utils.config import Settings


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings pointing at a temporary Claude Desktop config."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    config_path = tmp_path / "claude_desktop_config.json"
    config_path.write_text(json.dumps({"ANTHROPIC_API_KEY": "sk-file"}))
    return Settings(_env_file=None, claude_config_path=config_path, anthropic_model="claude-test")


def test_create_server(settings):
    """Test the server is wired with the resolved key and settings."""
    server = create_server(settings)

    assert server.name == "Claude Web Search"
    assert server.version == "1.0.0"
    assert list(server.tools) == ["web_search"]
    assert server.tool.provider.client.api_key == "sk-file"
    assert server.tool.provider.model_name == "claude-test"


def test_create_server_env_fallback(tmp_path, monkeypatch):
    """Test the environment key is used without a config file."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-env")
    settings = Settings(_env_file=None, claude_config_path=tmp_path / "missing.json")

    server = create_server(settings)
    assert server.tool.provider.client.api_key == "sk-env"


def test_run_exits_when_stdin_closed(tmp_path, monkeypatch):
    """Test a transport that cannot bind at startup exits with status 1."""
    stdin = io.StringIO("")
    stdin.close()
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setenv("CLAUDE_CONFIG_PATH", str(tmp_path / "claude_desktop_config.json"))

    with pytest.raises(SystemExit) as exc_info:
        run()
    assert exc_info.value.code == 1
