"""Tests for the serve commands with the servers mocked out."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from schema_scout.cli.app import app

runner = CliRunner()


def test_serve_mcp_stdio(tmp_path: Path) -> None:
    server = MagicMock()
    with patch("schema_scout.mcp.server.create_mcp_server", return_value=server) as create:
        result = runner.invoke(
            app,
            ["serve", "mcp", "--schema", str(tmp_path / "schema.json")],
            env={"SCHEMA_SCOUT_DOCS_URL": "https://docs.example.com"},
        )

    assert result.exit_code == 0
    source = create.call_args[0][0]
    assert source.path == tmp_path / "schema.json"
    assert create.call_args[1]["docs_base_url"] == "https://docs.example.com"
    server.run.assert_called_once_with(transport="stdio")


def test_serve_mcp_http_passes_host_and_port(tmp_path: Path) -> None:
    server = MagicMock()
    with patch("schema_scout.mcp.server.create_mcp_server", return_value=server):
        result = runner.invoke(
            app,
            ["serve", "mcp", "--transport", "http", "--port", "9000", "--schema", str(tmp_path / "s.json")],
            env={"SCHEMA_SCOUT_DOCS_URL": ""},
        )

    assert result.exit_code == 0
    server.run.assert_called_once_with(transport="http", host="127.0.0.1", port=9000)


def test_serve_api_runs_uvicorn() -> None:
    with patch("uvicorn.run") as run:
        result = runner.invoke(app, ["serve", "api", "--port", "8123"])

    assert result.exit_code == 0
    assert run.call_args[1] == {"host": "127.0.0.1", "port": 8123}
