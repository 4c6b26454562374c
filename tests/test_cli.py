"""Tests for the console entry point."""

from unittest.mock import MagicMock, patch

import pytest

from imageplaceholder.cli import run_server
from imageplaceholder.services.placeholder_service import PlaceholderGenerator


def test_run_server_exits_on_configuration_error(monkeypatch, capsys):
    monkeypatch.setenv("MCP_MIN_WIDTH", "not-a-number")

    with pytest.raises(SystemExit) as exc_info:
        run_server()

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Failed to start image placeholder server" in err
    assert "MCP_MIN_WIDTH" in err


def test_run_server_wires_components_and_runs_stdio(monkeypatch):
    monkeypatch.setenv("MCP_MAX_WIDTH", "2000")
    monkeypatch.delenv("MCP_TRANSPORT", raising=False)
    mock_server = MagicMock()

    with patch("imageplaceholder.cli.configure_logging") as mock_logging, \
            patch("imageplaceholder.cli.create_server", return_value=mock_server) as mock_create:
        run_server()

    mock_logging.assert_called_once_with("info", "development")
    generator, config = mock_create.call_args.args
    assert isinstance(generator, PlaceholderGenerator)
    assert generator.validator.get_constraints().max_width == 2000
    assert config.name == "image-placeholder"
    mock_server.run.assert_called_once_with(transport="stdio")


def test_run_server_http_transport(monkeypatch):
    monkeypatch.setenv("MCP_TRANSPORT", "streamable-http")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.delenv("HOST", raising=False)
    mock_server = MagicMock()

    with patch("imageplaceholder.cli.configure_logging"), \
            patch("imageplaceholder.cli.create_server", return_value=mock_server):
        run_server()

    mock_server.run.assert_called_once_with(transport="streamable-http", host="0.0.0.0", port=9000)


def test_run_server_handles_keyboard_interrupt(monkeypatch):
    monkeypatch.delenv("MCP_TRANSPORT", raising=False)
    mock_server = MagicMock()
    mock_server.run.side_effect = KeyboardInterrupt

    with patch("imageplaceholder.cli.configure_logging"), \
            patch("imageplaceholder.cli.create_server", return_value=mock_server):
        run_server()
