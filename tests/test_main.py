"""Tests for the CLI entry point."""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from livehook.config import Settings
from livehook.main import build_server, cli
from livehook.notifications import LogNotifier


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for var in ("LIVEHOOK_CONFIG", "LIVEHOOK_PORT", "LIVEHOOK_ROOMID_FILTER", "LIVEHOOK_DRY_RUN"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LIVEHOOK_CONFIG_DIR", str(tmp_path))


@pytest.fixture
def run_mock():
    with patch("livehook.main.run", new=AsyncMock()) as mock, patch("livehook.main.setup_logging"):
        yield mock


class TestCli:
    def test_defaults(self, run_mock):
        result = CliRunner().invoke(cli, [])
        assert result.exit_code == 0, result.output
        settings = run_mock.call_args.args[0]
        assert settings.port == 25550
        assert settings.roomid_filter is None
        assert settings.dry_run is False

    def test_options(self, run_mock):
        result = CliRunner().invoke(
            cli, ["--port", "8000", "--roomid-filter", "123,456", "--dry-run"]
        )
        assert result.exit_code == 0, result.output
        settings = run_mock.call_args.args[0]
        assert settings.port == 8000
        assert settings.room_filter().room_ids == frozenset({123, 456})
        assert settings.dry_run is True

    def test_unparseable_port_aborts(self, run_mock):
        result = CliRunner().invoke(cli, ["--port", "abc"])
        assert result.exit_code == 2
        run_mock.assert_not_called()

    def test_out_of_range_port_aborts(self, run_mock):
        result = CliRunner().invoke(cli, ["--port", "70000"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        run_mock.assert_not_called()


class TestBuildServer:
    def test_filter_built_once_from_settings(self):
        server = build_server(Settings(roomid_filter="5,6", dry_run=True))
        assert server.room_filter.room_ids == frozenset({5, 6})

    def test_no_filter(self):
        server = build_server(Settings(dry_run=True))
        assert server.room_filter is None

    def test_filter_with_no_valid_entries_passes_everything(self):
        server = build_server(Settings(roomid_filter="abc", dry_run=True))
        assert server.room_filter is None

    def test_dry_run_notifier(self):
        server = build_server(Settings(dry_run=True))
        assert isinstance(server._notifier, LogNotifier)
