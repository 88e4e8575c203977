"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from livehook.config import DEFAULT_PORT, Settings, load_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for var in ("LIVEHOOK_CONFIG", "LIVEHOOK_PORT", "LIVEHOOK_ROOMID_FILTER", "LIVEHOOK_DRY_RUN"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LIVEHOOK_CONFIG_DIR", str(tmp_path / "config"))


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.port == DEFAULT_PORT == 25550
        assert settings.bind == "0.0.0.0"
        assert settings.roomid_filter is None
        assert settings.room_filter() is None
        assert settings.dry_run is False

    def test_room_filter_parsed(self):
        settings = Settings(roomid_filter="1,2,x")
        assert settings.room_filter().room_ids == frozenset({1, 2})

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_out_of_range(self, port):
        with pytest.raises(ValidationError):
            Settings(port=port)

    def test_unparseable_port(self):
        with pytest.raises(ValidationError):
            Settings(port="http")

    def test_notify_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(notify_timeout=0)

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("LIVEHOOK_PORT", "8080")
        monkeypatch.setenv("LIVEHOOK_ROOMID_FILTER", "42")
        settings = Settings()
        assert settings.port == 8080
        assert settings.room_filter().room_ids == frozenset({42})


class TestLoadSettings:
    def test_no_config_file(self):
        assert load_settings().port == DEFAULT_PORT

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "livehook.yaml"
        path.write_text("port: 9000\nroomid_filter: '7,8'\n")
        settings = load_settings(path)
        assert settings.port == 9000
        assert settings.roomid_filter == "7,8"

    def test_default_config_dir(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("bind: 127.0.0.1\n")
        assert load_settings().bind == "127.0.0.1"

    def test_config_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "other.yaml"
        path.write_text("dry_run: true\n")
        monkeypatch.setenv("LIVEHOOK_CONFIG", str(path))
        assert load_settings().dry_run is True

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(path).port == DEFAULT_PORT

    def test_overrides_win_over_yaml(self, tmp_path):
        path = tmp_path / "livehook.yaml"
        path.write_text("port: 9000\n")
        settings = load_settings(path, port=9100, roomid_filter=None)
        assert settings.port == 9100
        assert settings.roomid_filter is None

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("LIVEHOOK_PORT", "8081")
        assert load_settings(port=None).port == 8081


class TestMaxBodySize:
    def test_default(self):
        assert Settings().max_body_size == 16 * 1024 * 1024

    def test_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_body_size=0)

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("LIVEHOOK_MAX_BODY_SIZE", "2048")
        assert Settings().max_body_size == 2048
