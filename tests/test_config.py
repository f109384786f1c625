"""
Tests for settings and the credential store.

Run with:
    pytest tests/test_config.py -v
"""

import json
import os
import stat
import sys

import pytest

from gitai.config import (
    Config,
    config_dir,
    load_api_key,
    load_config,
    save_api_key,
    save_config,
)


@pytest.fixture(autouse=True)
def fake_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("GITAI_BASE_URL", raising=False)
    return home


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.conventional is False
        assert config.base_url == "https://api.anthropic.com"
        assert config.timeout == 60.0

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"conventional": True, "unknown_key": "value"})
        assert config.conventional is True
        assert not hasattr(config, "unknown_key")

    def test_validate_invalid_base_url(self):
        config = Config(base_url="ftp://nope")
        warnings = config.validate()
        assert len(warnings) == 1
        assert config.base_url == "https://api.anthropic.com"

    @pytest.mark.parametrize("timeout", [0, -3, "fast", True])
    def test_validate_invalid_timeout(self, timeout):
        config = Config(timeout=timeout)
        warnings = config.validate()
        assert any("timeout" in w for w in warnings)
        assert config.timeout == 60.0

    def test_validate_invalid_conventional(self):
        config = Config(conventional="yes")
        assert config.validate()
        assert config.conventional is False

    def test_validate_valid_config_no_warnings(self):
        assert Config().validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"timeout": -1})
        assert "Config warning" in capsys.readouterr().err


class TestLoadConfig:

    def test_defaults_when_no_file(self):
        assert load_config() == Config()

    def test_save_and_load_roundtrip(self):
        path = save_config(Config(conventional=True, timeout=10.0))
        assert path == config_dir() / "config.json"
        loaded = load_config()
        assert loaded.conventional is True
        assert loaded.timeout == 10.0

    def test_malformed_json_returns_defaults(self, capsys):
        config_dir().mkdir(parents=True)
        (config_dir() / "config.json").write_text("not valid json {{{")
        assert load_config() == Config()
        assert "Could not load" in capsys.readouterr().err

    def test_non_object_json_returns_defaults(self):
        config_dir().mkdir(parents=True)
        (config_dir() / "config.json").write_text(json.dumps(["conventional"]))
        assert load_config() == Config()

    def test_invalid_env_base_url_is_validated(self, monkeypatch, capsys):
        monkeypatch.setenv("GITAI_BASE_URL", "api.anthropic.com")
        assert load_config().base_url == "https://api.anthropic.com"
        assert "Invalid base_url" in capsys.readouterr().err

    def test_env_overrides_base_url(self, monkeypatch):
        save_config(Config(base_url="https://file.example"))
        monkeypatch.setenv("GITAI_BASE_URL", "https://env.example")
        assert load_config().base_url == "https://env.example"


class TestCredentials:

    def test_missing_key(self):
        assert load_api_key() is None

    def test_save_then_load(self, fake_home):
        path = save_api_key("  sk-ant-123\n")
        assert path == fake_home / ".config" / "gitai" / "credentials"
        assert load_api_key() == "sk-ant-123"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_private(self):
        path = save_api_key("sk-ant-123")
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_env_takes_precedence(self, monkeypatch):
        save_api_key("from-file")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "from-env")
        assert load_api_key() == "from-env"

    def test_empty_file_means_no_key(self):
        config_dir().mkdir(parents=True)
        (config_dir() / "credentials").write_text("\n")
        assert load_api_key() is None

    @pytest.mark.parametrize("key", ["sk-ant-caf\u00e9", "sk ant", "sk-ant\x00"])
    def test_rejects_key_unusable_as_header(self, key):
        with pytest.raises(ValueError, match="non-ASCII"):
            save_api_key(key)
        assert not (config_dir() / "credentials").exists()

    def test_rejects_empty_key(self):
        with pytest.raises(ValueError):
            save_api_key("   ")
