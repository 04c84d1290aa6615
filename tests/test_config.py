"""
Tests for FetchConfig and YAML config loading.
"""

import logging
from pathlib import Path

import pytest

from riscfetch import config as config_module
from riscfetch.config import CONFIG_ENV_VAR, ConfigError, FetchConfig, load_config, resolve_config_path
from riscfetch.logging import LogConfig, configure_logging


class TestFetchConfig:
    """Tests for FetchConfig defaults and validation"""

    def test_defaults(self):
        config = FetchConfig()
        assert config.cpuinfo_path == Path("/proc/cpuinfo")
        assert config.device_tree_path == Path("/proc/device-tree")
        assert config.cpu0_path == Path("/sys/devices/system/cpu/cpu0")
        assert config.style == "normal"
        assert config.color is None

    def test_string_paths_converted(self):
        config = FetchConfig(proc_root="/tmp/proc")
        assert config.cpuinfo_path == Path("/tmp/proc/cpuinfo")

    def test_style_normalized(self):
        assert FetchConfig(style="SMALL").style == "small"

    def test_invalid_style(self):
        with pytest.raises(ConfigError):
            FetchConfig(style="huge")

    def test_invalid_timeout(self):
        with pytest.raises(ConfigError):
            FetchConfig(command_timeout=0)

    def test_dict_roundtrip(self):
        config = FetchConfig(logo="sifive", style="small", color=False)
        assert FetchConfig.from_dict(config.to_dict()) == config

    def test_unknown_keys_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="riscfetch"):
            config = FetchConfig.from_dict({'logo': "thead", 'colour': True})
        assert config.logo == "thead"
        assert "colour" in caplog.text


class TestLoadConfig:
    """Tests for config file discovery and loading"""

    @pytest.fixture(autouse=True)
    def isolated(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "nohome" / "config.yaml")

    def test_no_file_gives_defaults(self):
        assert resolve_config_path() is None
        assert load_config() == FetchConfig()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("logo: sipeed\nstyle: none\ncolor: true\n")
        config = load_config(path)
        assert config.logo == "sipeed"
        assert config.style == "none"
        assert config.color is True

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("logo: wch\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert resolve_config_path() == path
        assert load_config().logo == "wch"

    def test_explicit_beats_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
        assert resolve_config_path(tmp_path / "cli.yaml") == tmp_path / "cli.yaml"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == FetchConfig()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logo: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_bad_timeout(self, tmp_path):
        path = tmp_path / "timeout.yaml"
        path.write_text("command_timeout: -1\n")
        with pytest.raises(ConfigError):
            load_config(path)


class TestLogging:
    """Tests for configure_logging"""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        configure_logging(LogConfig())

    def test_single_console_handler(self, capsys):
        logger = configure_logging(LogConfig(level=logging.DEBUG))
        configure_logging(LogConfig(level=logging.DEBUG))
        marked = [h for h in logger.handlers if getattr(h, '_riscfetch_console', False)]
        assert len(marked) == 1
        assert logger.level == logging.DEBUG

    def test_level_applied(self):
        logger = configure_logging(LogConfig(level=logging.ERROR))
        assert not logger.isEnabledFor(logging.WARNING)
