"""Tests for per-invocation configuration."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pytest

from nmclean.config import LOG_LEVEL_ENV, CleanConfig, ConfigError


def _namespace(**kwargs: object) -> argparse.Namespace:
    """Build a namespace shaped like the delete command's arguments."""
    defaults: dict[str, object] = {
        "root": Path("."),
        "max_depth": None,
        "all": False,
        "dry_run": False,
        "yes": False,
        "verbose": False,
        "log_level": None,
        "log_file": None,
    }
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestCleanConfigDefaults:
    """Tests for default configuration values."""

    def test_default_values(self) -> None:
        """Defaults scan the current directory without limits."""
        config = CleanConfig()

        assert config.root == Path(".")
        assert config.max_depth is None
        assert config.select_all is False
        assert config.dry_run is False
        assert config.assume_yes is False
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.target_name == "node_modules"

    def test_log_level_value(self) -> None:
        """The level name maps to the logging constant."""
        assert CleanConfig(log_level="DEBUG").log_level_value == logging.DEBUG


class TestValidate:
    """Tests for config validation."""

    def test_invalid_log_level_raises(self) -> None:
        """An unknown level name is rejected."""
        with pytest.raises(ConfigError, match="Invalid log_level"):
            CleanConfig(log_level="LOUD").validate()

    def test_negative_depth_raises(self) -> None:
        """A negative depth is rejected."""
        with pytest.raises(ConfigError, match="non-negative"):
            CleanConfig(max_depth=-1).validate()

    def test_config_error_is_value_error(self) -> None:
        """ConfigError can be caught as ValueError."""
        assert issubclass(ConfigError, ValueError)

    def test_zero_depth_valid(self) -> None:
        """Depth zero is allowed."""
        CleanConfig(max_depth=0).validate()


class TestFromArgs:
    """Tests for building config from parsed arguments."""

    def test_delete_flags(self, tmp_path: Path) -> None:
        """Delete switches map onto config fields."""
        config = CleanConfig.from_args(
            _namespace(root=tmp_path, max_depth=3, all=True, dry_run=True, yes=True)
        )

        assert config.root == tmp_path
        assert config.max_depth == 3
        assert config.select_all is True
        assert config.dry_run is True
        assert config.assume_yes is True

    def test_scan_namespace_without_delete_flags(self) -> None:
        """A scan namespace lacks delete switches; they default to off."""
        config = CleanConfig.from_args(argparse.Namespace(root=Path("."), max_depth=None))

        assert config.select_all is False
        assert config.dry_run is False
        assert config.assume_yes is False

    def test_log_level_from_args(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """--log-level wins over the environment."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")

        assert CleanConfig.from_args(_namespace(log_level="info")).log_level == "INFO"

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The environment supplies the level when no flag is given."""
        monkeypatch.setenv(LOG_LEVEL_ENV, " debug ")

        assert CleanConfig.from_args(_namespace()).log_level == "DEBUG"

    def test_log_level_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without flag or environment the level is WARNING."""
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

        assert CleanConfig.from_args(_namespace()).log_level == "WARNING"

    def test_verbose_overrides_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """--verbose forces DEBUG."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")

        assert CleanConfig.from_args(_namespace(verbose=True, log_level="ERROR")).log_level == "DEBUG"

    def test_invalid_env_level_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A bad environment value is reported, not ignored."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

        with pytest.raises(ConfigError, match="CHATTY"):
            CleanConfig.from_args(_namespace())

    def test_log_file(self, tmp_path: Path) -> None:
        """--log-file is carried through."""
        log_file = tmp_path / "nmclean.log"

        assert CleanConfig.from_args(_namespace(log_file=log_file)).log_file == log_file
