"""Tests for reckon.toml configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from reckon.config import ReckonConfig, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "reckon.toml")
        assert config == ReckonConfig()
        assert config.prompt == "calc> "
        assert config.precision is None
        assert config.allow_trailing is False
        assert config.log_level == "WARNING"

    def test_reads_reckon_table(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text(
            """
[reckon]
prompt = ">> "
precision = 3
allow_trailing = true
log_level = "debug"
"""
        )
        config = load_config(path)
        assert config.prompt == ">> "
        assert config.precision == 3
        assert config.allow_trailing is True
        assert config.log_level == "DEBUG"

    def test_other_tables_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text('[other]\nprompt = "x"\n')
        assert load_config(path) == ReckonConfig()

    def test_default_path_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "reckon.toml").write_text("[reckon]\nprecision = 1\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().precision == 1

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text('[reckon]\nprompt = "file> "\nlog_level = "INFO"\n')
        monkeypatch.setenv("RECKON_PROMPT", "env> ")
        monkeypatch.setenv("RECKON_LOG_LEVEL", "error")
        config = load_config(path)
        assert config.prompt == "env> "
        assert config.log_level == "ERROR"


class TestValidation:
    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="unknown log level"):
            ReckonConfig(log_level="chatty")

    def test_negative_precision(self) -> None:
        with pytest.raises(ValidationError):
            ReckonConfig(precision=-1)

    def test_bad_value_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text('[reckon]\nprecision = "lots"\n')
        with pytest.raises(ValidationError):
            load_config(path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        import tomllib

        path = tmp_path / "reckon.toml"
        path.write_text("[reckon\nprecision = 2\n")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)
