"""Tests for Settings parsing and validators."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from scc_mcp.config import Settings


def _settings(**kwargs: object) -> Settings:
    return Settings(_env_file=None, **kwargs)  # type: ignore[arg-type]


class TestDefaults:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in (
            "SCC_BINARY",
            "SCC_EXTRA_ARGS",
            "SCC_TIMEOUT_SECONDS",
            "HOTSPOT_THRESHOLD",
            "LOG_LEVEL",
            "LOG_DIR",
        ):
            monkeypatch.delenv(var, raising=False)
        s = _settings()
        assert s.scc_binary == "scc"
        assert s.scc_extra_args == []
        assert s.scc_timeout_seconds is None
        assert s.hotspot_threshold == 20
        assert s.log_level == "INFO"
        assert s.log_dir is None


class TestEnvironment:
    def test_binary_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCC_BINARY", "/usr/local/bin/scc")
        assert _settings().scc_binary == "/usr/local/bin/scc"

    def test_extra_args_from_env(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SCC_EXTRA_ARGS", "--no-cocomo, --exclude-dir,vendor")
        assert _settings().scc_extra_args == [
            "--no-cocomo",
            "--exclude-dir",
            "vendor",
        ]

    def test_timeout_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCC_TIMEOUT_SECONDS", "30")
        assert _settings().scc_timeout_seconds == 30.0

    def test_log_dir_from_env(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        assert _settings().log_dir == tmp_path


class TestExtraArgsParsing:
    def test_comma_separated_string(self) -> None:
        s = _settings(scc_extra_args="--no-cocomo,--no-complexity")
        assert s.scc_extra_args == ["--no-cocomo", "--no-complexity"]

    def test_empty_string(self) -> None:
        assert _settings(scc_extra_args="").scc_extra_args == []

    def test_list_passthrough(self) -> None:
        s = _settings(scc_extra_args=["--exclude-dir", "vendor"])
        assert s.scc_extra_args == ["--exclude-dir", "vendor"]

    def test_reserved_flag_warns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="scc_mcp.config"):
            s = _settings(scc_extra_args=["--by-file", "--no-cocomo"])
        assert "repeats flags" in caplog.text
        assert "--by-file" in caplog.text
        # Kept as given
        assert s.scc_extra_args == ["--by-file", "--no-cocomo"]

    def test_no_warning_without_reserved_flags(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="scc_mcp.config"):
            _settings(scc_extra_args=["--no-cocomo"])
        assert "repeats flags" not in caplog.text


class TestValidation:
    def test_zero_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            _settings(scc_timeout_seconds=0)

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            _settings(scc_timeout_seconds=-1)

    def test_log_level_normalized(self) -> None:
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="unknown log level"):
            _settings(log_level="chatty")

    def test_fractional_threshold(self) -> None:
        assert _settings(hotspot_threshold=7.5).hotspot_threshold == 7.5
