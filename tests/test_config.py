"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from monkey.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[output]\ntokens = true\n")
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"tokens": True}

    def test_auto_discover_monkey_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "monkey.toml"
        cfg.write_text("[diagnostics]\nmax = 4\n")
        result = load_config(None, tmp_path)
        assert result["diagnostics"] == {"max": 4}


class TestConfigMerge:
    def _resolve(self, tmp_path: Path, config: str, *argv: str):
        (tmp_path / "monkey.toml").write_text(config)
        src = tmp_path / "prog.mk"
        src.write_text("")
        ns = build_parser().parse_args([str(src), *argv])
        return resolve_options(ns)

    def test_config_switches(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path, "[output]\ntokens = true\ndebug = true\n")
        assert opts.tokens is True
        assert opts.debug is True

    def test_cli_flag_when_config_false(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path, "[output]\ntokens = false\n", "--tokens")
        assert opts.tokens is True

    def test_no_flags_turn_config_off(self, tmp_path: Path) -> None:
        opts = self._resolve(
            tmp_path, "[output]\ntokens = true\ndebug = true\n", "--no-tokens", "--no-debug"
        )
        assert opts.tokens is False
        assert opts.debug is False

    def test_config_kept_without_flags(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path, "[output]\ndebug = true\n", "--tokens")
        assert opts.tokens is True
        assert opts.debug is True

    def test_config_limit(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path, "[diagnostics]\nmax = 2\n")
        assert opts.max_diagnostics == 2

    def test_cli_overrides_config_limit(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path, "[diagnostics]\nmax = 2\n", "--max-diagnostics", "9")
        assert opts.max_diagnostics == 9

    def test_wrong_types_ignored(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path, '[output]\ntokens = "yes"\n[diagnostics]\nmax = "x"\n')
        assert opts.tokens is False
        assert opts.max_diagnostics is None

    def test_negative_config_limit_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            self._resolve(tmp_path, "[diagnostics]\nmax = -1\n")

    def test_invalid_toml_returns_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "monkey.toml").write_text("[output\n")
        src = tmp_path / "prog.mk"
        src.write_text("")
        assert main([str(src)]) == 2
        assert "invalid config file" in capsys.readouterr().err
