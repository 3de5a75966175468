"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from dfalex.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[lexer]\nstrict = true\n")
        result = load_config(cfg, tmp_path)
        assert result["lexer"] == {"strict": True}

    def test_auto_discover_dfalex_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "dfalex.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        result = load_config(None, tmp_path)
        assert result["output"] == {"format": "json"}


class TestConfigMerge:
    def _opts(self, tmp_path: Path, config: str, *extra: str):
        (tmp_path / "dfalex.toml").write_text(config)
        src = tmp_path / "prog.dfl"
        src.write_text("")
        ns = build_parser().parse_args([str(src), *extra])
        return resolve_options(ns)

    def test_defaults(self, tmp_path: Path) -> None:
        opts = self._opts(tmp_path, "")
        assert opts.strict is False
        assert opts.output_format == "text"

    def test_config_strict(self, tmp_path: Path) -> None:
        opts = self._opts(tmp_path, "[lexer]\nstrict = true\n")
        assert opts.strict is True

    def test_config_format(self, tmp_path: Path) -> None:
        opts = self._opts(tmp_path, '[output]\nformat = "json"\n')
        assert opts.output_format == "json"

    def test_cli_overrides_config_format(self, tmp_path: Path) -> None:
        opts = self._opts(tmp_path, '[output]\nformat = "json"\n', "--format", "text")
        assert opts.output_format == "text"

    def test_cli_strict_overrides_config(self, tmp_path: Path) -> None:
        opts = self._opts(tmp_path, "[lexer]\nstrict = false\n", "--strict")
        assert opts.strict is True

    def test_invalid_format_in_config(self, tmp_path: Path) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            self._opts(tmp_path, '[output]\nformat = "xml"\n')

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text("[lexer]\nstrict = true\n")
        src = tmp_path / "prog.dfl"
        src.write_text("")
        ns = build_parser().parse_args([str(src), "--config", str(cfg)])
        assert resolve_options(ns).strict is True


class TestConfigErrors:
    def test_malformed_toml_returns_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "dfalex.toml").write_text("[lexer\n")
        src = tmp_path / "prog.dfl"
        src.write_text("x")
        assert main([str(src)]) == 2
        assert "invalid config file" in capsys.readouterr().err

    def test_strict_from_config_fails_run(self, tmp_path: Path) -> None:
        (tmp_path / "dfalex.toml").write_text("[lexer]\nstrict = true\n")
        src = tmp_path / "prog.dfl"
        src.write_text("x;")
        assert main([str(src)]) == 1
