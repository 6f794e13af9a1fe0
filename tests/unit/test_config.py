"""Tests for config.load_config()."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from breadthwise.config import load_config


class TestDefaults:
    def test_default_config_no_file(self) -> None:
        config = load_config(None)
        assert config.render.separator == " -> "
        assert config.render.no_path == "No path found"

    def test_default_config_missing_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yml")
        assert config.render.separator == " -> "

    def test_empty_file(self, tmp_path: Path) -> None:
        cfg = tmp_path / "empty.yml"
        cfg.write_text("")
        assert load_config(cfg).render.blocked_cell == "#"


class TestCustomConfig:
    def test_custom_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.yml"
        cfg.write_text(
            "render:\n"
            "  separator: ' => '\n"
            "  blocked_cell: 'X'\n"
        )
        config = load_config(cfg)
        assert config.render.separator == " => "
        assert config.render.blocked_cell == "X"
        assert config.render.open_cell == "."


class TestMalformedYAML:
    def test_malformed_yaml_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("{{{{not yaml!!!!")
        config = load_config(bad)
        assert config.render.separator == " -> "

    def test_non_mapping_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "list.yml"
        bad.write_text("- item1\n- item2\n")
        config = load_config(bad)
        assert config.render.separator == " -> "

    def test_invalid_field_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "invalid.yml"
        bad.write_text("render:\n  separator: [1, 2]\n")
        config = load_config(bad)
        assert config.render.separator == " -> "

    def test_problem_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        bad = tmp_path / "list.yml"
        bad.write_text("- item1\n")
        with caplog.at_level(logging.WARNING, logger="breadthwise"):
            load_config(bad)
        assert "not a YAML mapping" in caplog.text
        assert "using default settings" in caplog.text
