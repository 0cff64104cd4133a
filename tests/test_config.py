"""Tests for screensound.config and command line overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from screensound.__main__ import build_settings, parse_args
from screensound.config import (
    EnrichmentSettings,
    get_settings,
    load_settings,
    reload_settings,
)


class TestLoadSettings:
    def test_packaged_defaults(self) -> None:
        settings = load_settings()

        assert settings.database.path == "screensound.db"
        assert settings.enrichment.enabled is True
        assert settings.enrichment.endpoint.startswith("https://www.theaudiodb.com/")
        assert settings.enrichment.connect_timeout == 10.0
        assert settings.enrichment.total_timeout == 10.0
        assert settings.enrichment.biography_limit == 300

    def test_user_file_overrides_some_keys(self, tmp_path: Path) -> None:
        config = tmp_path / "my.toml"
        config.write_text(
            '[database]\npath = "/tmp/catalog.db"\n\n[enrichment]\ntotal_timeout = 3\n',
            encoding="utf-8",
        )

        settings = load_settings(config)

        assert settings.database.path == "/tmp/catalog.db"
        assert settings.enrichment.total_timeout == 3.0
        assert settings.enrichment.connect_timeout == 10.0
        assert settings.enrichment.enabled is True

    def test_invalid_timeout(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.toml"
        config.write_text("[enrichment]\nconnect_timeout = 0\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(config)

    def test_section_must_be_table(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.toml"
        config.write_text('database = "oops"\n', encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(config)

    def test_settings_validation(self) -> None:
        with pytest.raises(ValueError):
            EnrichmentSettings(biography_limit=0)

    def test_singleton(self) -> None:
        first = get_settings()
        assert get_settings() is first
        reloaded = reload_settings()
        assert reloaded is not first
        assert get_settings() is reloaded


class TestCommandLine:
    def test_defaults(self) -> None:
        settings = build_settings(parse_args([]))
        assert settings.database.path == "screensound.db"
        assert settings.enrichment.enabled is True

    def test_overrides(self, tmp_path: Path) -> None:
        db_path = str(tmp_path / "x.db")
        args = parse_args(["--db", db_path, "--no-enrichment", "-v"])
        assert args.verbose is True

        settings = build_settings(args)
        assert settings.database.path == db_path
        assert settings.enrichment.enabled is False
