"""
Tests for UI helpers and app wiring
"""

import logging

import pytest

from bugtracker.config import SEVERITY_COLOR_DEFAULT, SEVERITY_COLORS
from bugtracker.services.snapshot import MemorySnapshot, SqliteSnapshot
from bugtracker.ui.helpers import (
    FILTER_LABELS,
    empty_state_hint,
    format_datetime,
    severity_colors,
    status_color,
)


class TestFormatting:
    def test_format_datetime_handles_z_suffix(self):
        out = format_datetime("2024-05-01T10:00:00.000Z")
        assert out.startswith(("01/05/2024", "30/04/2024", "02/05/2024"))

    @pytest.mark.parametrize("raw", ["", "yesterday", None])
    def test_format_datetime_falls_back(self, raw):
        assert format_datetime(raw) == (raw or "")

    def test_severity_colors(self):
        assert severity_colors("critical") == SEVERITY_COLORS["critical"]
        assert severity_colors("unknown") == SEVERITY_COLOR_DEFAULT

    def test_status_color_known_and_unknown(self):
        assert status_color("open") != status_color("resolved")
        assert status_color("bogus")

    def test_filter_labels_cover_all_filters(self):
        assert list(FILTER_LABELS) == ["all", "open", "in-progress", "resolved"]

    def test_empty_state_hint_depends_on_collection_size(self, store):
        assert empty_state_hint(0) == "Commencez par créer votre premier ticket !"
        items, stats = store.current_view("resolved", "")
        assert items == []
        assert empty_state_hint(stats.total) == "Essayez de modifier vos filtres"


class TestBuildStore:
    """Tests for picking the persistence slot at startup."""

    @pytest.fixture
    def app_main(self):
        pytest.importorskip("flet")
        from bugtracker import app_main

        return app_main

    def test_memory_setting_uses_memory_slot(self, app_main):
        assert isinstance(app_main.build_port(":memory:", "bugs"), MemorySnapshot)

    def test_file_setting_uses_sqlite_slot(self, app_main, tmp_path):
        port = app_main.build_port(str(tmp_path / "data.db"), "bugs")
        assert isinstance(port, SqliteSnapshot)

    def test_unusable_path_falls_back_to_memory(self, app_main, tmp_path, caplog):
        with caplog.at_level(logging.DEBUG):
            port = app_main.build_port(str(tmp_path / "missing" / "data.db"), "bugs")
        assert isinstance(port, MemorySnapshot)
        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert errors[0].name == "bugtracker.app_main"

    def test_build_store_seeds_examples(self, app_main, tmp_path):
        store = app_main.build_store(str(tmp_path / "data.db"), "bugs")
        assert len(store) == 2
