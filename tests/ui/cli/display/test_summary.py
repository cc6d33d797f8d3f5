"""Tests for end-of-run summary rendering."""

from io import StringIO
from pathlib import Path

from rich.console import Console

from musicat.features.catalog.domain.models import SyncStats
from musicat.ui.cli.display.summary import render_candidates, render_sync_summary


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=80, color_system=None), buffer


def test_render_sync_summary_lists_counts() -> None:
    console, buffer = _console()
    stats = SyncStats(new_artists=1, new_albums=2, new_genres=1, new_tracks=2, updated_tracks=0, existing_tracks=2)

    render_sync_summary(console, stats)

    output = buffer.getvalue()
    assert "Catalog summary" in output
    assert "New albums" in output
    assert "Updated tracks" in output
    assert "Skipped paths" not in output


def test_render_sync_summary_reports_skipped_paths() -> None:
    console, buffer = _console()

    render_sync_summary(console, SyncStats(skipped_paths=["/elsewhere/a.mp3", "/elsewhere/b.mp3"]))

    assert "Skipped paths" in buffer.getvalue()


def test_render_candidates_prints_relative_paths(tmp_path: Path) -> None:
    console, buffer = _console()
    candidates = [tmp_path / "A" / "[live] 1.mp3", tmp_path / "B" / "2.mp3"]

    render_candidates(console, candidates, tmp_path)

    lines = buffer.getvalue().splitlines()
    assert lines[0] == str(Path("A") / "[live] 1.mp3")
    assert lines[1] == str(Path("B") / "2.mp3")
    assert lines[-1] == "2 media files"
