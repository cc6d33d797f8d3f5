"""Utilities for rendering the end-of-run summary."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from musicat.features.catalog.domain.models import SyncStats


def render_sync_summary(console: Console, stats: SyncStats) -> None:
    """Render counts of created dimensions and created or updated tracks.

    Args:
        console: Rich console instance used to render output.
        stats: Counters collected during the run.
    """
    table = Table(title="Catalog summary", show_header=False, title_justify="left")
    table.add_column("label")
    table.add_column("count", justify="right")

    table.add_row("New artists", str(stats.new_artists))
    table.add_row("New albums", str(stats.new_albums))
    table.add_row("New genres", str(stats.new_genres))
    table.add_row("[green]New tracks[/green]", f"[green]{stats.new_tracks}[/green]")
    table.add_row("[yellow]Updated tracks[/yellow]", f"[yellow]{stats.updated_tracks}[/yellow]")
    table.add_row("Existing tracks", str(stats.existing_tracks))
    if stats.skipped_paths:
        table.add_row("[red]Skipped paths[/red]", f"[red]{len(stats.skipped_paths)}[/red]")

    console.print(table)


def render_candidates(console: Console, candidates: Sequence[Path], archive_root: Path) -> None:
    """Print one archive-relative path per candidate file followed by a total."""

    for path in candidates:
        try:
            shown = path.relative_to(archive_root)
        except ValueError:
            shown = path
        console.print(str(shown), markup=False, highlight=False)
    console.print(f"\n[bold]{len(candidates)}[/bold] media files")


__all__ = ["render_candidates", "render_sync_summary"]
