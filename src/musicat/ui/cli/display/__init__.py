"""Display management for CLI interface."""

from musicat.ui.cli.display.summary import render_candidates, render_sync_summary

__all__ = ["render_candidates", "render_sync_summary"]
