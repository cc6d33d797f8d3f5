"""src/musicat/ui/cli/commands/sync.py
What: Execute a catalog run (or a candidate listing) for parsed CLI options.
Why: Bridge parsed arguments with the catalog synchronizer and Rich output.
"""

from __future__ import annotations

from rich.console import Console

from musicat.features.catalog.domain.models import SyncStats
from musicat.features.catalog.usecases.ports import TagReaderPort
from musicat.features.catalog.usecases.scanner import Scanner
from musicat.features.catalog.usecases.sync_runner import CatalogSynchronizer
from musicat.features.metadata.usecases.extraction import MetadataExtractor
from musicat.platform.db.db_manager import DatabaseManager
from musicat.ui.cli.args.options import SyncArgs
from musicat.ui.cli.display.summary import render_candidates, render_sync_summary


class SyncCommand:
    """Command for reconciling an archive subtree with the catalog."""

    args: SyncArgs
    console: Console
    tag_reader: TagReaderPort

    def __init__(
        self,
        args: SyncArgs,
        console: Console | None = None,
        tag_reader: TagReaderPort | None = None,
    ) -> None:
        self.args = args
        self.console = console or Console()
        self.tag_reader = tag_reader or MetadataExtractor()

    def execute(self) -> SyncStats | None:
        """Run the command.

        Returns:
            Run statistics, or ``None`` when only listing candidates.
        """
        if self.args.list_only:
            scanner = Scanner(self.args.settings.media_extensions, self.args.settings.hidden_prefix)
            candidates = list(scanner.walk(self.args.archive_root, self.args.subdirectory))
            render_candidates(self.console, candidates, self.args.archive_root)
            return None

        # Released on every exit path, including integrity failures.
        with DatabaseManager(self.args.db_path, self.args.settings.sentinel_name) as db_manager:
            synchronizer = CatalogSynchronizer(
                db_manager=db_manager,
                tag_reader=self.tag_reader,
                archive_root=self.args.archive_root,
                settings=self.args.settings,
            )
            stats = synchronizer.run(self.args.subdirectory)

        render_sync_summary(self.console, stats)
        return stats
