"""Command line argument handling package."""

from musicat.ui.cli.args.parser import ArgumentParser
from musicat.ui.cli.args.options import ParseFailure, ParseResult, ParseSuccess, SyncArgs

__all__ = ["ArgumentParser", "ParseFailure", "ParseResult", "ParseSuccess", "SyncArgs"]
