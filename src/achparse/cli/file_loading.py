"""CLI helpers for loading ACH files."""

from __future__ import annotations

import click

from achparse.cli.error_handling import handle_ach_error
from achparse.domain.entities import AchFile
from achparse.domain.parser import parse_file


def load_ach_file_or_exit(ctx: click.Context, path: str) -> AchFile:
    """Parse an ACH file, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return parse_file(path)
    except ValueError as exc:
        # AchError, and UnicodeDecodeError for non-ASCII content
        handle_ach_error(ctx, exc)
