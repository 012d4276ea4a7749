"""CLI error handling helpers."""

import click

from achparse.domain.errors import AchError


def format_ach_error(error: AchError) -> str:
    """Render an ACH error with its line number when known."""
    if error.line_number is None:
        return f"Error: {error}"
    return f"Error (line {error.line_number}): {error}"


def handle_ach_error(ctx: click.Context, error: AchError | ValueError) -> None:
    """Render a parse error and exit with failure."""
    if isinstance(error, AchError):
        click.echo(format_ach_error(error), err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
