"""CLI helpers for effective date range resolution."""

from datetime import date

import click

from achparse.utils.date_parser import get_date_range, parse_date

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def resolve_effective_date_range(
    ctx,
    *,
    effective_after: str | None,
    effective_before: str | None,
    period: str | None,
) -> tuple[date | None, date | None]:
    """Resolve a batch effective date range from a named period or explicit dates."""
    if period and (effective_after or effective_before):
        click.echo(
            "Error: --period cannot be combined with --effective-after or --effective-before.",
            err=True,
        )
        ctx.exit(1)

    if period:
        try:
            return get_date_range(period)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    start = None
    end = None
    if effective_after:
        try:
            start = parse_date(effective_after)
        except ValueError as e:
            click.echo(f"Error: Invalid effective-after date: {e}", err=True)
            ctx.exit(1)

    if effective_before:
        try:
            end = parse_date(effective_before)
        except ValueError as e:
            click.echo(f"Error: Invalid effective-before date: {e}", err=True)
            ctx.exit(1)

    if start is not None and end is not None and start > end:
        click.echo("Error: --effective-after must not be later than --effective-before.", err=True)
        ctx.exit(1)

    return start, end
