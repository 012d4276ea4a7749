"""Summary command."""

import click

from achparse.cli.date_filters import PERIODS, resolve_effective_date_range
from achparse.cli.file_loading import load_ach_file_or_exit
from achparse.domain.summary import SummaryService
from achparse.utils.amount_parser import parse_amount


@click.command("summary")
@click.argument("ach_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--effective-after", help="Only batches effective on or after this date")
@click.option("--effective-before", help="Only batches effective on or before this date")
@click.option("--period", type=click.Choice(PERIODS), help="Only batches effective in this period")
@click.option("--min-amount", help="Only batches with a debit or credit total of at least this amount")
@click.pass_context
def summary(
    ctx,
    ach_file: str,
    effective_after: str | None,
    effective_before: str | None,
    period: str | None,
    min_amount: str | None,
):
    """Show per-batch counts and totals for an ACH file.

    Declared totals are read from the control records; entry totals are
    summed from the entries themselves. Differences are shown, not checked.
    """
    start, end = resolve_effective_date_range(
        ctx,
        effective_after=effective_after,
        effective_before=effective_before,
        period=period,
    )

    minimum = None
    if min_amount:
        try:
            minimum = parse_amount(min_amount)
        except ValueError as e:
            click.echo(f"Error: Invalid minimum amount: {e}", err=True)
            ctx.exit(1)

    parsed = load_ach_file_or_exit(ctx, ach_file)
    report = SummaryService(parsed).build_report(
        effective_after=start, effective_before=end, min_amount=minimum
    )

    click.echo(f"\n{report.immediate_origin_name} -> {report.immediate_destination_name}")
    if report.created_at is not None:
        click.echo(f"Created: {report.created_at:%Y-%m-%d %H:%M}")

    if not report.batches:
        click.echo("No batches found.")
    else:
        click.echo("-" * 110)
        click.echo(
            f"{'Batch':<8} {'Company':<17} {'SEC':<4} {'Class':<6} {'Effective':<11} "
            f"{'Entries':>7} {'Addenda':>7} {'Debits':>16} {'Credits':>16}"
        )
        click.echo("-" * 110)
        for row in report.batches:
            effective = str(row.effective_date) if row.effective_date else "-"
            service_class = str(row.service_class.value) if row.service_class else "?"
            click.echo(
                f"{row.batch_number:<8} {row.company_name:<17} {row.standard_entry_class_code:<4} "
                f"{service_class:<6} {effective:<11} {row.entry_count:>7} {row.addenda_count:>7} "
                f"{'$' + format(row.declared_debit_total, ',.2f'):>16} "
                f"{'$' + format(row.declared_credit_total, ',.2f'):>16}"
            )
            if (
                row.entry_debit_total != row.declared_debit_total
                or row.entry_credit_total != row.declared_credit_total
            ):
                click.echo(
                    f"{'':<8} entry totals: debits ${row.entry_debit_total:,.2f}, "
                    f"credits ${row.entry_credit_total:,.2f}"
                )

    click.echo("=" * 110)
    click.echo(f"Batches: {report.batch_count}")
    click.echo(f"Entry/addenda records: {report.entry_addenda_count}")
    click.echo(f"Total debits: ${report.declared_debit_total:,.2f}")
    click.echo(f"Total credits: ${report.declared_credit_total:,.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
