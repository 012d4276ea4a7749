"""ACH file viewing command."""

import click

from achparse.cli.file_loading import load_ach_file_or_exit


def _batch_number(raw: str) -> int | None:
    """Batch number field as an int, or None if it is not numeric."""
    raw = raw.strip()
    return int(raw) if raw.isascii() and raw.isdigit() else None


@click.command("view")
@click.argument("ach_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--batch", "batch_number", type=int, help="Only show the batch with this number")
@click.option("--verbose", "-v", is_flag=True, help="Show all entry fields and addenda text")
@click.pass_context
def view_file(ctx, ach_file: str, batch_number: int | None, verbose: bool):
    """View the batches and entries of an ACH file.

    Use --verbose to show routing, trace number and addenda for each entry.
    """
    parsed = load_ach_file_or_exit(ctx, ach_file)
    header = parsed.file_header

    click.echo(
        f"\nFile: {header.immediate_origin_name.strip()} -> "
        f"{header.immediate_destination_name.strip()}"
    )
    created = header.created_at
    if created is not None:
        click.echo(f"Created: {created:%Y-%m-%d %H:%M}")

    batches = parsed.batches
    if batch_number is not None:
        batches = [b for b in batches if _batch_number(b.header.batch_number) == batch_number]
        if not batches:
            click.echo(f"Error: Batch {batch_number} not found", err=True)
            ctx.exit(1)

    for batch in batches:
        bh = batch.header
        effective = bh.effective_date
        click.echo("=" * 100)
        click.echo(
            f"Batch {bh.batch_number.strip()}: {bh.company_name.strip()} "
            f"({bh.standard_entry_class_code} {bh.company_entry_description.strip()}) "
            f"service class {bh.service_class_code}, "
            f"effective {effective if effective is not None else bh.effective_entry_date.strip() or '-'}"
        )
        click.echo("-" * 100)

        if verbose:
            for entry in batch.entries:
                click.echo(f"\nEntry {entry.trace_number}")
                click.echo(f"  Transaction code: {entry.transaction_code}")
                click.echo(
                    f"  Routing: {entry.receiving_dfi_identification}{entry.check_digit}"
                )
                click.echo(f"  Account: {entry.dfi_account_number.strip()}")
                click.echo(f"  Amount: ${entry.dollars:,.2f}")
                click.echo(f"  Name: {entry.individual_name.strip()}")
                if entry.individual_identification_number.strip():
                    click.echo(f"  ID: {entry.individual_identification_number.strip()}")
                for addenda in entry.addenda:
                    click.echo(
                        f"  Addenda {addenda.addenda_sequence_number}: "
                        f"{addenda.payment_related_information.strip()}"
                    )
        else:
            click.echo(
                f"{'Trace':<16} {'Code':<5} {'Amount':>14} {'Name':<23} {'Addenda':<7}"
            )
            click.echo("-" * 100)
            for entry in batch.entries:
                amount_str = f"${entry.dollars:,.2f}"
                click.echo(
                    f"{entry.trace_number:<16} {entry.transaction_code:<5} {amount_str:>14} "
                    f"{entry.individual_name.strip():<23} {len(entry.addenda):<7}"
                )


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_file)
