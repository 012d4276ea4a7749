"""ACH file validation command."""

import click

from achparse.cli.file_loading import load_ach_file_or_exit


@click.command("validate")
@click.argument("ach_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def validate(ctx, ach_file: str):
    """Check that an ACH file parses.

    Exits with status 1 and reports the first problem found otherwise.
    """
    parsed = load_ach_file_or_exit(ctx, ach_file)
    addenda = sum(batch.addenda_count for batch in parsed.batches)
    click.echo(
        f"OK: {len(parsed.batches)} batch(es), {parsed.entry_count} entries, "
        f"{addenda} addenda"
    )


def register_commands(cli):
    """Register validate command with main CLI."""
    cli.add_command(validate)
