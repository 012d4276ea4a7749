"""Main CLI entry point."""

import logging

import click

# Import and register all commands at module level
from achparse.cli.commands import summary, validate, view

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level (overrides ACHPARSE_LOG_LEVEL environment variable)",
    envvar="ACHPARSE_LOG_LEVEL",
)
def cli(log_level: str):
    """achparse - NACHA/ACH file reader.

    Parse, validate and summarize ACH files made of fixed-width
    94-character records.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register all commands
view.register_commands(cli)
summary.register_commands(cli)
validate.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
