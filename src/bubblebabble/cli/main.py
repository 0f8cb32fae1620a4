import click

from bubblebabble.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from bubblebabble.lib.log import setup_logging

# Import commands from modules
from bubblebabble.cli.encode import encode, stable, decode, info
from bubblebabble.cli.fingerprint import fingerprint, address


@click.group()
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (stderr).",
)
def cli(log_level):
    """Encodes binary data as pronounceable Bubble Babble."""
    setup_logging(log_level)


# Add encoding commands
cli.add_command(encode)
cli.add_command(stable)
cli.add_command(decode)
cli.add_command(info)

# Add fingerprint commands
cli.add_command(fingerprint)
cli.add_command(address)


if __name__ == "__main__":
    cli()
