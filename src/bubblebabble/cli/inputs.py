import sys

import click

from bubblebabble.lib.log import get_logger, log

logger = get_logger("cli")

# Options shared by the commands that take raw input bytes
INPUT_OPTIONS = [
    click.option("--hex", "hex_data", help="Input given as a hex string."),
    click.option("--data", help="Input given as a UTF-8 text string."),
    click.option(
        "--file",
        "file_path",
        type=click.Path(exists=True, dir_okay=False),
        help="Read input bytes from a file.",
    ),
]


def input_options(func):
    """Attach --hex/--data/--file to a command."""
    for option in reversed(INPUT_OPTIONS):
        func = option(func)
    return func


def read_input(hex_data, data, file_path) -> bytes:
    """Resolve input bytes from the options; stdin is used when none is given."""
    given = [value for value in (hex_data, data, file_path) if value is not None]
    if len(given) > 1:
        raise click.UsageError("Use only one of --hex, --data or --file.")

    if hex_data is not None:
        try:
            payload = bytes.fromhex(hex_data.replace(":", "").replace(" ", ""))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--hex")
        source = "hex"
    elif data is not None:
        payload = data.encode("utf-8")
        source = "data"
    elif file_path is not None:
        with open(file_path, "rb") as f:
            payload = f.read()
        source = f"file:{file_path}"
    else:
        payload = click.get_binary_stream("stdin").read()
        source = "stdin"

    log(logger, "debug", "Read input", source=source, length=len(payload))
    return payload


def write_raw(payload: bytes):
    out = click.get_binary_stream("stdout")
    out.write(payload)
    out.flush()
    if sys.stdout.isatty():
        click.echo()
