import click

from bubblebabble.algorithms import encode as encode_bytes
from bubblebabble.algorithms import encode_with_steps, get_length_info
from bubblebabble.config import DEFAULT_BLOCK_SIZE
from bubblebabble.decoding import decode as decode_string
from bubblebabble.errors import BubbleBabbleError
from bubblebabble.stable import encode_blocks
from bubblebabble.cli.inputs import input_options, read_input, write_raw


@click.command("encode")
@input_options
@click.option("--steps", is_flag=True, help="Print every encoding round to stderr.")
def encode(hex_data, data, file_path, steps):
    """Encodes bytes as standard Bubble Babble."""
    payload = read_input(hex_data, data, file_path)

    if steps:
        encoded, trace = encode_with_steps(payload)
        for line in trace:
            click.echo(line, err=True)
    else:
        encoded = encode_bytes(payload)

    click.echo(encoded)


@click.command("stable")
@input_options
@click.option(
    "--block-size",
    type=int,
    default=DEFAULT_BLOCK_SIZE,
    show_default=True,
    help="Bytes per independently checksummed block (positive, even).",
)
def stable(hex_data, data, file_path, block_size):
    """Encodes bytes as stable babble."""
    payload = read_input(hex_data, data, file_path)
    try:
        click.echo(encode_blocks(payload, block_size))
    except BubbleBabbleError as e:
        raise click.ClickException(f"Failed to encode: {e}")


@click.command("decode")
@click.argument("encoded")
@click.option("--hex", "as_hex", is_flag=True, help="Print the bytes as hex.")
def decode(encoded, as_hex):
    """Decodes a standard Bubble Babble string."""
    try:
        payload = decode_string(encoded)
    except BubbleBabbleError as e:
        raise click.ClickException(f"Failed to decode: {e}")

    if as_hex:
        click.echo(payload.hex())
    else:
        write_raw(payload)


@click.command("info")
@click.argument("length", type=int)
def info(length):
    """Shows the output shape for an input of LENGTH bytes."""
    try:
        details = get_length_info(length)
    except BubbleBabbleError as e:
        raise click.ClickException(str(e))

    click.echo(f"Input length:  {details['input_length']}")
    click.echo(f"Full rounds:   {details['full_rounds']}")
    click.echo(f"Trailing byte: {'yes' if details['has_trailing_byte'] else 'no'}")
    click.echo(f"Words:         {details['words']}")
    click.echo(f"Output length: {details['output_length']}")
