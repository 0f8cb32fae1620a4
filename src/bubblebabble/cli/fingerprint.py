import click

from bubblebabble.config import DIGEST_ENV, DEFAULT_DIGEST, SUPPORTED_DIGESTS
from bubblebabble.errors import BubbleBabbleError
from bubblebabble.lib.fingerprint import (
    encode_address,
    fingerprint as fingerprint_blob,
    load_public_key_blob,
)


@click.command("fingerprint")
@click.argument("key_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--algorithm",
    type=click.Choice(SUPPORTED_DIGESTS, case_sensitive=False),
    envvar=DIGEST_ENV,
    default=DEFAULT_DIGEST,
    show_default=True,
    help="Digest applied to the key blob before encoding.",
)
@click.option(
    "--raw",
    is_flag=True,
    help="Treat the file as a raw key blob instead of an OpenSSH public key line.",
)
def fingerprint(key_path, algorithm, raw):
    """Prints the Bubble Babble fingerprint of a public key."""
    try:
        if raw:
            with open(key_path, "rb") as f:
                blob = f.read()
        else:
            with open(key_path, "r", encoding="utf-8") as f:
                blob = load_public_key_blob(f.read())

        click.echo(fingerprint_blob(blob, algorithm))
    except UnicodeDecodeError:
        raise click.ClickException(
            f"{key_path} is not a text public key file; use --raw for binary blobs"
        )
    except BubbleBabbleError as e:
        raise click.ClickException(f"Failed to fingerprint {key_path}: {e}")


@click.command("address")
@click.argument("address")
@click.option(
    "--standard",
    is_flag=True,
    help="Use the checksummed encoding instead of stable babble.",
)
def address(address, standard):
    """Encodes an IPv4 or IPv6 address."""
    try:
        click.echo(encode_address(address, stable=not standard))
    except BubbleBabbleError as e:
        raise click.ClickException(f"Failed to encode address: {e}")
