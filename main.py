import logging
import sys

import click

from config.settings import DEFAULT_HRP, DEFAULT_VERSION, LOG_FORMAT, LOG_LEVEL
from bch_lib.codec import Bch32Codec

logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def _parse_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise click.BadParameter(f"not a hex string: {value}")


def _emit(result, formatter=str):
    if not result.success:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)
    click.echo(formatter(result.data))


@click.group()
def cli():
    """Encode and decode checksummed bch32 strings and addresses."""
    pass


@click.command("encode")
@click.argument("hrp")
@click.argument("symbols", nargs=-1, type=int)
def encode(hrp, symbols):
    """Encodes 5-bit SYMBOLS under HRP."""
    _emit(Bch32Codec().encode(list(symbols), hrp=hrp))


@click.command("decode")
@click.argument("bch_string")
def decode(bch_string):
    """Decodes a string into its hrp and 5-bit symbols."""
    _emit(Bch32Codec().decode(bch_string),
          lambda data: f"{data[0]} {' '.join(str(v) for v in data[1])}".rstrip())


@click.command("addr-encode")
@click.option("--hrp", default=DEFAULT_HRP, help="Human-readable part.")
@click.option("--version", "version", default=DEFAULT_VERSION, type=int, help="Address version (0-16).")
@click.argument("program")
def addr_encode(hrp, version, program):
    """Encodes a hex PROGRAM as an address."""
    _emit(Bch32Codec().addr_encode(_parse_hex(program), version=version, hrp=hrp))


@click.command("addr-decode")
@click.option("--hrp", default=DEFAULT_HRP, help="Expected human-readable part.")
@click.argument("address")
def addr_decode(hrp, address):
    """Decodes an ADDRESS into its version and hex program."""
    _emit(Bch32Codec().addr_decode(address, hrp=hrp), lambda data: f"{data[0]} {data[1].hex()}")


@click.command("mixed-case")
@click.argument("address")
def mixed_case(address):
    """Renders a valid ADDRESS in the mixed display style."""
    _emit(Bch32Codec().mixed_case(address))


@click.command("payload-encode")
@click.option("--hrp", default=DEFAULT_HRP, help="Human-readable part.")
@click.argument("blob")
def payload_encode(hrp, blob):
    """Encodes a hex version|length|program BLOB as an address."""
    _emit(Bch32Codec().encode_payload(_parse_hex(blob), hrp=hrp))


@click.command("payload-decode")
@click.option("--hrp", default=DEFAULT_HRP, help="Expected human-readable part.")
@click.argument("address")
def payload_decode(hrp, address):
    """Decodes an ADDRESS into its hex version|length|program payload."""
    _emit(Bch32Codec().decode_payload(address, hrp=hrp), lambda data: data.hex())


cli.add_command(encode)
cli.add_command(decode)
cli.add_command(addr_encode)
cli.add_command(addr_decode)
cli.add_command(mixed_case)
cli.add_command(payload_encode)
cli.add_command(payload_decode)


if __name__ == "__main__":
    cli()
