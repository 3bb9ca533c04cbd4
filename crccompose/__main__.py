import logging
from typing import IO, List, Optional, Tuple

import click
from keke import kev, TraceOutput

from crccompose._crc_compose import compose, get_monomial
from crccompose.composer import combine_blocks, CrcComposer
from crccompose.types import (
    BlockCrc,
    DEFAULT_POLYNOMIAL,
    find_polynomial,
    parse_uint32,
)
from crccompose.util import to_multi_crc_string, to_single_crc_string

log = logging.getLogger(__name__)


def _polynomial_callback(ctx: click.Context, param: click.Parameter, value: str) -> int:
    try:
        return find_polynomial(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _uint32_callback(ctx: click.Context, param: click.Parameter, value: str) -> int:
    try:
        return parse_uint32(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _uint32s_callback(
    ctx: click.Context, param: click.Parameter, value: Tuple[str, ...]
) -> List[int]:
    try:
        return [parse_uint32(v) for v in value]
    except ValueError as e:
        raise click.BadParameter(str(e))


def _blocks_callback(
    ctx: click.Context, param: click.Parameter, value: Tuple[str, ...]
) -> List[BlockCrc]:
    try:
        return [BlockCrc.parse(v) for v in value]
    except ValueError as e:
        raise click.BadParameter(str(e))


poly_option = click.option(
    "--poly",
    "-p",
    help="Polynomial name (gzip, castagnoli, ...) or reversed 32-bit value",
    default=DEFAULT_POLYNOMIAL,
    show_default=True,
    callback=_polynomial_callback,
)


@click.group()
@click.option("--verbose", "-v", help="Verbose log level", count=True)
@click.option(
    "--trace", help="Write trace-events to", metavar="FILE", type=click.File(mode="w")
)
@click.pass_context
def main(ctx: click.Context, verbose: int, trace: "Optional[IO[str]]") -> None:
    if verbose == 0:
        logging.basicConfig(level=logging.WARNING)
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)

    ctx.with_resource(TraceOutput(file=trace))


@main.command("compose")
@poly_option
@click.argument("crc_a", callback=_uint32_callback)
@click.argument("crc_b", callback=_uint32_callback)
@click.argument("length_b", type=click.IntRange(min=0))
def compose_cmd(poly: int, crc_a: int, crc_b: int, length_b: int) -> None:
    """
    Prints crc(a + b) given crc(a), crc(b) and len(b).
    """
    with kev("compose", __name__):
        click.echo("0x%08x" % compose(crc_a, crc_b, length_b, poly))


@main.command("monomial")
@poly_option
@click.argument("length", type=click.IntRange(min=0))
def monomial_cmd(poly: int, length: int) -> None:
    """
    Prints x^(LENGTH * 8) mod the polynomial, for reuse with many crcs.
    """
    with kev("monomial", __name__):
        click.echo("0x%08x" % get_monomial(length, poly))


@main.command("combine")
@poly_option
@click.argument("blocks", nargs=-1, required=True, callback=_blocks_callback)
def combine_cmd(poly: int, blocks: List[BlockCrc]) -> None:
    """
    Prints the crc:length of BLOCKS (each crc:length) concatenated in order.
    """
    click.echo(str(combine_blocks(blocks, poly)))


@main.command("stripes")
@poly_option
@click.option(
    "--chunk-size",
    help="Bytes covered by each of CRCS",
    type=click.IntRange(min=1),
    required=True,
)
@click.option(
    "--stripe-length",
    help="Emit one crc per this many bytes (default: one for everything)",
    type=click.IntRange(min=1),
)
@click.argument("crcs", nargs=-1, required=True, callback=_uint32s_callback)
def stripes_cmd(
    poly: int, chunk_size: int, stripe_length: Optional[int], crcs: List[int]
) -> None:
    """
    Prints the crc of each stripe of consecutive CHUNK_SIZE chunks with CRCS.
    """
    composer = CrcComposer(poly, chunk_size, stripe_length=stripe_length)
    with kev("stripes", __name__):
        try:
            for crc in crcs:
                composer.update(crc, chunk_size)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--stripe-length")
        digest = composer.digest()
    if stripe_length is None:
        click.echo(to_single_crc_string(digest))
    else:
        click.echo(to_multi_crc_string(digest))


@main.command("verify")
@poly_option
@click.argument("expected", callback=_uint32_callback)
@click.argument("blocks", nargs=-1, required=True, callback=_blocks_callback)
@click.pass_context
def verify_cmd(
    ctx: click.Context, poly: int, expected: int, blocks: List[BlockCrc]
) -> None:
    """
    Checks that BLOCKS (each crc:length) concatenated have crc EXPECTED.
    """
    combined = combine_blocks(blocks, poly)
    if combined.crc != expected:
        click.echo(
            "  %08x != %08x (%d)" % (combined.crc, expected, combined.length)
        )
        log.warning("Mismatch over %d blocks", len(blocks))
        ctx.exit(1)
    click.echo("  ok")


if __name__ == "__main__":
    main()
