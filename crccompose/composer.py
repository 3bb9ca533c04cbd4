import io
import logging
from functools import lru_cache
from typing import Iterable, Optional

from keke import kev

from ._crc_compose import compose_with_monomial, get_monomial
from .types import BlockCrc
from .util import Buffer, CRC_SIZE, int_to_bytes, read_int

LOG = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def cached_monomial(length_bytes: int, m: int) -> int:
    return get_monomial(length_bytes, m)


def combine_blocks(blocks: Iterable[BlockCrc], m: int) -> BlockCrc:
    """
    Given the crcs of consecutive blocks, returns the crc (and length) of all of
    them concatenated.

    Empty blocks are skipped.  No blocks at all gives BlockCrc(0, 0), which is
    the crc of b"" for the standard variants.
    """
    running_crc = 0
    running_size = 0
    n = 0
    with kev("combine_blocks", __name__):
        for block in blocks:
            # compose() with a zero length gives back the empty crc, not ours
            if block.length == 0:
                continue
            running_crc = compose_with_monomial(
                running_crc, block.crc, cached_monomial(block.length, m), m
            )
            running_size += block.length
            n += 1
    LOG.info(
        "Combined %d blocks of %d bytes to %08x", n, running_size, running_crc
    )
    return BlockCrc(crc=running_crc, length=running_size)


class CrcComposer:
    """
    Accumulates the crcs of consecutive chunks, emitting one crc per stripe.

    Chunks are usually all the same size; pass that as `bytes_per_crc_hint` and
    its monomial is only computed once.  A stripe_length of None means the
    whole input is one stripe, and digest() returns a single crc.

    Not threadsafe.
    """

    def __init__(
        self,
        polynomial: int,
        bytes_per_crc_hint: int,
        stripe_length: Optional[int] = None,
    ) -> None:
        if stripe_length is not None and stripe_length <= 0:
            raise ValueError(f"Stripe length must be positive, got {stripe_length}")
        self._polynomial = polynomial
        self._bytes_per_crc_hint = bytes_per_crc_hint
        self._precomputed_monomial = get_monomial(bytes_per_crc_hint, polynomial)
        self._stripe_length = stripe_length

        self._cur_crc: Optional[int] = None
        self._cur_position_in_stripe = 0
        self._digest_out = io.BytesIO()

    def update(self, crc: int, bytes_per_crc: int) -> None:
        if bytes_per_crc < 0:
            raise ValueError(f"Negative length {bytes_per_crc}")
        if bytes_per_crc == 0:
            return
        if self._cur_crc is None:
            self._cur_crc = crc
        else:
            if bytes_per_crc == self._bytes_per_crc_hint:
                monomial = self._precomputed_monomial
            else:
                monomial = get_monomial(bytes_per_crc, self._polynomial)
            self._cur_crc = compose_with_monomial(
                self._cur_crc, crc, monomial, self._polynomial
            )

        self._cur_position_in_stripe += bytes_per_crc
        if self._stripe_length is None:
            return
        if self._cur_position_in_stripe > self._stripe_length:
            raise ValueError(
                f"Position {self._cur_position_in_stripe} in stripe exceeds "
                f"stripe length {self._stripe_length}"
            )
        elif self._cur_position_in_stripe == self._stripe_length:
            self._emit()

    def update_bytes(self, buf: Buffer, bytes_per_crc: int) -> None:
        """
        Takes concatenated big-endian crcs, each covering `bytes_per_crc`.
        """
        if len(buf) % CRC_SIZE != 0:
            raise ValueError(
                f"Crc buffer length {len(buf)} is not a multiple of {CRC_SIZE}"
            )
        for i in range(0, len(buf), CRC_SIZE):
            self.update(read_int(buf, i), bytes_per_crc)

    def digest(self) -> bytes:
        """
        Returns every stripe's crc so far as 4 big-endian bytes each, including
        a trailing partial stripe, and starts over.
        """
        with kev("digest", __name__):
            if self._cur_position_in_stripe > 0:
                self._emit()
            value = self._digest_out.getvalue()
            self._digest_out = io.BytesIO()
        return value

    def _emit(self) -> None:
        assert self._cur_crc is not None
        LOG.debug(
            "Stripe done at %d bytes: %08x",
            self._cur_position_in_stripe,
            self._cur_crc,
        )
        self._digest_out.write(int_to_bytes(self._cur_crc))
        self._cur_crc = None
        self._cur_position_in_stripe = 0
