from dataclasses import dataclass
from typing import Dict, Union

from ._crc_compose import CASTAGNOLI_POLYNOMIAL, GZIP_POLYNOMIAL

UINT32_MAX = 0xFFFFFFFF

POLYNOMIALS: Dict[str, int] = {
    "gzip": GZIP_POLYNOMIAL,
    "crc32": GZIP_POLYNOMIAL,
    "ieee": GZIP_POLYNOMIAL,
    "castagnoli": CASTAGNOLI_POLYNOMIAL,
    "crc32c": CASTAGNOLI_POLYNOMIAL,
}

DEFAULT_POLYNOMIAL = "gzip"


def parse_uint32(s: str) -> int:
    # base 0 accepts 0x, 0o, 0b prefixes as well as plain decimal
    v = int(s, 0)
    if not 0 <= v <= UINT32_MAX:
        raise ValueError(f"{s!r} does not fit in 32 bits")
    return v


def find_polynomial(d: Union[str, int]) -> int:
    """
    Returns the reversed polynomial for a name in POLYNOMIALS (any case), or for
    an integer literal like "0xEDB88320".

    Raises ValueError for anything else.
    """
    if isinstance(d, int):
        if not 0 <= d <= UINT32_MAX:
            raise ValueError(f"{d:#x} does not fit in 32 bits")
        return d
    try:
        return POLYNOMIALS[d.lower()]
    except KeyError:
        pass
    try:
        return parse_uint32(d)
    except ValueError:
        raise ValueError(
            f"Unknown polynomial {d!r}, expected one of {sorted(POLYNOMIALS)} "
            "or a 32-bit integer"
        ) from None


@dataclass(frozen=True)
class BlockCrc:
    """
    The CRC of a run of bytes, and how many bytes that was.
    """

    crc: int
    length: int

    def __post_init__(self) -> None:
        if not 0 <= self.crc <= UINT32_MAX:
            raise ValueError(f"Crc {self.crc:#x} does not fit in 32 bits")
        if self.length < 0:
            raise ValueError(f"Negative length {self.length}")

    @classmethod
    def parse(cls, s: str) -> "BlockCrc":
        """
        Parses "crc:length", e.g. "0x0d4a1185:5".  Both halves take any int
        literal Python does.
        """
        crc, sep, length = s.partition(":")
        if not sep:
            raise ValueError(f"Expected crc:length but got {s!r}")
        return cls(crc=parse_uint32(crc), length=int(length, 0))

    def __str__(self) -> str:
        return "0x%08x:%d" % (self.crc, self.length)
