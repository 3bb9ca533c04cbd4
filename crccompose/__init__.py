from ._crc_compose import (
    CASTAGNOLI_POLYNOMIAL,
    compose,
    compose_with_monomial,
    get_monomial,
    GZIP_POLYNOMIAL,
    multiply,
)
from .composer import combine_blocks, CrcComposer
from .types import BlockCrc, find_polynomial

__all__ = [
    "BlockCrc",
    "CASTAGNOLI_POLYNOMIAL",
    "combine_blocks",
    "compose",
    "compose_with_monomial",
    "CrcComposer",
    "find_polynomial",
    "get_monomial",
    "GZIP_POLYNOMIAL",
    "multiply",
]
