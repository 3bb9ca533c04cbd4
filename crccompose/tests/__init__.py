from .composer import CombineBlocksTest, CrcComposerTest
from .crc_compose import ComposeTest, GetMonomialTest, MultiplyTest, ReferenceTest
from .main import MainTest
from .types import BlockCrcTest, FindPolynomialTest, ParseUint32Test
from .util import UtilTest

__all__ = [
    "BlockCrcTest",
    "CombineBlocksTest",
    "ComposeTest",
    "CrcComposerTest",
    "FindPolynomialTest",
    "GetMonomialTest",
    "MainTest",
    "MultiplyTest",
    "ParseUint32Test",
    "ReferenceTest",
    "UtilTest",
]
