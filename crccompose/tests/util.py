import unittest

from ..util import (
    int_to_bytes,
    read_int,
    to_multi_crc_string,
    to_single_crc_string,
)


class UtilTest(unittest.TestCase):
    def test_int_to_bytes(self) -> None:
        self.assertEqual(b"\x0d\x4a\x11\x85", int_to_bytes(0x0D4A1185))
        self.assertEqual(b"\xff\xff\xff\xff", int_to_bytes(0xFFFFFFFF))

    def test_read_int(self) -> None:
        b = b"\x00\x01\x02\x03\x04"
        self.assertEqual(0x00010203, read_int(b, 0))
        self.assertEqual(0x01020304, read_int(b, 1))

        with self.assertRaisesRegex(ValueError, "Short read: wanted 4 but got 3"):
            read_int(b, 2)
        with self.assertRaisesRegex(ValueError, "Negative offset -1"):
            read_int(b, -1)

    def test_single_crc_string(self) -> None:
        self.assertEqual("0x0d4a1185", to_single_crc_string(b"\x0d\x4a\x11\x85"))
        with self.assertRaisesRegex(ValueError, "Wanted 4 bytes"):
            to_single_crc_string(b"\x0d\x4a\x11")

    def test_multi_crc_string(self) -> None:
        self.assertEqual("[]", to_multi_crc_string(b""))
        self.assertEqual(
            "[0x0d4a1185, 0xdeadbeef]",
            to_multi_crc_string(int_to_bytes(0x0D4A1185) + int_to_bytes(0xDEADBEEF)),
        )
        with self.assertRaisesRegex(ValueError, "not a multiple of 4"):
            to_multi_crc_string(b"\x00" * 5)
