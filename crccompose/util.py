import struct
from typing import Union

CRC_FORMAT = ">L"
CRC_SIZE = struct.calcsize(CRC_FORMAT)

Buffer = Union[bytes, bytearray, memoryview]


def int_to_bytes(value: int) -> bytes:
    return struct.pack(CRC_FORMAT, value)


def read_int(buf: Buffer, offset: int) -> int:
    if offset < 0:
        raise ValueError(f"Negative offset {offset}")
    data = buf[offset : offset + CRC_SIZE]
    if len(data) != CRC_SIZE:
        raise ValueError(f"Short read: wanted {CRC_SIZE} but got {len(data)}")
    return struct.unpack(CRC_FORMAT, data)[0]  # type: ignore


def to_single_crc_string(buf: Buffer) -> str:
    """
    Formats exactly one big-endian CRC as `0x0123abcd`.
    """
    if len(buf) != CRC_SIZE:
        raise ValueError(f"Wanted {CRC_SIZE} bytes for a single crc but got {len(buf)}")
    return "0x%08x" % read_int(buf, 0)


def to_multi_crc_string(buf: Buffer) -> str:
    """
    Formats concatenated big-endian CRCs as `[0x0123abcd, 0x4567cdef]`.
    """
    if len(buf) % CRC_SIZE != 0:
        raise ValueError(f"Length {len(buf)} is not a multiple of {CRC_SIZE}")
    return (
        "["
        + ", ".join(
            "0x%08x" % read_int(buf, i) for i in range(0, len(buf), CRC_SIZE)
        )
        + "]"
    )
