"""Helpers for building response frames in tests."""

import struct
from typing import Sequence

from modbus_rtu_codec.infrastructure.protocol import crc16


def with_crc(body: bytes) -> bytes:
    """Append the little-endian CRC-16 of body."""
    return body + struct.pack("<H", crc16(body))


def read_response(unit_address: int, values: Sequence[int]) -> bytes:
    """Build a well-formed 0x03 response carrying values."""
    body = bytes([unit_address, 0x03, len(values) * 2])
    body += struct.pack(f">{len(values)}H", *values)
    return with_crc(body)


def exception_response(unit_address: int, code: int, function_code: int = 0x03) -> bytes:
    """Build a well-formed exception response."""
    return with_crc(bytes([unit_address, function_code | 0x80, code]))


def corrupt_crc(frame: bytes) -> bytes:
    """Flip every bit of the last CRC byte."""
    return frame[:-1] + bytes([frame[-1] ^ 0xFF])
