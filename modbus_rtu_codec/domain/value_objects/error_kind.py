"""Codec error kinds."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure reported by the response validator.

    Every codec exception carries one of these, and the read use case
    returns it in its result so callers can branch without catching.
    """

    CRC_MISMATCH = "crc_mismatch"
    UNIT_ADDRESS_MISMATCH = "unit_address_mismatch"
    MODBUS_EXCEPTION = "modbus_exception"
    FUNCTION_CODE_MISMATCH = "function_code_mismatch"
    MALFORMED_FRAME = "malformed_frame"
