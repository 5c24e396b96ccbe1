"""Custom exceptions for the Modbus RTU codec.

This module defines the error taxonomy of the response validator. Every
error is terminal for the call that raised it: the codec never retries
and never reinterprets a rejected buffer.

Each class carries an ``ErrorKind`` in ``kind`` plus the structured
values (expected vs. actual, exception code) a caller needs to log or
act on the failure.
"""

from .value_objects.error_kind import ErrorKind


class ModbusCodecError(Exception):
    """Base class for all response validation failures."""

    kind: ErrorKind


class CrcMismatchError(ModbusCodecError):
    """Trailing CRC-16 does not match the CRC of the preceding bytes.

    Example:
        >>> raise CrcMismatchError(received=0x1234, calculated=0xCDC5)
    """

    kind = ErrorKind.CRC_MISMATCH

    def __init__(self, received: int, calculated: int) -> None:
        self.received = received
        self.calculated = calculated
        super().__init__(
            f"CRC mismatch: received=0x{received:04X}, calculated=0x{calculated:04X}"
        )


class UnitAddressMismatchError(ModbusCodecError):
    """Response came from a different unit than the one addressed."""

    kind = ErrorKind.UNIT_ADDRESS_MISMATCH

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected unit address {expected} but received {actual}")


class ModbusExceptionError(ModbusCodecError):
    """Device answered with an exception response.

    Attributes:
        unit_address: Unit that reported the exception
        function_code: Function code that was requested (without 0x80 bit)
        code: Exception code from the response
        message: Entry from the exception message table
    """

    kind = ErrorKind.MODBUS_EXCEPTION

    def __init__(
        self, unit_address: int, function_code: int, code: int, message: str
    ) -> None:
        self.unit_address = unit_address
        self.function_code = function_code
        self.code = code
        self.message = message
        super().__init__(f"Modbus exception {code}: {message}")


class FunctionCodeMismatchError(ModbusCodecError):
    """Response function code differs from the requested one."""

    kind = ErrorKind.FUNCTION_CODE_MISMATCH

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected function 0x{expected:02X} but received 0x{actual:02X}"
        )


class MalformedFrameError(ModbusCodecError):
    """Buffer is too short or its byte count does not fit the frame."""

    kind = ErrorKind.MALFORMED_FRAME

    def __init__(self, reason: str, length: int) -> None:
        self.reason = reason
        self.length = length
        super().__init__(f"Malformed frame ({length} bytes): {reason}")
