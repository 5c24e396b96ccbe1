"""ModbusFrame value object.

Represents a complete Modbus RTU frame split into its fields.
"""

from dataclasses import dataclass
from typing import Optional

from ...const import EXCEPTION_FLAG
from .exception_code import ExceptionCode


@dataclass(frozen=True)
class ModbusFrame:
    """Immutable Modbus RTU frame.

    Can represent both requests and responses. The function code is kept
    as a plain int because a device may answer with any byte there.

    Modbus RTU Frame Structure:
        Request:  [Unit][Function][Data...][CRC-16]
        Response: [Unit][Function][Data...][CRC-16]
        Error:    [Unit][Function+0x80][Exception Code][CRC-16]

    Attributes:
        slave_id: Unit address (0-255)
        function_code: Function code byte as received
        data: Frame data bytes between function code and CRC
        crc: CRC-16 field as read from the wire (little-endian)

    Example:
        >>> frame = ModbusFrame.from_bytes(bytes([0x01, 0x83, 0x02, 0xC0, 0xF1]))
        >>> assert frame.is_error
        >>> assert frame.exception_code == ExceptionCode.ILLEGAL_DATA_ADDRESS
    """

    slave_id: int
    function_code: int
    data: bytes
    crc: int

    MIN_SIZE = 4  # unit + function + CRC

    def __post_init__(self) -> None:
        """Validate frame components.

        Raises:
            ValueError: If any component is out of range
            TypeError: If data is not bytes
        """
        if not isinstance(self.slave_id, int) or not (0 <= self.slave_id <= 0xFF):
            raise ValueError(f"Slave ID must be 0-255, got {self.slave_id}")

        if not isinstance(self.function_code, int) or not (
            0 <= self.function_code <= 0xFF
        ):
            raise ValueError(
                f"Function code must be 0-255, got {self.function_code}"
            )

        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError(f"Data must be bytes, got {type(self.data).__name__}")

        if not isinstance(self.crc, int) or not (0 <= self.crc <= 0xFFFF):
            raise ValueError(f"CRC must be 0-65535, got {self.crc}")

    @property
    def is_error(self) -> bool:
        """Check if frame is an error response (0x80 bit set in function code)."""
        return (self.function_code & EXCEPTION_FLAG) == EXCEPTION_FLAG

    @property
    def exception_code(self) -> Optional[ExceptionCode]:
        """Get exception code if frame is an error response.

        Returns:
            ExceptionCode for codes 0-7, None for non-error frames or codes
            outside the table
        """
        if self.is_error and len(self.data) >= 1:
            try:
                return ExceptionCode(self.data[0])
            except ValueError:
                return None
        return None

    def to_bytes(self) -> bytes:
        """Convert frame to raw bytes.

        Example:
            >>> frame = ModbusFrame(0x01, 0x03, bytes([0x01, 0x00, 0x00, 0x01]), 0xF685)
            >>> raw = frame.to_bytes()
            >>> assert raw == bytes([0x01, 0x03, 0x01, 0x00, 0x00, 0x01, 0x85, 0xF6])
        """
        crc_bytes = self.crc.to_bytes(2, byteorder="little")  # CRC is little-endian
        return bytes([self.slave_id, self.function_code]) + bytes(self.data) + crc_bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "ModbusFrame":
        """Split raw bytes into frame fields.

        No CRC check happens here; the protocol does that first.

        Args:
            data: Raw frame bytes

        Returns:
            Parsed ModbusFrame

        Raises:
            ValueError: If data is shorter than unit + function + CRC
        """
        if len(data) < cls.MIN_SIZE:
            raise ValueError(
                f"Modbus frame too short, minimum {cls.MIN_SIZE} bytes, got {len(data)}"
            )

        return cls(
            slave_id=data[0],
            function_code=data[1],
            data=bytes(data[2:-2]),
            crc=int.from_bytes(data[-2:], byteorder="little"),
        )

    def __str__(self) -> str:
        """String representation for logging."""
        error_str = " (ERROR)" if self.is_error else ""
        return (
            f"ModbusFrame(slave={self.slave_id:#04x}, "
            f"func={self.function_code:#04x}{error_str}, "
            f"data={len(self.data)} bytes)"
        )

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"ModbusFrame(slave_id={self.slave_id:#04x}, "
            f"function_code={self.function_code:#04x}, "
            f"data={bytes(self.data).hex()}, crc={self.crc:#06x})"
        )
