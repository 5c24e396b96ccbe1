"""Modbus RTU protocol implementation.

This module implements the master side of Modbus function 0x03 (read
holding registers): building request frames and validating/decoding the
responses. It never touches the wire.

Response validation order is fixed: CRC, unit address, exception flag,
function code. When several checks would fail, the first one in that
order is the error reported.
"""

import logging
import struct
from typing import Dict, List

from ...const import (
    CRC_SIZE,
    EXCEPTION_FLAG,
    MAX_READ_REGISTERS,
    MAX_REGISTER,
    MAX_UNIT_ADDRESS,
    MIN_EXCEPTION_FRAME_SIZE,
    MIN_REGISTER,
    MIN_UNIT_ADDRESS,
    UNKNOWN_EXCEPTION_MESSAGE,
    format_modbus_error,
)
from ...domain.exceptions import (
    CrcMismatchError,
    FunctionCodeMismatchError,
    MalformedFrameError,
    ModbusExceptionError,
    UnitAddressMismatchError,
)
from ...domain.interfaces import ICRC, IProtocol
from ...domain.value_objects import FunctionCode, ModbusFrame

_LOGGER = logging.getLogger(__name__)


class ModbusRTUProtocol(IProtocol):
    """Modbus RTU read holding registers codec.

    This implementation handles:
    - Building 0x03 request frames with CRC
    - CRC validation of responses
    - Unit address matching
    - Exception response detection (function code with 0x80 bit set)
    - Multi-register response parsing

    Attributes:
        crc: CRC calculator implementation
        unit_address: Modbus unit address (0-255), fixed for the instance

    Example:
        >>> from .modbus_crc16 import ModbusCRC16
        >>> protocol = ModbusRTUProtocol(ModbusCRC16(), unit_address=0x01)
        >>> command = protocol.request_holding_registers(0x0000, 0x0009)
        >>> command.hex()
        '01030000000ac5cd'
    """

    def __init__(self, crc: ICRC, unit_address: int):
        """Initialize Modbus RTU protocol.

        Args:
            crc: CRC calculator implementation
            unit_address: Address of the target unit (0-255)

        Raises:
            ValueError: If unit_address is out of range
        """
        if not MIN_UNIT_ADDRESS <= unit_address <= MAX_UNIT_ADDRESS:
            raise ValueError(
                f"Unit address must be {MIN_UNIT_ADDRESS}-{MAX_UNIT_ADDRESS}, "
                f"got {unit_address}"
            )
        self._crc = crc
        self._unit_address = unit_address

    @property
    def unit_address(self) -> int:
        """Unit address every response is checked against."""
        return self._unit_address

    def request_holding_registers(self, first_register: int, last_register: int) -> bytes:
        """Build a read holding registers (0x03) request for an inclusive range.

        Args:
            first_register: First register address (0x0000 - 0xFFFF)
            last_register: Last register address, inclusive (0x0000 - 0xFFFF)

        Returns:
            8-byte Modbus RTU frame

        Raises:
            ValueError: If either address is out of range, the range is
                reversed, or it spans more than 125 registers

        Example:
            >>> protocol = ModbusRTUProtocol(ModbusCRC16(), unit_address=1)
            >>> cmd = protocol.request_holding_registers(0x0100, 0x0101)
            >>> assert cmd[4:6] == b"\\x00\\x02"
        """
        for name, value in (
            ("First register", first_register),
            ("Last register", last_register),
        ):
            if not MIN_REGISTER <= value <= MAX_REGISTER:
                raise ValueError(f"{name} must be 0-65535, got {value}")

        if last_register < first_register:
            raise ValueError(
                f"Last register 0x{last_register:04X} is before "
                f"first register 0x{first_register:04X}"
            )

        return self.build_read_command(
            first_register, last_register - first_register + 1
        )

    def build_read_command(self, start_address: int, count: int) -> bytes:
        """Build Modbus Read Holding Registers (0x03) command.

        Args:
            start_address: Starting register address (0x0000 - 0xFFFF)
            count: Number of consecutive registers to read (1-125)

        Returns:
            Complete Modbus RTU frame ready to send
            Format: [Unit][0x03][Addr_H][Addr_L][Count_H][Count_L][CRC_L][CRC_H]

        Raises:
            ValueError: If address or count is out of valid range
        """
        if not MIN_REGISTER <= start_address <= MAX_REGISTER:
            raise ValueError(f"Register address must be 0-65535, got {start_address}")
        if not 1 <= count <= MAX_READ_REGISTERS:
            raise ValueError(
                f"Register count must be 1-{MAX_READ_REGISTERS}, got {count}"
            )
        if start_address + count - 1 > MAX_REGISTER:
            raise ValueError(
                f"Read of {count} registers from 0x{start_address:04X} "
                f"runs past 0x{MAX_REGISTER:04X}"
            )

        # Build frame: Unit + Function + Address (BE) + Count (BE)
        data = struct.pack(
            ">BBHH",
            self._unit_address,
            FunctionCode.READ_HOLDING_REGISTERS,
            start_address,
            count,
        )

        # Calculate and append CRC (little-endian)
        frame = data + struct.pack("<H", self._crc.calculate(data))

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Built read command: unit=%d, addr=0x%04X, count=%d, frame=%s",
                self._unit_address,
                start_address,
                count,
                frame.hex(),
            )

        return frame

    def fetch_holding_registers(self, response: bytes) -> List[int]:
        """Validate a read holding registers response and return its values.

        Args:
            response: Raw response bytes from the transport

        Returns:
            Register values (0-65535) in wire order

        Raises:
            MalformedFrameError: Buffer is too short for its fields
            CrcMismatchError: Trailing CRC does not match
            UnitAddressMismatchError: Response came from another unit
            ModbusExceptionError: Device returned an exception response
            FunctionCodeMismatchError: Response is for another function
        """
        frame = self._validate_response(
            FunctionCode.READ_HOLDING_REGISTERS, response
        )
        return self._decode_read_response(frame)

    def decode_response(self, response: bytes) -> Dict[int, int]:
        """Decode a read response into register offset-value pairs.

        Same validation as fetch_holding_registers; offsets are relative
        to the first requested register.

        Returns:
            Dictionary mapping register offset to value
            Example: {0: 486, 1: 250}
        """
        return dict(enumerate(self.fetch_holding_registers(response)))

    def _validate_response(self, function_code: int, response: bytes) -> ModbusFrame:
        """Run the response checks in order and return the parsed frame."""
        if len(response) < CRC_SIZE:
            _LOGGER.warning("Response too short for CRC: %d bytes", len(response))
            raise MalformedFrameError("too short to carry a CRC", len(response))

        received_crc = struct.unpack("<H", response[-CRC_SIZE:])[0]
        calculated_crc = self._crc.calculate(response[:-CRC_SIZE])

        if received_crc != calculated_crc:
            _LOGGER.warning(
                "CRC mismatch: received=0x%04X, calculated=0x%04X",
                received_crc,
                calculated_crc,
            )
            raise CrcMismatchError(received_crc, calculated_crc)

        # A 2-byte frame is all CRC, but byte 0 still names the unit
        if response[0] != self._unit_address:
            _LOGGER.warning(
                "Unit address mismatch: expected=%d, received=%d",
                self._unit_address,
                response[0],
            )
            raise UnitAddressMismatchError(self._unit_address, response[0])

        if len(response) < ModbusFrame.MIN_SIZE:
            _LOGGER.warning("Response too short: %d bytes", len(response))
            raise MalformedFrameError("missing function code", len(response))

        frame = ModbusFrame.from_bytes(response)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Decoded frame: %s", frame)

        if (
            len(response) >= MIN_EXCEPTION_FRAME_SIZE
            and frame.is_error
            and frame.function_code & ~EXCEPTION_FLAG == function_code
        ):
            error_code = frame.data[0]
            exception_code = frame.exception_code
            _LOGGER.debug(
                "Modbus exception: func=0x%02X, %s",
                frame.function_code,
                format_modbus_error(error_code),
            )
            raise ModbusExceptionError(
                unit_address=frame.slave_id,
                function_code=function_code,
                code=error_code,
                message=(
                    exception_code.message
                    if exception_code is not None
                    else UNKNOWN_EXCEPTION_MESSAGE
                ),
            )

        if frame.function_code != function_code:
            _LOGGER.warning(
                "Function code mismatch: expected=0x%02X, received=0x%02X",
                function_code,
                frame.function_code,
            )
            raise FunctionCodeMismatchError(function_code, frame.function_code)

        return frame

    def _decode_read_response(self, frame: ModbusFrame) -> List[int]:
        """Decode read holding registers response.

        Frame format: [Unit][Func][ByteCount][Data...][CRC]
        """
        if not frame.data:
            raise MalformedFrameError("missing byte count", len(frame.to_bytes()))

        byte_count = frame.data[0]
        payload = frame.data[1:]

        if byte_count % 2 or byte_count > len(payload):
            _LOGGER.warning(
                "Byte count %d does not fit %d data bytes", byte_count, len(payload)
            )
            raise MalformedFrameError(
                f"byte count {byte_count} does not fit {len(payload)} data bytes",
                len(frame.to_bytes()),
            )

        register_count = byte_count // 2
        values = list(struct.unpack(f">{register_count}H", payload[:byte_count]))

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Decoded read response: %d registers, values=%s",
                register_count,
                values,
            )

        return values
