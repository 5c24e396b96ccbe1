"""IProtocol interface for the Modbus RTU holding register codec."""

from abc import ABC, abstractmethod
from typing import List


class IProtocol(ABC):
    """Interface for the master-side read holding registers codec.

    The protocol builds request frames and validates/decodes response
    frames. It never touches the wire; a transport moves the bytes.

    Modbus RTU Frame Structure:
        Request:  [Unit][0x03][Start Addr][Count][CRC-16]
        Response: [Unit][0x03][Byte Count][Data...][CRC-16]
        Error:    [Unit][0x83][Error Code][CRC-16]

    Example:
        >>> protocol = ModbusRTUProtocol(ModbusCRC16(), unit_address=0x01)
        >>> command = protocol.request_holding_registers(0x0000, 0x0009)
        >>> response = await transport.send(command)
        >>> registers = protocol.fetch_holding_registers(response)
    """

    @property
    @abstractmethod
    def unit_address(self) -> int:
        """Unit address every response is checked against."""

    @abstractmethod
    def request_holding_registers(self, first_register: int, last_register: int) -> bytes:
        """Build a read holding registers (0x03) request for an inclusive range.

        Args:
            first_register: First register address (0x0000 - 0xFFFF)
            last_register: Last register address, inclusive

        Returns:
            8-byte Modbus RTU frame
            Format: [unit][0x03][addr_hi][addr_lo][count_hi][count_lo][crc_lo][crc_hi]

        Raises:
            ValueError: If the range is invalid or spans more than 125 registers
        """

    @abstractmethod
    def fetch_holding_registers(self, response: bytes) -> List[int]:
        """Validate a read holding registers response and return its values.

        Checks run in order: CRC, unit address, exception flag, function
        code. The first failing check raises.

        Args:
            response: Raw response bytes from the transport

        Returns:
            Register values in wire order

        Raises:
            CrcMismatchError: Trailing CRC does not match
            UnitAddressMismatchError: Response came from another unit
            ModbusExceptionError: Device returned an exception response
            FunctionCodeMismatchError: Response is for another function
            MalformedFrameError: Buffer cannot hold the declared fields
        """
