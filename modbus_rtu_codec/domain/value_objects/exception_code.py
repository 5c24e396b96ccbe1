"""Modbus exception codes."""

from enum import IntEnum

from ...const import get_exception_message


class ExceptionCode(IntEnum):
    """Modbus exception codes with human-readable descriptions.

    Codes 0-7 match the indices of MODBUS_EXCEPTION_MESSAGES. Devices may
    send other values; those are not members and map to "Unknown error".
    """

    UNKNOWN = 0x00
    ILLEGAL_FUNCTION = 0x01
    ILLEGAL_DATA_ADDRESS = 0x02
    ILLEGAL_DATA_VALUE = 0x03
    SLAVE_DEVICE_FAILURE = 0x04
    ACKNOWLEDGE = 0x05
    SLAVE_DEVICE_BUSY = 0x06
    MEMORY_PARITY_ERROR = 0x07

    @property
    def message(self) -> str:
        """Message from the exception table."""
        return get_exception_message(self.value)
