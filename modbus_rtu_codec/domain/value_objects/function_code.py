"""Modbus function codes."""

from enum import IntEnum

from ...const import FUNC_READ_HOLDING


class FunctionCode(IntEnum):
    """Modbus function codes understood by the codec.

    Error responses echo the function code with EXCEPTION_FLAG set; see
    ModbusFrame.is_error.
    """

    READ_HOLDING_REGISTERS = FUNC_READ_HOLDING
