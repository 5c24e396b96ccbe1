"""Constants for the Modbus RTU holding register codec.

Wire-level constants only. Nothing in here is mutable at runtime.
"""

from __future__ import annotations

# Unit (slave) addresses
MIN_UNIT_ADDRESS = 0
MAX_UNIT_ADDRESS = 255
DEFAULT_UNIT_ADDRESS = 1

# Modbus function codes
FUNC_READ_HOLDING = 0x03
EXCEPTION_FLAG = 0x80

# Register addressing
MIN_REGISTER = 0x0000
MAX_REGISTER = 0xFFFF
MAX_READ_REGISTERS = 125  # Modbus Application Protocol V1.1b3, 6.3

# Frame sizes (bytes)
CRC_SIZE = 2
MIN_EXCEPTION_FRAME_SIZE = 5  # unit + function + code + CRC

# CRC-16/MODBUS parameters
CRC16_INITIAL = 0xFFFF
CRC16_POLYNOMIAL = 0xA001

# Seconds the transport should wait for a reply
DEFAULT_RESPONSE_TIMEOUT = 1.0


# ============================================================================
# MODBUS EXCEPTION MESSAGES
# ============================================================================

# Indexed by exception code
MODBUS_EXCEPTION_MESSAGES = (
    "Unknown error",
    "Illegal function",
    "Illegal data address",
    "Illegal data value",
    "Slave device failure",
    "Acknowledge",
    "Slave device busy",
    "Memory Parity Error",
)

UNKNOWN_EXCEPTION_MESSAGE = MODBUS_EXCEPTION_MESSAGES[0]


def get_exception_message(code: int) -> str:
    """Look up the message for a Modbus exception code.

    Args:
        code: Exception code from byte 2 of an exception response

    Returns:
        Message from the table, or "Unknown error" for codes outside it
    """
    if 0 <= code < len(MODBUS_EXCEPTION_MESSAGES):
        return MODBUS_EXCEPTION_MESSAGES[code]
    return UNKNOWN_EXCEPTION_MESSAGE


def format_modbus_error(code: int) -> str:
    """Format an exception code for log output.

    Example:
        >>> format_modbus_error(2)
        'Modbus exception 2 (0x02): Illegal data address'
    """
    return f"Modbus exception {code} (0x{code:02X}): {get_exception_message(code)}"
