"""Modbus protocol implementations.

This module contains implementations of the protocol layer interfaces
defined in the domain layer.
"""

from .modbus_crc16 import ModbusCRC16, crc16
from .modbus_rtu_protocol import ModbusRTUProtocol

__all__ = [
    "ModbusCRC16",
    "ModbusRTUProtocol",
    "crc16",
]
