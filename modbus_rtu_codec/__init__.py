"""Modbus RTU holding register codec.

Master-side codec for Modbus function 0x03 (read holding registers):
request frame building, CRC-16, and response validation/decoding.
Serial I/O, timing and retries belong to the transport supplied by the
caller.
"""

from .application.use_cases import (
    ReadHoldingRegistersResult,
    ReadHoldingRegistersUseCase,
)
from .config import CodecConfig, build_protocol, build_read_use_case, load_codec_config
from .domain.exceptions import (
    CrcMismatchError,
    FunctionCodeMismatchError,
    MalformedFrameError,
    ModbusCodecError,
    ModbusExceptionError,
    UnitAddressMismatchError,
)
from .domain.interfaces import ICRC, IProtocol, ITransport
from .domain.value_objects import ErrorKind, ExceptionCode, FunctionCode, ModbusFrame
from .infrastructure.protocol import ModbusCRC16, ModbusRTUProtocol, crc16

__all__ = [
    "CodecConfig",
    "CrcMismatchError",
    "ErrorKind",
    "ExceptionCode",
    "FunctionCode",
    "FunctionCodeMismatchError",
    "ICRC",
    "IProtocol",
    "ITransport",
    "MalformedFrameError",
    "ModbusCRC16",
    "ModbusCodecError",
    "ModbusExceptionError",
    "ModbusFrame",
    "ModbusRTUProtocol",
    "ReadHoldingRegistersResult",
    "ReadHoldingRegistersUseCase",
    "UnitAddressMismatchError",
    "build_protocol",
    "build_read_use_case",
    "crc16",
    "load_codec_config",
]
