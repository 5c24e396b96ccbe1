"""Wiring helpers that turn a CodecConfig into ready-to-use objects."""

from ..application.use_cases import ReadHoldingRegistersUseCase
from ..domain.interfaces import ITransport
from ..infrastructure.protocol import ModbusCRC16, ModbusRTUProtocol
from .codec_config import CodecConfig


def build_protocol(config: CodecConfig) -> ModbusRTUProtocol:
    """Create a protocol for the configured unit."""
    return ModbusRTUProtocol(ModbusCRC16(), unit_address=config.unit_address)


def build_read_use_case(
    config: CodecConfig, transport: ITransport
) -> ReadHoldingRegistersUseCase:
    """Create a read use case bound to a transport."""
    return ReadHoldingRegistersUseCase(
        transport,
        build_protocol(config),
        response_timeout=config.response_timeout,
    )
