"""Pytest configuration and fixtures for Modbus RTU codec tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import modbus_rtu_codec and tests.doubles
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from modbus_rtu_codec.infrastructure.protocol import ModbusCRC16, ModbusRTUProtocol
from tests.doubles import FakeTransport

UNIT_ADDRESS = 0x01


@pytest.fixture
def crc() -> ModbusCRC16:
    """Create CRC calculator."""
    return ModbusCRC16()


@pytest.fixture
def protocol(crc) -> ModbusRTUProtocol:
    """Create protocol instance for unit 1."""
    return ModbusRTUProtocol(crc, unit_address=UNIT_ADDRESS)


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Create a connected fake transport."""
    return FakeTransport()
