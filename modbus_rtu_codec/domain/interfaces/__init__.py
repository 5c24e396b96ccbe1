"""Domain interfaces for the Modbus RTU codec.

This module defines the contracts (interfaces) that infrastructure
implementations must fulfill, so transports and CRC engines can be
swapped or faked without touching the codec logic.
"""

from .i_crc import ICRC
from .i_protocol import IProtocol
from .i_transport import ITransport

__all__ = [
    "ICRC",
    "IProtocol",
    "ITransport",
]
