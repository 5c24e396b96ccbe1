"""Use cases for the Modbus RTU codec.

Each use case has a single public method (execute), takes its
collaborators by injection and returns a result DTO.
"""

from .read_holding_registers_result import ReadHoldingRegistersResult
from .read_holding_registers_use_case import ReadHoldingRegistersUseCase

__all__ = [
    "ReadHoldingRegistersResult",
    "ReadHoldingRegistersUseCase",
]
