"""Read Holding Registers Result DTO.

Data Transfer Object representing the outcome of one read exchange.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.value_objects import ErrorKind


@dataclass
class ReadHoldingRegistersResult:
    """Result of a read holding registers exchange.

    Attributes:
        success: Whether the response passed every check
        registers: Decoded register values in wire order (empty on failure)
        first_register: First register that was requested
        error_kind: Which check rejected the response, None on success
        error: Error message if failed
        exception_code: Modbus exception code for device exceptions
    """

    success: bool
    registers: List[int] = field(default_factory=list)
    first_register: int = 0
    error_kind: Optional[ErrorKind] = None
    error: str = ""
    exception_code: Optional[int] = None
