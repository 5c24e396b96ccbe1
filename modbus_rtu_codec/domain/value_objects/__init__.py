"""Value Objects for the Modbus RTU codec domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Validate their invariants at construction
"""

from .error_kind import ErrorKind
from .exception_code import ExceptionCode
from .function_code import FunctionCode
from .modbus_frame import ModbusFrame

__all__ = [
    "ErrorKind",
    "ExceptionCode",
    "FunctionCode",
    "ModbusFrame",
]
