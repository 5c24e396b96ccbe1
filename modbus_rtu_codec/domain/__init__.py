"""Domain layer for the Modbus RTU codec.

This layer contains:
- Interfaces: contracts for CRC engines, protocols and transports
- Value Objects: immutable frame and code primitives
- Exceptions: the response validation error taxonomy

The domain layer has no dependencies outside the standard library.
"""
