"""Infrastructure layer for the Modbus RTU codec.

The infrastructure layer contains implementations of domain interfaces:
- Protocol implementations (Modbus RTU framing and CRC-16)
- Decorators shared by code that talks to a transport

Transports themselves are supplied by the application embedding the codec.
"""
