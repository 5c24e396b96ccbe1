"""Application layer for the Modbus RTU codec.

This layer orchestrates the codec and an injected transport. It sits
between the caller and the domain/infrastructure layers.
"""
