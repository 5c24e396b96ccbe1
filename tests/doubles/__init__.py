"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

Example:
    >>> from tests.doubles import FakeTransport, read_response
    >>> transport = FakeTransport()
    >>> transport.add_response(b"\\x01\\x03", read_response(1, [486, 250]))
    >>> response = await transport.send(command)
"""

from .fake_transport import FakeTransport
from .frames import corrupt_crc, exception_response, read_response, with_crc

__all__ = [
    "FakeTransport",
    "corrupt_crc",
    "exception_response",
    "read_response",
    "with_crc",
]
