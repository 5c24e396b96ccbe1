"""Fake transport for testing without a serial line.

This fake implements ITransport interface for testing.
"""

from typing import List, Optional, Tuple

from modbus_rtu_codec.domain.interfaces import ITransport


class FakeTransport(ITransport):
    """Fake serial transport for testing.

    This fake allows tests to control responses without real hardware.
    It records every frame sent and can simulate a timeout.

    Attributes:
        _connected: Whether transport is connected
        _responses: Predefined command→response mappings
        _calls: History of send() calls
        _timeouts: History of timeout values passed to send()
        _fail_next: Exception the next send() should raise, if any

    Example:
        >>> transport = FakeTransport()
        >>> transport.add_response(b'\\x01\\x03', b'\\x01\\x03\\x02...')
        >>> response = await transport.send(b'\\x01\\x03...')
        >>> assert len(response) > 0
    """

    def __init__(self, connected: bool = True):
        """Initialize fake transport."""
        self._connected = connected
        self._responses: List[Tuple[bytes, bytes]] = []
        self._calls: List[bytes] = []
        self._timeouts: List[float] = []
        self._fail_next: Optional[Exception] = None

    async def send(self, data: bytes, timeout: float = 1.0) -> bytes:
        """Simulate sending data and receiving response.

        Raises:
            OSError: If not connected
            Exception: Whatever fail_next_send() configured
            ValueError: If no response configured for command
        """
        if not self._connected:
            raise OSError("Port not open")

        self._calls.append(data)
        self._timeouts.append(timeout)

        if self._fail_next is not None:
            err, self._fail_next = self._fail_next, None
            raise err

        # Find matching response
        for cmd_prefix, response in self._responses:
            if data.startswith(cmd_prefix):
                return response

        raise ValueError(f"No response configured for command: {data.hex()}")

    @property
    def is_connected(self) -> bool:
        """Check if connected."""
        return self._connected

    # Test helper methods

    def add_response(self, command_prefix: bytes, response: bytes) -> None:
        """Add predefined response for commands starting with command_prefix."""
        self._responses.append((command_prefix, response))

    def get_calls(self) -> List[bytes]:
        """Get history of send() calls."""
        return self._calls.copy()

    def get_timeouts(self) -> List[float]:
        """Get timeout values passed to send()."""
        return self._timeouts.copy()

    def fail_next_send(self, error: Optional[Exception] = None) -> None:
        """Make next send() raise error (TimeoutError by default)."""
        self._fail_next = error or TimeoutError("Simulated timeout")

    def disconnect(self) -> None:
        """Simulate the port going away."""
        self._connected = False
