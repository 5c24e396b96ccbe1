"""ITransport interface for transport layer implementations."""

from abc import ABC, abstractmethod


class ITransport(ABC):
    """Interface for transport layer implementations.

    The transport owns everything the codec does not: the serial port (or
    bridge), inter-frame silence, timeouts and any retry policy. The codec
    hands it a request frame and gets the raw reply back.

    Example:
        >>> response = await transport.send(command_bytes, timeout=1.0)
    """

    @abstractmethod
    async def send(self, data: bytes, timeout: float = 1.0) -> bytes:
        """Send a request frame and return the raw response frame.

        Args:
            data: Complete Modbus RTU frame including CRC
            timeout: Maximum time to wait for the response in seconds

        Returns:
            Response bytes as received, CRC included

        Raises:
            asyncio.TimeoutError: If no response within timeout period
            OSError: If the underlying port fails
        """

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if transport is currently able to send."""
