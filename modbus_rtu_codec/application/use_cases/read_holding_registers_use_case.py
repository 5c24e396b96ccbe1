"""ReadHoldingRegistersUseCase for one request/response exchange.

This use case orchestrates a single read:
1. Build the 0x03 request frame
2. Hand it to the transport and await the reply
3. Validate and decode the reply
4. Report the outcome as a result value

No retry or backoff happens here. The transport (or the caller)
owns that policy.
"""

import logging

from ...const import DEFAULT_RESPONSE_TIMEOUT
from ...domain.exceptions import ModbusCodecError, ModbusExceptionError
from ...domain.interfaces import IProtocol, ITransport
from ...infrastructure.decorators import handle_transport_errors
from .read_holding_registers_result import ReadHoldingRegistersResult

_LOGGER = logging.getLogger(__name__)


class ReadHoldingRegistersUseCase:
    """Use case for reading a range of holding registers.

    Dependencies (injected):
    - transport: Moves raw frames to and from the device
    - protocol: Builds requests and validates/decodes responses

    Example:
        >>> use_case = ReadHoldingRegistersUseCase(transport, protocol)
        >>> result = await use_case.execute(0x0000, 0x0009)
        >>> if result.success:
        ...     print(result.registers)
        ... elif result.error_kind is ErrorKind.MODBUS_EXCEPTION:
        ...     print(f"Device refused: {result.error}")
    """

    def __init__(
        self,
        transport: ITransport,
        protocol: IProtocol,
        response_timeout: float = DEFAULT_RESPONSE_TIMEOUT,
    ):
        """Initialize use case with dependencies.

        Args:
            transport: Communication transport
            protocol: Modbus protocol implementation
            response_timeout: Seconds the transport waits for a reply
        """
        self._transport = transport
        self._protocol = protocol
        self._response_timeout = response_timeout

    async def execute(
        self, first_register: int, last_register: int
    ) -> ReadHoldingRegistersResult:
        """Read the inclusive register range first_register..last_register.

        Returns:
            ReadHoldingRegistersResult with registers or the rejecting error kind

        Raises:
            ValueError: If the register range is invalid
            asyncio.TimeoutError: If the transport gets no reply in time
            OSError: If the transport fails
        """
        command = self._protocol.request_holding_registers(first_register, last_register)

        response = await self._exchange(command, timeout=self._response_timeout)

        try:
            registers = self._protocol.fetch_holding_registers(response)
        except ModbusExceptionError as err:
            _LOGGER.error(
                "Unit %d refused read of 0x%04X-0x%04X: %s",
                self._protocol.unit_address,
                first_register,
                last_register,
                err,
            )
            return ReadHoldingRegistersResult(
                success=False,
                first_register=first_register,
                error_kind=err.kind,
                error=err.message,
                exception_code=err.code,
            )
        except ModbusCodecError as err:
            _LOGGER.error(
                "Invalid response to read of 0x%04X-0x%04X: %s",
                first_register,
                last_register,
                err,
            )
            return ReadHoldingRegistersResult(
                success=False,
                first_register=first_register,
                error_kind=err.kind,
                error=str(err),
            )

        _LOGGER.debug(
            "Read %d registers from 0x%04X", len(registers), first_register
        )
        return ReadHoldingRegistersResult(
            success=True,
            registers=registers,
            first_register=first_register,
        )

    @handle_transport_errors("Read holding registers exchange")
    async def _exchange(self, command: bytes, timeout: float) -> bytes:
        return await self._transport.send(command, timeout=timeout)
