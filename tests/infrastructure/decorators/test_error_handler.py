"""Tests for error handling decorator."""

import asyncio
import logging

import pytest

from modbus_rtu_codec.infrastructure.decorators.error_handler import (
    handle_transport_errors,
)


class TestHandleTransportErrors:
    """Test error handling decorator on coroutines."""

    @pytest.mark.asyncio
    async def test_successful_async_execution(self):
        """Test decorator with successful async function."""

        @handle_transport_errors("test operation")
        async def test_func():
            return b"\x01\x03"

        assert await test_func() == b"\x01\x03"

    @pytest.mark.asyncio
    async def test_timeout_error_reraise(self, caplog):
        """Test timeout error is logged as warning and re-raised."""

        @handle_transport_errors("test operation", reraise=True)
        async def test_func(timeout=1.0):
            raise asyncio.TimeoutError("timeout")

        with caplog.at_level(logging.WARNING):
            with pytest.raises(asyncio.TimeoutError):
                await test_func(timeout=0.5)

        assert "test operation timed out after 0.5s" in caplog.text

    @pytest.mark.asyncio
    async def test_timeout_error_no_reraise(self):
        """Test timeout error with reraise=False."""

        @handle_transport_errors(
            "test operation", reraise=False, default_return=b""
        )
        async def test_func():
            raise asyncio.TimeoutError("timeout")

        assert await test_func() == b""

    @pytest.mark.asyncio
    async def test_port_error_logged(self, caplog):
        """Test OSError from the port is logged and re-raised."""

        @handle_transport_errors("test operation")
        async def test_func():
            raise OSError("device disconnected")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(OSError):
                await test_func()

        assert "port error" in caplog.text

    @pytest.mark.asyncio
    async def test_generic_exception_logged_with_traceback(self, caplog):
        """Test unexpected exceptions are logged with exc_info."""

        @handle_transport_errors("test operation", reraise=False)
        async def test_func():
            raise RuntimeError("test error")

        with caplog.at_level(logging.ERROR):
            await test_func()

        assert "unexpected error" in caplog.text
        assert caplog.records[-1].exc_info is not None


    @pytest.mark.asyncio
    async def test_port_error_default_return(self):
        """Test OSError with reraise=False returns default."""

        @handle_transport_errors(
            "test operation", reraise=False, default_return=b""
        )
        async def test_func():
            raise OSError("device disconnected")

        assert await test_func() == b""

    @pytest.mark.asyncio
    async def test_custom_logger(self, caplog):
        """Test an explicit logger receives the records."""
        logger = logging.getLogger("custom.transport")

        @handle_transport_errors("test operation", logger=logger)
        async def test_func():
            raise OSError("device disconnected")

        with caplog.at_level(logging.ERROR, logger="custom.transport"):
            with pytest.raises(OSError):
                await test_func()

        assert caplog.records[-1].name == "custom.transport"

    def test_preserves_function_name(self):
        """Test functools.wraps keeps metadata."""

        @handle_transport_errors("test operation")
        async def exchange():
            """Docstring."""

        assert exchange.__name__ == "exchange"
        assert exchange.__doc__ == "Docstring."
