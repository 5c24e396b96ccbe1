"""Tests for protocol constants and message lookup."""

import pytest

from modbus_rtu_codec.const import (
    MODBUS_EXCEPTION_MESSAGES,
    format_modbus_error,
    get_exception_message,
)


class TestExceptionMessages:
    """Test the exception message table."""

    def test_table_has_eight_entries(self):
        """Verify the table covers codes 0-7."""
        assert len(MODBUS_EXCEPTION_MESSAGES) == 8

    def test_table_is_immutable(self):
        """Verify the table cannot be modified."""
        with pytest.raises(TypeError):
            MODBUS_EXCEPTION_MESSAGES[0] = "changed"

    @pytest.mark.parametrize(
        "code,message",
        [
            (0, "Unknown error"),
            (1, "Illegal function"),
            (2, "Illegal data address"),
            (3, "Illegal data value"),
            (4, "Slave device failure"),
            (5, "Acknowledge"),
            (6, "Slave device busy"),
            (7, "Memory Parity Error"),
            (8, "Unknown error"),
            (255, "Unknown error"),
            (-1, "Unknown error"),
        ],
    )
    def test_get_exception_message(self, code, message):
        """Verify lookup for table and out-of-table codes."""
        assert get_exception_message(code) == message

    def test_format_modbus_error(self):
        """Verify log formatting includes decimal, hex and message."""
        assert format_modbus_error(4) == (
            "Modbus exception 4 (0x04): Slave device failure"
        )
