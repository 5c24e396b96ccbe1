"""Error handling decorator for transport exchanges."""

import asyncio
import logging
from functools import wraps
from typing import Any, Callable, Optional


def handle_transport_errors(
    operation_name: str,
    logger: Optional[logging.Logger] = None,
    reraise: bool = True,
    default_return: Any = None,
):
    """Log failures of an awaited transport exchange.

    The codec itself never runs under this decorator; its errors are typed
    and handled by the use case.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)
        reraise: Whether to re-raise exception after logging
        default_return: Value to return on error if not re-raising

    Example:
        @handle_transport_errors("Read holding registers", reraise=True)
        async def _exchange(self, command: bytes) -> bytes:
            return await self._transport.send(command, timeout=self._timeout)
    """

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except asyncio.TimeoutError as err:
                timeout_val = kwargs.get("timeout", "unknown")
                log.warning(
                    "%s timed out after %ss: %s",
                    operation_name,
                    timeout_val,
                    err,
                )
                if reraise:
                    raise
                return default_return
            except OSError as err:
                log.error("%s port error: %s", operation_name, err)
                if reraise:
                    raise
                return default_return
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                if reraise:
                    raise
                return default_return

        return async_wrapper

    return decorator
