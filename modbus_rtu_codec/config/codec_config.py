"""Codec configuration.

The codec needs very little: the unit address of the target device and
how long the transport should wait for a reply. Configuration can come
from a plain dict or a YAML file and is validated with voluptuous.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from ..const import (
    DEFAULT_RESPONSE_TIMEOUT,
    DEFAULT_UNIT_ADDRESS,
    MAX_UNIT_ADDRESS,
    MIN_UNIT_ADDRESS,
)

_LOGGER = logging.getLogger(__name__)

CONF_UNIT_ADDRESS = "unit_address"
CONF_RESPONSE_TIMEOUT = "response_timeout"

CODEC_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_UNIT_ADDRESS): vol.All(
            vol.Coerce(int), vol.Range(min=MIN_UNIT_ADDRESS, max=MAX_UNIT_ADDRESS)
        ),
        vol.Optional(
            CONF_RESPONSE_TIMEOUT, default=DEFAULT_RESPONSE_TIMEOUT
        ): vol.All(vol.Coerce(float), vol.Range(min=0, min_included=False)),
    }
)


@dataclass(frozen=True)
class CodecConfig:
    """Validated codec configuration.

    Attributes:
        unit_address: Address of the target unit (0-255)
        response_timeout: Seconds the transport waits for a reply
    """

    unit_address: int = DEFAULT_UNIT_ADDRESS
    response_timeout: float = DEFAULT_RESPONSE_TIMEOUT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CodecConfig:
        """Validate a raw mapping and build a config.

        Raises:
            ValueError: If the mapping does not match CODEC_CONFIG_SCHEMA
        """
        try:
            validated = CODEC_CONFIG_SCHEMA(data)
        except vol.Invalid as err:
            raise ValueError(f"Invalid codec configuration: {err}") from err

        return cls(
            unit_address=validated[CONF_UNIT_ADDRESS],
            response_timeout=validated[CONF_RESPONSE_TIMEOUT],
        )


def load_codec_config(path: str | Path) -> CodecConfig:
    """Load and validate codec configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated CodecConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is invalid, empty or fails validation
    """
    config_file = Path(path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        raw = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ValueError(f"Invalid YAML: {err}") from err

    if not raw:
        raise ValueError("Configuration file is empty")

    if not isinstance(raw, dict):
        raise ValueError("Configuration must be a mapping")

    config = CodecConfig.from_dict(raw)
    _LOGGER.debug(
        "Loaded codec config from %s: unit=%d, timeout=%.2fs",
        config_file,
        config.unit_address,
        config.response_timeout,
    )
    return config
