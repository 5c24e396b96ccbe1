"""Configuration for the Modbus RTU codec."""

from .codec_config import (
    CODEC_CONFIG_SCHEMA,
    CONF_RESPONSE_TIMEOUT,
    CONF_UNIT_ADDRESS,
    CodecConfig,
    load_codec_config,
)
from .factory import build_protocol, build_read_use_case

__all__ = [
    "CODEC_CONFIG_SCHEMA",
    "CONF_RESPONSE_TIMEOUT",
    "CONF_UNIT_ADDRESS",
    "CodecConfig",
    "build_protocol",
    "build_read_use_case",
    "load_codec_config",
]
