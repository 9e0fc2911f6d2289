"""
Adapter between the protoc plugin protocol and the composite generator.

The request arrives as a serialized `CodeGeneratorRequest`. The path of the
JSON configuration file is passed base64-encoded, either as the command line
argument of the plugin or as the request parameter.
"""

from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path

from google.protobuf.compiler import plugin_pb2
from google.protobuf.message import DecodeError

from .config import PluginConfig
from .errors import ConfigurationError, DecodingError
from .generators.composite import CompositeGenerator
from .naming import OutputNaming

logger = logging.getLogger(__name__)


def parse_request(data: bytes) -> plugin_pb2.CodeGeneratorRequest:
    """
    Parse the serialized request.

    Raises:
        DecodingError: If the bytes are not a valid request
    """
    request = plugin_pb2.CodeGeneratorRequest()
    try:
        request.ParseFromString(data)
    except DecodeError as e:
        raise DecodingError(f"Malformed code generator request: {e}") from e
    return request


def decode_config_path(encoded: str) -> Path:
    """
    Decode the base64-encoded path of the configuration file.

    Raises:
        ConfigurationError: If no path is given
        DecodingError: If the value is not a base64-encoded UTF-8 path
    """
    if not encoded or not encoded.strip():
        raise ConfigurationError("No configuration file path supplied.")
    try:
        path = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodingError(f"Configuration path `{encoded}` is not valid base64: {e}") from e
    if not path:
        raise DecodingError("The decoded configuration path is empty.")
    return Path(path)


def encode_config_path(path: str | Path) -> str:
    """Encode a configuration path the way the build tool passes it."""
    return base64.b64encode(str(path).encode("utf-8")).decode("ascii")


class Plugin:
    """Processes one serialized request into one serialized response."""

    def __init__(self, naming: type[OutputNaming] | None = None):
        """
        Initialize the plugin.

        Args:
            naming: Output naming policy overriding the configured one
        """
        self.naming = naming

    def load_config(self, encoded_path: str) -> PluginConfig:
        path = decode_config_path(encoded_path)
        logger.debug("Reading configuration from %s", path)
        return PluginConfig.from_file(path)

    def handle(self, data: bytes, encoded_config_path: str | None = None) -> bytes:
        """
        Process a serialized request.

        Args:
            data: The serialized `CodeGeneratorRequest`
            encoded_config_path: Base64-encoded configuration path; the request
                parameter is used when omitted

        Returns:
            The serialized `CodeGeneratorResponse`

        Raises:
            PluginError: On any decoding, configuration or generation failure
        """
        request = parse_request(data)
        config = self.load_config(encoded_config_path or request.parameter)
        response = CompositeGenerator(config, naming=self.naming).run(request)
        return response.SerializeToString()
