"""
Pipeline - protoc plugin generating code fragments for schema types.

A plugin run goes through these phases:

1. Protocol: Parse the `CodeGeneratorRequest` and load the configuration
2. Decoding: Build the immutable descriptor model and derive type traits
3. Generation: Run every configured generator against every type
4. Assembly: Group fragments by output file and insertion point
"""

from __future__ import annotations

from .config import GenerationTaskConfig, GeneratorConfig, PluginConfig
from .errors import ConfigurationError, DecodingError, FactoryResolutionError, GenerationError, PluginError
from .generators import CompositeGenerator, RunState
from .insertion_point import InsertionPoint, key_for
from .loader import ExternalFactoryLoader
from .naming import JavaFileNaming, OutputNaming, SchemaFileNaming
from .protocol import Plugin, decode_config_path, encode_config_path, parse_request
from .selection import Pattern, PatternTarget, TypeSelector, matches
from .tasks import CodeFragment, GenerationTask, MethodFactory, NestedClassFactory

__all__ = [
    "CodeFragment",
    "CompositeGenerator",
    "ConfigurationError",
    "DecodingError",
    "ExternalFactoryLoader",
    "FactoryResolutionError",
    "GenerationError",
    "GenerationTask",
    "GenerationTaskConfig",
    "GeneratorConfig",
    "InsertionPoint",
    "JavaFileNaming",
    "MethodFactory",
    "NestedClassFactory",
    "OutputNaming",
    "Pattern",
    "PatternTarget",
    "Plugin",
    "PluginConfig",
    "PluginError",
    "RunState",
    "SchemaFileNaming",
    "TypeSelector",
    "decode_config_path",
    "encode_config_path",
    "key_for",
    "matches",
    "parse_request",
]
