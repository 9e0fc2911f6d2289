"""
Composite generator orchestrating a plugin run.

1. Decode the request into the descriptor model
2. Build the configured generators
3. Run every generator against every type to generate
4. Group the fragments by output file and insertion point
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum

from google.protobuf.compiler import plugin_pb2

from ..config import PluginConfig
from ..descriptors.decoder import SchemaDecoder
from ..descriptors.nodes import SchemaSet
from ..loader import ExternalFactoryLoader
from ..naming import OutputNaming, naming_policy
from ..tasks.base import CodeFragment
from .base import CodeGenerator
from .standard import STANDARD_GENERATORS

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    """State of a plugin run."""

    IDLE = "idle"
    LOADING = "loading"
    PER_TYPE = "per_type"
    ASSEMBLING = "assembling"
    DONE = "done"
    FAILED = "failed"


class CompositeGenerator:
    """Runs all configured generators against all types of a request."""

    def __init__(
        self,
        config: PluginConfig,
        naming: type[OutputNaming] | None = None,
        generators: Sequence[type[CodeGenerator]] = STANDARD_GENERATORS,
    ):
        """
        Initialize the composite generator.

        Args:
            config: The plugin configuration
            naming: Output naming policy overriding the configured one
            generators: Generator classes in the order they run for each type
        """
        self.config = config
        self.naming_cls = naming or naming_policy(config.output_naming)
        self.generator_classes = tuple(generators)
        self.loader = ExternalFactoryLoader(config.classpath)
        self.state = RunState.IDLE

    def run(self, request: plugin_pb2.CodeGeneratorRequest) -> plugin_pb2.CodeGeneratorResponse:
        """
        Process a request.

        Args:
            request: The parsed plugin request

        Returns:
            The response with all generated fragments

        Raises:
            PluginError: If decoding, configuration or generation fails; no
                response is produced in that case
        """
        try:
            self.state = RunState.LOADING
            # Factory instances live for one run only
            self.loader = ExternalFactoryLoader(self.config.classpath)
            schema = SchemaDecoder(self.config.entity_option_number).decode(request)
            generators = self.build_generators(schema)

            self.state = RunState.PER_TYPE
            fragments = self.generate(schema, generators)

            self.state = RunState.ASSEMBLING
            response = assemble(fragments)
        except Exception:
            self.state = RunState.FAILED
            raise

        self.state = RunState.DONE
        logger.info("Generated %d fragments into %d insertion points", len(fragments), len(response.file))
        return response

    def build_generators(self, schema: SchemaSet) -> list[CodeGenerator]:
        """Build the generators of the run, skipping the disabled ones."""
        naming = self.naming_cls(schema)
        generators = [cls.from_config(self.config, naming, self.loader) for cls in self.generator_classes]
        return [generator for generator in generators if generator]

    def generate(self, schema: SchemaSet, generators: Sequence[CodeGenerator]) -> list[CodeFragment]:
        """Run every generator against every type, in declaration and configuration order."""
        fragments: list[CodeFragment] = []
        for schema_type in schema.types_to_generate():
            for generator in generators:
                fragments.extend(generator.generate(schema_type))
        return fragments


def assemble(fragments: Iterable[CodeFragment]) -> plugin_pb2.CodeGeneratorResponse:
    """
    Build the response from the fragments.

    Fragments addressing the same file and insertion point are concatenated
    in generation order; duplicates are kept. Files appear in the order of
    their first fragment.

    Args:
        fragments: Fragments in generation order

    Returns:
        The plugin response
    """
    grouped: dict[tuple[str, str], list[str]] = {}
    for fragment in fragments:
        grouped.setdefault((fragment.file_name, fragment.insertion_point), []).append(fragment.content)

    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL
    for (file_name, insertion_point), contents in grouped.items():
        file = response.file.add()
        file.name = file_name
        file.insertion_point = insertion_point
        file.content = "".join(contents)
    return response
