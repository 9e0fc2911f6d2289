"""
Base classes for generation tasks.

A generation task inspects one schema type and emits zero or more code
fragments addressed at insertion points of the generated sources.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from ..config import GenerationTaskConfig
from ..descriptors.nodes import SchemaType, TypeKind
from ..insertion_point import InsertionPoint
from ..naming import OutputNaming

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates"


@dataclass(frozen=True)
class CodeFragment:
    """One unit of generated source text.

    Attributes:
        file_name: Path of the generated file to patch
        insertion_point: Key of the insertion point inside the file
        content: Source text to splice at the insertion point
    """

    file_name: str
    insertion_point: str
    content: str


class GenerationTask(ABC):
    """Abstract base class for generation tasks.

    Tasks are pure: the same type and configuration always produce the same
    fragments, independently of other tasks and of the generation order.
    """

    # Kinds of types the task can generate code for
    SUPPORTED_KINDS: frozenset[TypeKind] = frozenset({TypeKind.MESSAGE})

    def __init__(self, config: GenerationTaskConfig, naming: OutputNaming):
        """
        Initialize the task.

        Args:
            config: The task configuration
            naming: Policy deriving output file and class names
        """
        self.config = config
        self.selector = config.selector
        self.parameters = dict(config.parameters)
        self.naming = naming

    def generate_for(self, schema_type: SchemaType) -> list[CodeFragment]:
        """
        Generate the fragments for a type.

        Args:
            schema_type: The type to generate code for

        Returns:
            The fragments, empty if the task does not apply to the type
        """
        if schema_type.kind not in self.SUPPORTED_KINDS or not self.selector.selects(schema_type):
            return []
        return self.generate(schema_type)

    @abstractmethod
    def generate(self, schema_type: SchemaType) -> list[CodeFragment]:
        """
        Generate the fragments for a type selected by the task.

        Args:
            schema_type: The selected type

        Returns:
            The fragments in emission order
        """

    def fragment(self, schema_type: SchemaType, point: InsertionPoint, content: str) -> CodeFragment:
        """Create a fragment targeting `point` of the type's output file."""
        key = point.key_for(schema_type) if point.type_keyed else point.key_for()
        return CodeFragment(self.naming.file_name(schema_type), key, content)

    def describe(self) -> str:
        """Describe what the task applies and to which types."""
        return str(self.selector)

    def __str__(self) -> str:
        return f"{type(self).__name__}[{self.describe()}]"


class TemplateTask(GenerationTask):
    """Generation task rendering a Jinja2 template."""

    # Template file name inside the language template directory
    TEMPLATE: str = ""

    # Template directory name
    TEMPLATE_LANG: str = "java"

    def __init__(self, config: GenerationTaskConfig, naming: OutputNaming):
        super().__init__(config, naming)
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up the Jinja2 template."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR / self.TEMPLATE_LANG)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
            autoescape=False,
        )
        self.template = self.jinja_env.get_template(self.TEMPLATE)

    def render(self, **context: Any) -> str:
        return self.template.render(parameters=self.parameters, **context)
