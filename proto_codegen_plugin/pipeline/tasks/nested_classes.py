"""
Nested-class injection: add classes created by an external factory to message classes.
"""

from __future__ import annotations

from ..config import GenerationTaskConfig
from ..descriptors.nodes import SchemaType
from ..insertion_point import InsertionPoint
from ..naming import OutputNaming
from .base import CodeFragment, GenerationTask
from .factories import NestedClassFactory


class GenerateNestedClasses(GenerationTask):
    """Emits every class a `NestedClassFactory` creates into the class scope."""

    def __init__(self, config: GenerationTaskConfig, naming: OutputNaming, factory: NestedClassFactory):
        super().__init__(config, naming)
        self.factory = factory

    def generate(self, schema_type: SchemaType) -> list[CodeFragment]:
        fragments = []
        for source in self.factory.create_classes_for(schema_type):
            if not isinstance(source, str):
                raise TypeError(f"factory returned {type(source).__name__} instead of source text")
            fragments.append(self.fragment(schema_type, InsertionPoint.CLASS_SCOPE, source))
        return fragments

    def describe(self) -> str:
        return f"{self.config.factory} <- {self.selector}"
