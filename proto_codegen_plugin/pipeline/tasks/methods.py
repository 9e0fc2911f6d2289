"""
Method injection: add methods created by an external factory to message classes.
"""

from __future__ import annotations

from ..config import GenerationTaskConfig
from ..descriptors.nodes import SchemaType
from ..insertion_point import InsertionPoint
from ..naming import OutputNaming
from .base import CodeFragment, GenerationTask
from .factories import MethodFactory


class GenerateMethods(GenerationTask):
    """Emits every method a `MethodFactory` creates into the class scope."""

    def __init__(self, config: GenerationTaskConfig, naming: OutputNaming, factory: MethodFactory):
        super().__init__(config, naming)
        self.factory = factory

    def generate(self, schema_type: SchemaType) -> list[CodeFragment]:
        methods = self.factory.create_methods_for(schema_type)
        return [self.fragment(schema_type, InsertionPoint.CLASS_SCOPE, _checked(method)) for method in methods]

    def describe(self) -> str:
        return f"{self.config.factory} <- {self.selector}"


def _checked(source) -> str:
    if not isinstance(source, str):
        raise TypeError(f"factory returned {type(source).__name__} instead of source text")
    return source
