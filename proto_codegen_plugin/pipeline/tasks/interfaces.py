"""
Interface injection: make message classes implement a configured interface.
"""

from __future__ import annotations

from ..config import GenerationTaskConfig
from ..descriptors.nodes import SchemaType
from ..insertion_point import InsertionPoint
from ..naming import OutputNaming
from .base import CodeFragment, GenerationTask

PACKAGE_DELIMITER = "."


class ImplementInterface(GenerationTask):
    """Adds an interface to the `implements` clause of selected message classes.

    Interface names without a package are resolved against the Java package
    of the type's declaring file. Generic interfaces are parameterized with
    the message class.
    """

    def __init__(self, config: GenerationTaskConfig, naming: OutputNaming):
        super().__init__(config, naming)
        self.interface = config.interface.strip()

    def interface_name(self, schema_type: SchemaType) -> str:
        if PACKAGE_DELIMITER in self.interface:
            return self.interface
        package = self.naming.java_package(self.naming.schema.file_of(schema_type))
        return f"{package}{PACKAGE_DELIMITER}{self.interface}" if package else self.interface

    def generate(self, schema_type: SchemaType) -> list[CodeFragment]:
        name = self.interface_name(schema_type)
        if self.config.generic:
            name = f"{name}<{self.naming.simple_class_name(schema_type)}>"
        return [self.fragment(schema_type, InsertionPoint.MESSAGE_IMPLEMENTS, f"{name},")]

    def describe(self) -> str:
        return f"{self.interface} <- {self.selector}"
