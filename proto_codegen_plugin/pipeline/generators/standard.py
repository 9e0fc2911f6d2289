"""
The generators configured by the plugin configuration sections.
"""

from __future__ import annotations

from ..config import GenerationTaskConfig
from ..loader import ExternalFactoryLoader
from ..naming import OutputNaming
from ..tasks import (
    GenerateFields,
    GenerateMethods,
    GenerateNestedClasses,
    GenerateQueries,
    GenerationTask,
    ImplementInterface,
    MethodFactory,
    NestedClassFactory,
)
from .base import CodeGenerator


class InterfaceGenerator(CodeGenerator):
    """Makes selected message classes implement interfaces."""

    SECTION = "interfaces"

    @classmethod
    def create_task(cls, config: GenerationTaskConfig, naming: OutputNaming, loader: ExternalFactoryLoader) -> GenerationTask:
        return ImplementInterface(config, naming)


class MethodGenerator(CodeGenerator):
    """Adds factory-created methods to selected message classes."""

    SECTION = "methods"

    @classmethod
    def create_task(cls, config: GenerationTaskConfig, naming: OutputNaming, loader: ExternalFactoryLoader) -> GenerationTask:
        factory = loader.resolve(config.factory, MethodFactory)
        return GenerateMethods(config, naming, factory)


class NestedClassGenerator(CodeGenerator):
    """Adds factory-created nested classes to selected message classes."""

    SECTION = "nested_classes"

    @classmethod
    def create_task(cls, config: GenerationTaskConfig, naming: OutputNaming, loader: ExternalFactoryLoader) -> GenerationTask:
        factory = loader.resolve(config.factory, NestedClassFactory)
        return GenerateNestedClasses(config, naming, factory)


class FieldGenerator(CodeGenerator):
    """Adds typed field listings to selected message classes."""

    SECTION = "fields"

    @classmethod
    def create_task(cls, config: GenerationTaskConfig, naming: OutputNaming, loader: ExternalFactoryLoader) -> GenerationTask:
        return GenerateFields(config, naming)


class QueryGenerator(CodeGenerator):
    """Adds the query DSL to entity state classes."""

    SECTION = "queries"

    @classmethod
    def create_task(cls, config: GenerationTaskConfig, naming: OutputNaming, loader: ExternalFactoryLoader) -> GenerationTask:
        return GenerateQueries(config, naming)


# Generators in the order they run for every type
STANDARD_GENERATORS: tuple[type[CodeGenerator], ...] = (
    InterfaceGenerator,
    MethodGenerator,
    NestedClassGenerator,
    FieldGenerator,
    QueryGenerator,
)
