"""
Generators.

Contains the generator base class, the standard generators and the
composite generator orchestrating a plugin run.
"""

from __future__ import annotations

from .base import CodeGenerator
from .composite import CompositeGenerator, RunState, assemble
from .standard import (
    STANDARD_GENERATORS,
    FieldGenerator,
    InterfaceGenerator,
    MethodGenerator,
    NestedClassGenerator,
    QueryGenerator,
)

__all__ = [
    "STANDARD_GENERATORS",
    "CodeGenerator",
    "CompositeGenerator",
    "FieldGenerator",
    "InterfaceGenerator",
    "MethodGenerator",
    "NestedClassGenerator",
    "QueryGenerator",
    "RunState",
    "assemble",
]
