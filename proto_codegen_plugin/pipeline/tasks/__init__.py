"""
Generation tasks.

Contains the task abstraction, the capability interfaces of external
factories and the built-in tasks.
"""

from __future__ import annotations

from .base import CodeFragment, GenerationTask, TemplateTask
from .factories import MethodFactory, NestedClassFactory
from .fields import GenerateFields
from .interfaces import ImplementInterface
from .methods import GenerateMethods
from .nested_classes import GenerateNestedClasses
from .queries import GenerateQueries

__all__ = [
    "CodeFragment",
    "GenerateFields",
    "GenerateMethods",
    "GenerateNestedClasses",
    "GenerateQueries",
    "GenerationTask",
    "ImplementInterface",
    "MethodFactory",
    "NestedClassFactory",
    "TemplateTask",
]
