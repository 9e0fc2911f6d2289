"""Protoc Code Generation Plugin

A protoc plugin that selects schema types with patterns and traits and
injects generated Java code into the sources emitted by protoc, through
its insertion points.
"""

__version__ = "1.0.1"
__author__ = "François Lagunas"

from .pipeline import (
    CodeFragment,
    CompositeGenerator,
    ExternalFactoryLoader,
    InsertionPoint,
    MethodFactory,
    NestedClassFactory,
    Plugin,
    PluginConfig,
    PluginError,
)

__all__ = [
    "Plugin",
    "PluginConfig",
    "PluginError",
    "CompositeGenerator",
    "CodeFragment",
    "InsertionPoint",
    "ExternalFactoryLoader",
    "MethodFactory",
    "NestedClassFactory",
]
