"""
Errors raised by the plugin pipeline.

Every error is fatal for the run: the pipeline never emits a partial response.
Selection mismatches and disabled generators are not errors.
"""

from __future__ import annotations

from collections.abc import Sequence


class PluginError(Exception):
    """Base class for all errors that abort a plugin run."""

    pass


class DecodingError(PluginError):
    """Raised when the request or the configuration cannot be decoded.

    This can happen when:
    - The request bytes are not a valid `CodeGeneratorRequest`
    - The request was produced by an unsupported compiler version
    - The request names no files to generate, or names unknown files
    - The configuration path or document is malformed
    """

    pass


class ConfigurationError(PluginError):
    """Raised when the configuration is structurally valid but unusable.

    Examples are an unset or empty pattern, an unknown trait, a task
    without the implementation name its generator requires, or a
    configuration file that does not exist.
    """

    pass


class FactoryResolutionError(PluginError):
    """Raised when an external factory cannot be resolved or instantiated."""

    def __init__(self, name: str, classpath: Sequence[str], reason: str):
        self.name = name
        self.classpath = tuple(classpath)
        self.reason = reason
        entries = ", ".join(self.classpath) if self.classpath else "<empty>"
        super().__init__(f"Cannot resolve factory `{name}` (classpath: {entries}): {reason}")


class GenerationError(PluginError):
    """Raised when a generation task fails while processing a type."""

    def __init__(self, type_name: str, task: str, reason: str):
        self.type_name = type_name
        self.task = task
        super().__init__(f"Task {task} failed for type `{type_name}`: {reason}")
