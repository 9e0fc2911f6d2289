"""
Base class for generators.

A generator owns the tasks built from one section of the plugin
configuration and runs them, in configuration order, against a type.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..config import GenerationTaskConfig, GeneratorConfig, PluginConfig
from ..descriptors.nodes import SchemaType
from ..errors import GenerationError
from ..loader import ExternalFactoryLoader
from ..naming import OutputNaming
from ..tasks.base import CodeFragment, GenerationTask

logger = logging.getLogger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for generators."""

    # Name of the configuration section the generator is built from
    SECTION: str = ""

    def __init__(self, tasks: Sequence[GenerationTask] = ()):
        self.tasks: tuple[GenerationTask, ...] = tuple(tasks)

    @classmethod
    def from_config(cls, config: PluginConfig, naming: OutputNaming, loader: ExternalFactoryLoader) -> CodeGenerator:
        """
        Build the generator from its configuration section.

        A disabled section produces a generator without tasks.

        Args:
            config: The plugin configuration
            naming: Output naming policy of the run
            loader: Loader of external factories of the run

        Returns:
            The generator
        """
        section: GeneratorConfig = getattr(config, cls.SECTION)
        if not section.enabled:
            logger.debug("Generator `%s` is disabled", cls.SECTION)
            return cls()
        return cls([cls.create_task(task, naming, loader) for task in section.tasks])

    @classmethod
    @abstractmethod
    def create_task(cls, config: GenerationTaskConfig, naming: OutputNaming, loader: ExternalFactoryLoader) -> GenerationTask:
        """
        Create one task of the generator.

        Args:
            config: The task configuration
            naming: Output naming policy of the run
            loader: Loader of external factories of the run

        Returns:
            The task
        """

    def generate(self, schema_type: SchemaType) -> list[CodeFragment]:
        """
        Run every task against the type.

        Raises:
            GenerationError: If a task fails
        """
        fragments: list[CodeFragment] = []
        for task in self.tasks:
            try:
                fragments.extend(task.generate_for(schema_type))
            except Exception as e:
                raise GenerationError(schema_type.full_name, str(task), f"{type(e).__name__}: {e}") from e
        return fragments

    def __bool__(self) -> bool:
        return bool(self.tasks)
