"""
Configuration for the plugin pipeline.

The configuration is a JSON document whose path the build tool passes to
the plugin. Every generator has its own section, disabled unless its
`enabled` flag is set.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .descriptors.decoder import ENTITY_OPTION_NUMBER
from .descriptors.nodes import Trait
from .errors import ConfigurationError, DecodingError
from .naming import JavaFileNaming, naming_policy
from .selection.selectors import TypeSelector


def _flag(d: dict, key: str) -> bool:
    value = d.get(key, False)
    if not isinstance(value, bool):
        raise ConfigurationError(f"`{key}` must be true or false, got {value!r}.")
    return value


@dataclass
class GenerationTaskConfig:
    """Binding between a selector and the implementation of a generation task.

    Attributes:
        selector: Which types the task applies to
        interface: Interface name (interfaces generator)
        generic: Whether the interface is parameterized with the message class
        factory: Fully-qualified factory class name (methods, nested classes)
        superclass: Base class of generated field listings (fields generator)
        parameters: Free-form parameters passed to the task constructor
    """

    selector: TypeSelector
    interface: str = ""
    generic: bool = False
    factory: str = ""
    superclass: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Any, required: str | None = None, default_trait: Trait | None = None) -> GenerationTaskConfig:
        """
        Create a task config from a dictionary.

        Args:
            d: The task section
            required: Implementation key the owning generator requires
            default_trait: Trait selecting the types when no selector is given

        Raises:
            ConfigurationError: If the selector is invalid or the required key is missing
        """
        if not isinstance(d, dict):
            raise ConfigurationError(f"A generation task must be an object, got {d!r}.")

        if "selector" in d:
            selector = TypeSelector.from_dict(d["selector"])
        elif default_trait is not None:
            selector = TypeSelector(trait=default_trait)
        else:
            raise ConfigurationError("A generation task requires a `selector`.")

        parameters = d.get("parameters", {})
        if not isinstance(parameters, dict):
            raise ConfigurationError(f"Task `parameters` must be an object, got {parameters!r}.")

        config = GenerationTaskConfig(
            selector=selector,
            interface=d.get("interface", ""),
            generic=_flag(d, "generic"),
            factory=d.get("factory", ""),
            superclass=d.get("superclass", ""),
            parameters=dict(parameters),
        )
        if required is not None:
            value = getattr(config, required)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"A generation task with selector `{selector}` requires a non-empty `{required}`.")
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        result: dict[str, Any] = {"selector": self.selector.to_dict()}
        for key in ("interface", "factory", "superclass"):
            if getattr(self, key):
                result[key] = getattr(self, key)
        if self.generic:
            result["generic"] = True
        if self.parameters:
            result["parameters"] = self.parameters
        return result


@dataclass
class GeneratorConfig:
    """Configuration of one generator: a flag and an ordered list of tasks."""

    enabled: bool = False
    tasks: list[GenerationTaskConfig] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Any, required: str | None = None, default_trait: Trait | None = None) -> GeneratorConfig:
        """Create a generator config from a dictionary."""
        if not isinstance(d, dict):
            raise ConfigurationError(f"A generator section must be an object, got {d!r}.")
        tasks = d.get("tasks", [])
        if not isinstance(tasks, list):
            raise ConfigurationError(f"Generator `tasks` must be a list, got {tasks!r}.")
        return GeneratorConfig(
            enabled=_flag(d, "enabled"),
            tasks=[GenerationTaskConfig.from_dict(t, required, default_trait) for t in tasks],
        )

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "tasks": [task.to_dict() for task in self.tasks],
        }


# Generator section name -> (implementation key each task requires, default trait)
GENERATOR_SECTIONS: dict[str, tuple[str | None, Trait | None]] = {
    "interfaces": ("interface", None),
    "methods": ("factory", None),
    "nested_classes": ("factory", None),
    "fields": ("superclass", None),
    "queries": (None, Trait.ENTITY_STATE),
}


@dataclass
class PluginConfig:
    """Configuration options for a plugin run."""

    # Import path entries searched for external factories
    classpath: list[str] = field(default_factory=list)

    # Name of the output naming policy
    output_naming: str = JavaFileNaming.NAME

    # Field number of the message option marking entity states
    entity_option_number: int = ENTITY_OPTION_NUMBER

    # Generators, run in this order for every type
    interfaces: GeneratorConfig = field(default_factory=GeneratorConfig)
    methods: GeneratorConfig = field(default_factory=GeneratorConfig)
    nested_classes: GeneratorConfig = field(default_factory=GeneratorConfig)
    fields: GeneratorConfig = field(default_factory=GeneratorConfig)
    queries: GeneratorConfig = field(default_factory=GeneratorConfig)

    @staticmethod
    def from_dict(d: Any) -> PluginConfig:
        """
        Create a config from a dictionary.

        Unknown keys are ignored.

        Raises:
            DecodingError: If the document is not an object
            ConfigurationError: If a section is invalid
        """
        if not isinstance(d, dict):
            raise DecodingError(f"The configuration must be a JSON object, got {type(d).__name__}.")

        config = PluginConfig()
        for k, v in d.items():
            if k in GENERATOR_SECTIONS:
                required, default_trait = GENERATOR_SECTIONS[k]
                setattr(config, k, GeneratorConfig.from_dict(v, required, default_trait))
            elif k == "classpath":
                if not isinstance(v, list) or not all(isinstance(entry, str) for entry in v):
                    raise ConfigurationError("`classpath` must be a list of paths.")
                config.classpath = list(v)
            elif k == "output_naming":
                if not isinstance(v, str):
                    raise ConfigurationError(f"`output_naming` must be a string, got {v!r}.")
                naming_policy(v)
                config.output_naming = v
            elif k == "entity_option_number":
                if not isinstance(v, int) or isinstance(v, bool) or v <= 0:
                    raise ConfigurationError(f"`entity_option_number` must be a positive integer, got {v!r}.")
                config.entity_option_number = v
        return config

    @staticmethod
    def from_file(path: Path) -> PluginConfig:
        """
        Load a config from a JSON file.

        Raises:
            ConfigurationError: If the file does not exist or cannot be read
            DecodingError: If the file is not valid JSON
        """
        if not path.is_file():
            raise ConfigurationError(f"Configuration file `{path}` does not exist.")
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file `{path}`: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodingError(f"Configuration file `{path}` is not valid JSON: {e}") from e
        return PluginConfig.from_dict(data)

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        result: dict[str, Any] = {
            "classpath": self.classpath,
            "output_naming": self.output_naming,
            "entity_option_number": self.entity_option_number,
        }
        for section in GENERATOR_SECTIONS:
            result[section] = getattr(self, section).to_dict()
        return result
