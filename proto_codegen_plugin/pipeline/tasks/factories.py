"""
Capability interfaces of externally supplied factories.

Implementations live outside the plugin and are resolved by name through
the `ExternalFactoryLoader`. They must have a no-argument constructor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..descriptors.nodes import SchemaType


class MethodFactory(ABC):
    """Creates Java methods to add to a message class."""

    @abstractmethod
    def create_methods_for(self, schema_type: SchemaType) -> list[str]:
        """
        Create the methods of a message class.

        Args:
            schema_type: The message type

        Returns:
            Source text of each method
        """


class NestedClassFactory(ABC):
    """Creates Java classes to nest inside a message class."""

    @abstractmethod
    def create_classes_for(self, schema_type: SchemaType) -> list[str]:
        """
        Create the nested classes of a message class.

        Args:
            schema_type: The message type

        Returns:
            Source text of each class
        """
