"""
Output naming policies.

A policy derives the path of the generated source file a fragment targets
and the Java class name of a schema type. The convention belongs to the
compiler generating the sources, so it is injected rather than hard-coded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePosixPath

from ..utils import to_pascal_case
from .descriptors.nodes import FileDeclaration, SchemaSet, SchemaType
from .errors import ConfigurationError

JAVA_EXTENSION = ".java"

# Appended by protoc when the derived outer class name collides with a type
OUTER_CLASS_SUFFIX = "OuterClass"


class OutputNaming(ABC):
    """Abstract base class for output naming policies."""

    # Name used in the plugin configuration
    NAME: str = ""

    def __init__(self, schema: SchemaSet):
        """
        Initialize the policy.

        Args:
            schema: The schema set of the current request
        """
        self.schema = schema

    @abstractmethod
    def file_name(self, schema_type: SchemaType) -> str:
        """
        Get the path of the generated file holding the type.

        Args:
            schema_type: The type

        Returns:
            Path relative to the output root, with `/` separators
        """

    def java_package(self, file: FileDeclaration) -> str:
        return file.java_package or file.package

    def outer_class_name(self, file: FileDeclaration) -> str:
        """Get the name of the outer class protoc generates for the file."""
        if file.java_outer_classname:
            return file.java_outer_classname
        name = to_pascal_case(PurePosixPath(file.path).stem)
        if name in file.top_level_names():
            name += OUTER_CLASS_SUFFIX
        return name

    def relative_name(self, schema_type: SchemaType) -> str:
        """Get the dotted name of the type inside its package, e.g. `Outer.Inner`."""
        package = self.schema.file_of(schema_type).package
        if package and schema_type.full_name.startswith(package + "."):
            return schema_type.full_name[len(package) + 1 :]
        return schema_type.full_name

    def simple_class_name(self, schema_type: SchemaType) -> str:
        """Get the Java class name of the type relative to its Java package."""
        file = self.schema.file_of(schema_type)
        relative = self.relative_name(schema_type)
        if file.java_multiple_files:
            return relative
        return f"{self.outer_class_name(file)}.{relative}"

    def java_class_name(self, schema_type: SchemaType) -> str:
        """Get the fully-qualified Java class name of the type."""
        package = self.java_package(self.schema.file_of(schema_type))
        simple = self.simple_class_name(schema_type)
        return f"{package}.{simple}" if package else simple

    def java_class_name_of(self, full_name: str) -> str:
        """Resolve a proto type name, falling back to the proto name for unknown types."""
        schema_type = self.schema.find(full_name)
        return self.java_class_name(schema_type) if schema_type else full_name

    def _package_path(self, file: FileDeclaration, class_name: str) -> str:
        package = self.java_package(file)
        directory = package.replace(".", "/")
        return f"{directory}/{class_name}{JAVA_EXTENSION}" if directory else f"{class_name}{JAVA_EXTENSION}"


class JavaFileNaming(OutputNaming):
    """Mirrors protoc's Java generator.

    With `java_multiple_files`, every top-level type has its own file and
    nested types live in the file of their top-level type. Otherwise all
    types of a schema file live in the file of its outer class.
    """

    NAME = "java"

    def file_name(self, schema_type: SchemaType) -> str:
        file = self.schema.file_of(schema_type)
        if not file.java_multiple_files:
            return self._package_path(file, self.outer_class_name(file))
        top_level = self.relative_name(schema_type).split(".", 1)[0]
        return self._package_path(file, top_level)


class SchemaFileNaming(OutputNaming):
    """One output file per schema file, placed beside the schema file."""

    NAME = "schema_file"

    def simple_class_name(self, schema_type: SchemaType) -> str:
        file = self.schema.file_of(schema_type)
        return f"{self.outer_class_name(file)}.{self.relative_name(schema_type)}"

    def file_name(self, schema_type: SchemaType) -> str:
        file = self.schema.file_of(schema_type)
        directory = PurePosixPath(file.path).parent
        return str(directory / f"{self.outer_class_name(file)}{JAVA_EXTENSION}")


NAMING_POLICIES: dict[str, type[OutputNaming]] = {
    JavaFileNaming.NAME: JavaFileNaming,
    SchemaFileNaming.NAME: SchemaFileNaming,
}


def naming_policy(name: str) -> type[OutputNaming]:
    """
    Look up a naming policy by its configuration name.

    Raises:
        ConfigurationError: If no policy has that name
    """
    try:
        return NAMING_POLICIES[name]
    except KeyError as e:
        known = ", ".join(sorted(NAMING_POLICIES))
        raise ConfigurationError(f"Unknown output naming `{name}`, expected one of: {known}.") from e
