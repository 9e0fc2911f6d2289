"""
Descriptor model node definitions.

These nodes represent the schema files of a single code generation request.
They are built once by the decoder and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of a schema declaration."""

    MESSAGE = "message"
    ENUM = "enum"
    SERVICE = "service"


class FieldKind(Enum):
    """Kind of a message field."""

    SCALAR = "scalar"  # int32, string, bytes, ...
    MESSAGE = "message"  # A singular message field
    ENUM = "enum"  # A singular enum field
    REPEATED = "repeated"  # repeated T
    MAP = "map"  # map<K, V>


class Trait(str, Enum):
    """Semantic traits derived from a type declaration."""

    ENTITY_STATE = "entity_state"
    COMMAND = "command"
    EVENT = "event"
    REJECTION = "rejection"
    UUID_VALUE = "uuid_value"
    VALUE_WRAPPER = "value_wrapper"


@dataclass(frozen=True)
class FieldDeclaration:
    """A field of a message type."""

    name: str
    number: int
    kind: FieldKind
    declaring_type: str
    # Proto scalar name ("string", "int64") for scalar and repeated scalar fields
    scalar_type: str | None = None
    # Fully-qualified name of the declared message or enum type, if any
    type_name: str | None = None
    json_name: str = ""

    @property
    def is_scalar(self) -> bool:
        return self.kind is FieldKind.SCALAR

    @property
    def is_collection(self) -> bool:
        return self.kind in (FieldKind.REPEATED, FieldKind.MAP)


@dataclass(frozen=True)
class SchemaType:
    """A message, enum or service declaration."""

    full_name: str
    name: str
    kind: TypeKind
    file: str
    parent: str | None = None
    depth: int = 0
    fields: tuple[FieldDeclaration, ...] = ()
    nested: tuple[SchemaType, ...] = ()
    traits: frozenset[Trait] = frozenset()
    enum_values: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()

    @property
    def is_top_level(self) -> bool:
        return self.parent is None

    def has_trait(self, trait: Trait) -> bool:
        return trait in self.traits

    def walk(self) -> Iterator[SchemaType]:
        """Yield this type followed by all nested types, depth first."""
        yield self
        for nested in self.nested:
            yield from nested.walk()


@dataclass(frozen=True)
class FileDeclaration:
    """A single schema source file."""

    path: str
    package: str = ""
    types: tuple[SchemaType, ...] = ()
    java_package: str = ""
    java_outer_classname: str = ""
    java_multiple_files: bool = False

    def walk(self) -> Iterator[SchemaType]:
        """Yield every type declared in the file in declaration order."""
        for schema_type in self.types:
            yield from schema_type.walk()

    def top_level_names(self) -> set[str]:
        return {schema_type.name for schema_type in self.types}


@dataclass
class SchemaSet:
    """All files of a request, including the files they import."""

    files: dict[str, FileDeclaration] = field(default_factory=dict)
    # Paths of the files the plugin must generate code for, in request order
    files_to_generate: list[str] = field(default_factory=list)
    # Index of all declared types by fully-qualified name
    types: dict[str, SchemaType] = field(default_factory=dict)

    def types_to_generate(self) -> Iterator[SchemaType]:
        """Yield every type of every file to generate, in declaration order."""
        for path in self.files_to_generate:
            yield from self.files[path].walk()

    def find(self, full_name: str) -> SchemaType | None:
        return self.types.get(full_name)

    def file_of(self, schema_type: SchemaType) -> FileDeclaration:
        return self.files[schema_type.file]
