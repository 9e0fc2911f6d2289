"""
Insertion points of the Java code emitted by protoc.

The key of an insertion point is the only contract between this plugin and
the compiler that splices fragments into the generated sources, so the
format below must not change.
"""

from __future__ import annotations

from enum import Enum

from .descriptors.nodes import SchemaType


class InsertionPoint(Enum):
    """Named markers inside the generated Java sources.

    Each member maps to `(marker name, type-keyed)`.
    """

    # Self-keyed: one per output file
    OUTER_CLASS_SCOPE = ("outer_class_scope", False)

    # Type-keyed: one per target type per output file
    CLASS_SCOPE = ("class_scope", True)
    BUILDER_SCOPE = ("builder_scope", True)
    ENUM_SCOPE = ("enum_scope", True)
    MESSAGE_IMPLEMENTS = ("message_implements", True)
    BUILDER_IMPLEMENTS = ("builder_implements", True)
    INTERFACE_EXTENDS = ("interface_extends", True)

    def __init__(self, marker: str, type_keyed: bool):
        self.marker = marker
        self.type_keyed = type_keyed

    def key_for(self, schema_type: SchemaType | str | None = None) -> str:
        """
        Compose the on-disk key of this insertion point.

        Args:
            schema_type: The target type or its fully-qualified name; required
                for type-keyed points and forbidden for self-keyed ones

        Returns:
            `"<marker>"` or `"<marker>:<fully.qualified.Type>"`

        Raises:
            ValueError: If the type is missing for a type-keyed point or
                supplied for a self-keyed one
        """
        if not self.type_keyed:
            if schema_type is not None:
                raise ValueError(f"Insertion point `{self.marker}` is self-keyed and does not accept a type.")
            return self.marker

        if schema_type is None:
            raise ValueError(f"Insertion point `{self.marker}` requires a target type.")
        full_name = schema_type.full_name if isinstance(schema_type, SchemaType) else schema_type
        if not full_name:
            raise ValueError(f"Insertion point `{self.marker}` requires a non-empty type name.")
        return f"{self.marker}:{full_name}"


def key_for(point: InsertionPoint, schema_type: SchemaType | str | None = None) -> str:
    """Compose the on-disk key of `point` for the optional `schema_type`."""
    return point.key_for(schema_type)
