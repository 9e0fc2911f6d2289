"""
Java types of message fields, as seen through the protoc generated accessors.
"""

from __future__ import annotations

from ...utils import java_identifier, to_camel_case, to_pascal_case
from ..descriptors.nodes import FieldDeclaration, FieldKind
from ..naming import OutputNaming

# Boxed Java types of proto scalars
TYPE_MAP: dict[str, str] = {
    "double": "Double",
    "float": "Float",
    "int64": "Long",
    "uint64": "Long",
    "sint64": "Long",
    "fixed64": "Long",
    "sfixed64": "Long",
    "int32": "Integer",
    "uint32": "Integer",
    "sint32": "Integer",
    "fixed32": "Integer",
    "sfixed32": "Integer",
    "bool": "Boolean",
    "string": "String",
    "bytes": "com.google.protobuf.ByteString",
}


def element_type(field: FieldDeclaration, naming: OutputNaming) -> str:
    """Get the Java type of a single value of the field."""
    if field.type_name:
        return naming.java_class_name_of(field.type_name)
    return TYPE_MAP[field.scalar_type]


def java_type(field: FieldDeclaration, naming: OutputNaming) -> str:
    """Get the Java type returned by the field getter."""
    element = element_type(field, naming)
    if field.kind is FieldKind.REPEATED:
        return f"java.util.List<{element}>"
    if field.kind is FieldKind.MAP:
        # Map keys are never used by the generated code, only the values
        return f"java.util.Map<?, {element}>"
    return element


def getter_name(field: FieldDeclaration) -> str:
    suffix = {FieldKind.REPEATED: "List", FieldKind.MAP: "Map"}.get(field.kind, "")
    return f"get{to_pascal_case(field.name)}{suffix}"


def accessor_name(field: FieldDeclaration) -> str:
    return java_identifier(to_camel_case(field.name))
