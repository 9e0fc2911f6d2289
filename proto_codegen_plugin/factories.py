"""
Built-in factories for common message kinds.

They are resolved by name like any external factory, e.g.
`proto_codegen_plugin.factories.UuidMethodFactory`.
"""

from __future__ import annotations

from .pipeline.descriptors.nodes import SchemaType, Trait
from .pipeline.tasks.factories import MethodFactory

GENERATE_METHOD = """\
/**
 * Creates a new instance with a random UUID value.
 */
public static {name} generate() {{
    return newBuilder().setUuid(java.util.UUID.randomUUID().toString()).build();
}}
"""

OF_METHOD = """\
/**
 * Creates a new instance from the passed UUID value.
 */
public static {name} of(String uuid) {{
    com.google.common.base.Preconditions.checkArgument(
            java.util.UUID.fromString(uuid).toString().equals(uuid), "Invalid UUID: `%s`.", uuid);
    return newBuilder().setUuid(uuid).build();
}}
"""


class UuidMethodFactory(MethodFactory):
    """Creates `generate()` and `of(String)` for messages wrapping a single UUID string."""

    def create_methods_for(self, schema_type: SchemaType) -> list[str]:
        if not schema_type.has_trait(Trait.UUID_VALUE):
            return []
        return [
            GENERATE_METHOD.format(name=schema_type.name),
            OF_METHOD.format(name=schema_type.name),
        ]
