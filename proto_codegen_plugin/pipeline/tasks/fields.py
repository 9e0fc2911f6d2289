"""
Field injection: add a typed listing of the message fields to message classes.
"""

from __future__ import annotations

from ..descriptors.nodes import SchemaType
from ..insertion_point import InsertionPoint
from .base import CodeFragment, TemplateTask
from .java_types import accessor_name, java_type


class GenerateFields(TemplateTask):
    """Renders a nested `Field` class with one accessor per message field.

    Each accessor returns an instance of the configured superclass, which
    wraps the field path.
    """

    TEMPLATE = "fields.java.jinja2"

    def generate(self, schema_type: SchemaType) -> list[CodeFragment]:
        if not schema_type.fields:
            return []
        fields = [
            {
                "name": field.name,
                "accessor": accessor_name(field),
                "java_type": java_type(field, self.naming),
            }
            for field in schema_type.fields
        ]
        content = self.render(
            class_name=self.naming.simple_class_name(schema_type),
            superclass=self.config.superclass,
            fields=fields,
        )
        return [self.fragment(schema_type, InsertionPoint.CLASS_SCOPE, content)]

    def describe(self) -> str:
        return f"{self.config.superclass} <- {self.selector}"
