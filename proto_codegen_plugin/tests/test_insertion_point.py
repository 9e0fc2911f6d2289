#!/usr/bin/env python3

import pytest

from proto_codegen_plugin.pipeline.descriptors.nodes import SchemaType, TypeKind
from proto_codegen_plugin.pipeline.insertion_point import InsertionPoint, key_for


class TestInsertionPointKeys:
    """Test the on-disk keys of insertion points"""

    def test_type_keyed(self):
        assert key_for(InsertionPoint.CLASS_SCOPE, "acme.Task") == "class_scope:acme.Task"
        assert InsertionPoint.MESSAGE_IMPLEMENTS.key_for("acme.Task") == "message_implements:acme.Task"

    def test_type_keyed_from_schema_type(self):
        task = SchemaType("acme.Task.Note", "Note", TypeKind.MESSAGE, "acme/tasks.proto", parent="acme.Task")
        assert InsertionPoint.BUILDER_SCOPE.key_for(task) == "builder_scope:acme.Task.Note"

    def test_self_keyed(self):
        assert key_for(InsertionPoint.OUTER_CLASS_SCOPE) == "outer_class_scope"

    def test_deterministic(self):
        keys = {InsertionPoint.ENUM_SCOPE.key_for("acme.Status") for _ in range(5)}
        assert keys == {"enum_scope:acme.Status"}

    @pytest.mark.parametrize("point", [p for p in InsertionPoint if p.type_keyed])
    def test_type_required(self, point):
        with pytest.raises(ValueError):
            point.key_for()
        with pytest.raises(ValueError):
            point.key_for("")

    def test_type_forbidden_for_self_keyed(self):
        with pytest.raises(ValueError):
            InsertionPoint.OUTER_CLASS_SCOPE.key_for("acme.Task")

    def test_markers(self):
        assert {p.marker for p in InsertionPoint} == {
            "outer_class_scope",
            "class_scope",
            "builder_scope",
            "enum_scope",
            "message_implements",
            "builder_implements",
            "interface_extends",
        }


if __name__ == "__main__":
    pytest.main([__file__])
