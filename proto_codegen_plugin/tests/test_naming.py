#!/usr/bin/env python3

import pytest

from proto_codegen_plugin.pipeline.descriptors import SchemaDecoder
from proto_codegen_plugin.pipeline.errors import ConfigurationError
from proto_codegen_plugin.pipeline.naming import JavaFileNaming, SchemaFileNaming, naming_policy
from proto_codegen_plugin.utils import java_identifier, to_camel_case, to_pascal_case

from . import given


def naming(*files, policy=JavaFileNaming):
    return policy(SchemaDecoder().decode(given.request(*files)))


class TestJavaFileNaming:
    """Test output names mirroring protoc's Java generator"""

    def test_multiple_files(self):
        names = naming(given.tasks_file(), given.events_file())
        task = names.schema.find("acme.tasks.Task")
        assert names.file_name(task) == "com/acme/tasks/Task.java"
        assert names.java_class_name(task) == "com.acme.tasks.Task"

    def test_nested_type_lives_in_top_level_file(self):
        names = naming(given.tasks_file(), given.events_file())
        details = names.schema.find("acme.tasks.TaskCreated.Details")
        assert names.file_name(details) == "com/acme/tasks/event/TaskCreated.java"
        assert names.simple_class_name(details) == "TaskCreated.Details"
        assert names.java_class_name(details) == "com.acme.tasks.event.TaskCreated.Details"

    def test_outer_class(self):
        file = given.proto_file("acme/user_profile.proto", "acme", given.message("User"))
        names = naming(file)
        user = names.schema.find("acme.User")
        assert names.file_name(user) == "acme/UserProfile.java"
        assert names.java_class_name(user) == "acme.UserProfile.User"

    def test_outer_class_name_conflict(self):
        file = given.proto_file("acme/task.proto", "acme", given.message("Task"), java_package="com.acme")
        names = naming(file)
        assert names.file_name(names.schema.find("acme.Task")) == "com/acme/TaskOuterClass.java"

    def test_explicit_outer_class_name(self):
        file = given.proto_file("acme/task.proto", "acme", given.message("Task"), java_outer_classname="TaskProto")
        names = naming(file)
        assert names.simple_class_name(names.schema.find("acme.Task")) == "TaskProto.Task"

    def test_no_package(self):
        names = naming(given.proto_file("task.proto", "", given.message("Item")))
        assert names.file_name(names.schema.find("Item")) == "Task.java"

    def test_unknown_type_name(self):
        names = naming(given.tasks_file())
        assert names.java_class_name_of("google.protobuf.Timestamp") == "google.protobuf.Timestamp"
        assert names.java_class_name_of("acme.tasks.TaskId") == "com.acme.tasks.TaskId"


class TestSchemaFileNaming:
    """Test one output file per schema file"""

    def test_file_beside_schema(self):
        names = naming(given.tasks_file(), policy=SchemaFileNaming)
        task = names.schema.find("acme.tasks.Task")
        assert names.file_name(task) == "acme/tasks/Tasks.java"
        assert names.simple_class_name(task) == "Tasks.Task"


class TestNamingPolicy:
    def test_lookup(self):
        assert naming_policy("java") is JavaFileNaming
        assert naming_policy("schema_file") is SchemaFileNaming

    def test_unknown(self):
        with pytest.raises(ConfigurationError, match="kotlin"):
            naming_policy("kotlin")


class TestCaseConversion:
    """Test the protoc-compatible case conversions"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("test_generators", "TestGenerators"),
            ("first_name", "FirstName"),
            ("uuid", "Uuid"),
            ("ABC", "ABC"),
            ("version2info", "Version2Info"),
            ("task-events", "TaskEvents"),
        ],
    )
    def test_pascal_case(self, text, expected):
        assert to_pascal_case(text) == expected

    def test_camel_case(self):
        assert to_camel_case("first_name") == "firstName"
        assert to_camel_case("id") == "id"

    def test_java_identifier(self):
        assert java_identifier("class") == "class_"
        assert java_identifier("title") == "title"


if __name__ == "__main__":
    pytest.main([__file__])
