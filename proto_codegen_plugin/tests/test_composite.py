#!/usr/bin/env python3

import pytest
from google.protobuf.compiler import plugin_pb2

from proto_codegen_plugin.pipeline.config import PluginConfig
from proto_codegen_plugin.pipeline.errors import ConfigurationError, FactoryResolutionError, GenerationError
from proto_codegen_plugin.pipeline.generators import CompositeGenerator, RunState, assemble
from proto_codegen_plugin.pipeline.naming import SchemaFileNaming
from proto_codegen_plugin.pipeline.tasks import CodeFragment

from . import given

FACTORIES = "proto_codegen_plugin.tests.given_factories"


def run(config: dict, *files, **kwargs) -> plugin_pb2.CodeGeneratorResponse:
    files = files or (given.tasks_file(), given.events_file())
    return CompositeGenerator(PluginConfig.from_dict(config), **kwargs).run(given.request(*files))


def patches(response) -> list[tuple[str, str, str]]:
    return [(f.name, f.insertion_point, f.content) for f in response.file]


def foo_file():
    return given.proto_file("pkg/foo.proto", "pkg", given.message("Foo", given.field("a", 1), given.field("b", 2)))


class TestScenarios:
    """End-to-end runs of the composite generator"""

    def test_trait_without_matching_type(self):
        """A trait-only selector on a request without such types yields no patches"""
        config = {
            "interfaces": {"enabled": True, "tasks": [{"selector": {"trait": "entity_state"}, "interface": "pkg.E"}]}
        }
        response = run(config, foo_file())
        assert list(response.file) == []
        assert response.supported_features == plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    def test_suffix_pattern_with_fixed_method_factory(self):
        """One type in a matching file gets one class scope patch"""
        config = {
            "methods": {
                "enabled": True,
                "tasks": [{"selector": {"pattern": {"suffix": "foo.proto"}}, "factory": f"{FACTORIES}.FixedMethod"}],
            }
        }
        response = run(config, foo_file())
        assert patches(response) == [("pkg/FooOuterClass.java", "class_scope:pkg.Foo", "public void foo() {}")]

    def test_factory_absent_from_classpath(self, tmp_path):
        """An unresolvable factory fails the run"""
        config = {
            "classpath": [str(tmp_path)],
            "methods": {"enabled": True, "tasks": [{"selector": {"trait": "event"}, "factory": "acme.codegen.Missing"}]},
        }
        generator = CompositeGenerator(PluginConfig.from_dict(config))
        with pytest.raises(FactoryResolutionError, match="acme.codegen.Missing"):
            generator.run(given.request(given.tasks_file(), given.events_file()))
        assert generator.state is RunState.FAILED

    def test_same_key_concatenated_in_configuration_order(self):
        """Fragments of two generators for the same key are joined in generator order"""
        config = {
            "methods": {
                "enabled": True,
                "tasks": [{"selector": {"trait": "entity_state"}, "factory": f"{FACTORIES}.FixedMethod"}],
            },
            "nested_classes": {
                "enabled": True,
                "tasks": [{"selector": {"trait": "entity_state"}, "factory": f"{FACTORIES}.BuilderNested"}],
            },
        }
        response = run(config)
        assert patches(response) == [
            (
                "com/acme/tasks/Task.java",
                "class_scope:acme.tasks.Task",
                "public void foo() {}public static final class TaskHelper {}",
            )
        ]

    def test_duplicate_fragments_are_kept(self):
        task = {"selector": {"trait": "entity_state"}, "factory": f"{FACTORIES}.FixedMethod"}
        response = run({"methods": {"enabled": True, "tasks": [task, task]}})
        assert patches(response)[0][2] == "public void foo() {}public void foo() {}"


class TestOrdering:
    """Test that fragment order follows declaration and configuration order"""

    def test_types_in_declaration_order(self):
        config = {
            "methods": {
                "enabled": True,
                "tasks": [{"selector": {"pattern": {"prefix": "acme/"}}, "factory": f"{FACTORIES}.NamedMethods"}],
            }
        }
        response = run(config)
        assert [f.insertion_point for f in response.file] == [
            "class_scope:acme.tasks.TaskId",
            "class_scope:acme.tasks.Task",
            "class_scope:acme.tasks.TaskCreated",
            "class_scope:acme.tasks.TaskCreated.Details",
            "class_scope:acme.tasks.TaskDone",
        ]

    def test_generators_in_fixed_order(self):
        config = {
            "queries": {"enabled": True, "tasks": [{}]},
            "interfaces": {
                "enabled": True,
                "tasks": [{"selector": {"trait": "entity_state"}, "interface": "io.spine.base.EntityState", "generic": True}],
            },
        }
        response = run(config)
        assert [(f.name, f.insertion_point) for f in response.file] == [
            ("com/acme/tasks/Task.java", "message_implements:acme.tasks.Task"),
            ("com/acme/tasks/Task.java", "class_scope:acme.tasks.Task"),
        ]
        assert response.file[0].content == "io.spine.base.EntityState<Task>,"

    def test_disabled_generators(self):
        config = {
            "methods": {
                "enabled": False,
                "tasks": [{"selector": {"trait": "entity_state"}, "factory": "acme.codegen.Missing"}],
            }
        }
        generator = CompositeGenerator(PluginConfig.from_dict(config))
        response = generator.run(given.request(given.tasks_file()))
        assert list(response.file) == []
        assert generator.state is RunState.DONE

    def test_repeatable(self):
        config = {"queries": {"enabled": True, "tasks": [{}]}}
        assert run(config).SerializeToString() == run(config).SerializeToString()


class TestGenerationFailures:
    def test_failing_factory(self):
        config = {
            "methods": {
                "enabled": True,
                "tasks": [{"selector": {"trait": "uuid_value"}, "factory": f"{FACTORIES}.FailingMethods"}],
            }
        }
        generator = CompositeGenerator(PluginConfig.from_dict(config))
        with pytest.raises(GenerationError) as e:
            generator.run(given.request(given.tasks_file()))
        assert e.value.type_name == "acme.tasks.TaskId"
        assert "RuntimeError: boom" in str(e.value)
        assert generator.state is RunState.FAILED

    def test_plugin_error_from_factory_names_the_type(self):
        config = {
            "methods": {
                "enabled": True,
                "tasks": [{"selector": {"trait": "uuid_value"}, "factory": f"{FACTORIES}.MisconfiguredMethods"}],
            }
        }
        with pytest.raises(GenerationError) as e:
            run(config, given.tasks_file())
        assert e.value.type_name == "acme.tasks.TaskId"
        assert "MisconfiguredMethods" in e.value.task
        assert "ConfigurationError: missing `prefix` parameter" in str(e.value)
        assert isinstance(e.value.__cause__, ConfigurationError)

    def test_classpath_of_one_run_does_not_leak_into_the_next(self, tmp_path):
        """A factory found on the classpath of a first run is absent from a run without it"""
        directory = tmp_path / "factories"
        directory.mkdir()
        (directory / "acme_run_factories.py").write_text(
            "from proto_codegen_plugin.pipeline.tasks.factories import MethodFactory\n\n\n"
            "class Fixed(MethodFactory):\n"
            "    def create_methods_for(self, schema_type):\n"
            "        return ['public void fixed() {}']\n",
            encoding="utf-8",
        )
        task = {"selector": {"trait": "entity_state"}, "factory": "acme_run_factories.Fixed"}
        assert run({"classpath": [str(directory)], "methods": {"enabled": True, "tasks": [task]}}).file
        with pytest.raises(FactoryResolutionError, match="acme_run_factories.Fixed"):
            run({"classpath": [str(tmp_path)], "methods": {"enabled": True, "tasks": [task]}})


class TestNamingPolicy:
    def test_configured_policy(self):
        config = {
            "output_naming": "schema_file",
            "interfaces": {"enabled": True, "tasks": [{"selector": {"trait": "entity_state"}, "interface": "acme.E"}]},
        }
        assert patches(run(config))[0][0] == "acme/tasks/Tasks.java"

    def test_injected_policy(self):
        config = {"interfaces": {"enabled": True, "tasks": [{"selector": {"trait": "entity_state"}, "interface": "acme.E"}]}}
        assert patches(run(config, naming=SchemaFileNaming))[0][0] == "acme/tasks/Tasks.java"


class TestAssemble:
    def test_groups_by_file_and_insertion_point(self):
        response = assemble(
            [
                CodeFragment("A.java", "class_scope:a.A", "1"),
                CodeFragment("B.java", "class_scope:b.B", "2"),
                CodeFragment("A.java", "class_scope:a.A", "3"),
                CodeFragment("A.java", "message_implements:a.A", "4"),
            ]
        )
        assert patches(response) == [
            ("A.java", "class_scope:a.A", "13"),
            ("B.java", "class_scope:b.B", "2"),
            ("A.java", "message_implements:a.A", "4"),
        ]


if __name__ == "__main__":
    pytest.main([__file__])
