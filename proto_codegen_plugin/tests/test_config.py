#!/usr/bin/env python3

import json

import pytest

from proto_codegen_plugin.pipeline.config import GenerationTaskConfig, PluginConfig
from proto_codegen_plugin.pipeline.descriptors.nodes import Trait
from proto_codegen_plugin.pipeline.errors import ConfigurationError, DecodingError
from proto_codegen_plugin.pipeline.selection import Pattern, TypeSelector

CONFIG = {
    "classpath": ["/opt/factories"],
    "output_naming": "schema_file",
    "interfaces": {
        "enabled": True,
        "tasks": [{"selector": {"trait": "entity_state"}, "interface": "io.spine.base.EntityState", "generic": True}],
    },
    "methods": {
        "enabled": True,
        "tasks": [{"selector": {"pattern": {"suffix": "_events.proto"}}, "factory": "acme.Factory", "parameters": {"a": 1}}],
    },
    "queries": {"enabled": True, "tasks": [{}]},
}


class TestPluginConfig:
    """Test parsing the plugin configuration"""

    def test_defaults(self):
        config = PluginConfig()
        assert config.output_naming == "java"
        assert config.classpath == []
        assert not config.interfaces.enabled
        assert config.methods.tasks == []

    def test_from_dict(self):
        config = PluginConfig.from_dict(CONFIG)
        assert config.classpath == ["/opt/factories"]
        assert config.output_naming == "schema_file"
        assert config.interfaces.enabled
        assert config.interfaces.tasks[0].interface == "io.spine.base.EntityState"
        assert config.interfaces.tasks[0].generic
        method_task = config.methods.tasks[0]
        assert method_task.selector == TypeSelector(pattern=Pattern.suffix("_events.proto"))
        assert method_task.parameters == {"a": 1}
        assert not config.nested_classes.enabled

    def test_queries_default_to_entity_states(self):
        config = PluginConfig.from_dict(CONFIG)
        assert config.queries.tasks[0].selector == TypeSelector(trait=Trait.ENTITY_STATE)

    def test_unknown_keys_are_ignored(self):
        config = PluginConfig.from_dict({"comment": "ignored", "fields": {"enabled": False}})
        assert not config.fields.enabled

    def test_round_trip(self):
        config = PluginConfig.from_dict(CONFIG)
        assert PluginConfig.from_dict(config.to_dict()) == config

    def test_not_an_object(self):
        with pytest.raises(DecodingError):
            PluginConfig.from_dict(["interfaces"])

    def test_unknown_naming(self):
        with pytest.raises(ConfigurationError, match="output naming"):
            PluginConfig.from_dict({"output_naming": "kotlin"})

    @pytest.mark.parametrize("value", [0, -3, "73842", True])
    def test_invalid_entity_option_number(self, value):
        with pytest.raises(ConfigurationError):
            PluginConfig.from_dict({"entity_option_number": value})

    @pytest.mark.parametrize("value", ["false", "true", 1, 0, None])
    def test_enabled_must_be_a_boolean(self, value):
        with pytest.raises(ConfigurationError, match="`enabled` must be true or false"):
            PluginConfig.from_dict({"fields": {"enabled": value}})

    @pytest.mark.parametrize("value", ["false", 1])
    def test_generic_must_be_a_boolean(self, value):
        task = {"selector": {"trait": "event"}, "interface": "acme.Marker", "generic": value}
        with pytest.raises(ConfigurationError, match="`generic` must be true or false"):
            PluginConfig.from_dict({"interfaces": {"tasks": [task]}})

    def test_invalid_classpath(self):
        with pytest.raises(ConfigurationError, match="classpath"):
            PluginConfig.from_dict({"classpath": "/opt/factories"})


class TestGenerationTaskConfig:
    """Test task entries"""

    def test_missing_factory(self):
        with pytest.raises(ConfigurationError, match="factory"):
            PluginConfig.from_dict({"methods": {"tasks": [{"selector": {"trait": "event"}}]}})

    def test_blank_interface(self):
        with pytest.raises(ConfigurationError, match="interface"):
            PluginConfig.from_dict({"interfaces": {"tasks": [{"selector": {"trait": "event"}, "interface": " "}]}})

    def test_missing_selector(self):
        with pytest.raises(ConfigurationError, match="selector"):
            GenerationTaskConfig.from_dict({"factory": "acme.Factory"}, required="factory")

    def test_bad_pattern(self):
        with pytest.raises(ConfigurationError):
            PluginConfig.from_dict(
                {"fields": {"tasks": [{"selector": {"pattern": {"suffix": ""}}, "superclass": "acme.Field"}]}}
            )

    def test_bad_parameters(self):
        with pytest.raises(ConfigurationError, match="parameters"):
            GenerationTaskConfig.from_dict({"selector": {"trait": "event"}, "parameters": [1]})

    def test_tasks_must_be_a_list(self):
        with pytest.raises(ConfigurationError, match="list"):
            PluginConfig.from_dict({"methods": {"tasks": {"factory": "acme.Factory"}}})


class TestConfigFile:
    """Test loading the configuration from disk"""

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(CONFIG), encoding="utf-8")
        assert PluginConfig.from_file(path) == PluginConfig.from_dict(CONFIG)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            PluginConfig.from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{interfaces:", encoding="utf-8")
        with pytest.raises(DecodingError, match="not valid JSON"):
            PluginConfig.from_file(path)


if __name__ == "__main__":
    pytest.main([__file__])
