import pytest

from json_schema_to_example import GeneratorConfig, RecursionDepthError, SchemaGenerator
from json_schema_to_example.pipeline.config import PATTERN_PLACEHOLDER


def generate(schema, config, value=0.0):
    return SchemaGenerator(config, random=lambda: value).generate_object_from_schema(schema, schema)


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.default_min_items == 1
        assert config.default_max_items == 5
        assert config.default_minimum == 1
        assert config.default_maximum == 100
        assert config.string_length == 10
        assert config.pattern_placeholder == PATTERN_PLACEHOLDER
        assert config.max_depth is None

    def test_from_dict_ignores_unknown_keys(self):
        config = GeneratorConfig.from_dict({"string_length": 4, "not_an_option": True})
        assert config.string_length == 4
        assert not hasattr(config, "not_an_option")

    def test_to_dict_roundtrip(self):
        config = GeneratorConfig(default_max_items=9, max_depth=3)
        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_fallback_bounds(self):
        config = GeneratorConfig(default_minimum=40, default_maximum=50, default_min_items=2, default_max_items=2)
        assert generate({"type": "array", "items": {"type": "integer"}}, config) == [40, 40]

    def test_schema_bounds_override_fallbacks(self):
        config = GeneratorConfig(default_minimum=40, default_maximum=50)
        assert generate({"type": "integer", "minimum": 3, "maximum": 3}, config) == 3

    def test_string_options(self):
        config = GeneratorConfig(string_length=3, pattern_placeholder="matched")
        assert generate({"type": "string"}, config) == "AAA"
        assert generate({"type": "string", "pattern": "x"}, config) == "matched"

    def test_number_precision(self):
        config = GeneratorConfig(number_precision=1)
        assert generate({"type": "number", "minimum": 0, "maximum": 10}, config, 0.123) == 1.2

    def test_optional_property_probability(self):
        schema = {"type": "object", "properties": {"a": {"type": "boolean"}}}
        assert generate(schema, GeneratorConfig(optional_property_probability=0.0), 0.1) == {"a": True}
        assert generate(schema, GeneratorConfig(optional_property_probability=1.0), 0.99) == {}


class TestMaxDepth:
    cyclic = {
        "definitions": {"node": {"$id": "#node", "type": "object", "properties": {"next": {"$ref": "#node"}}, "required": ["next"]}},
        "$ref": "#node",
    }

    def test_cycle_stopped_by_guard(self):
        with pytest.raises(RecursionDepthError, match="Maximum schema nesting depth of 20 exceeded."):
            generate(self.cyclic, GeneratorConfig(max_depth=20))

    def test_shallow_schema_within_limit(self):
        schema = {"type": "array", "items": {"type": "array", "items": {"type": "integer"}}}
        assert generate(schema, GeneratorConfig(max_depth=2)) == [[1]]

    def test_depth_exceeded_by_nesting(self):
        schema = {"type": "array", "items": {"type": "array", "items": {"type": "integer"}}}
        with pytest.raises(RecursionDepthError):
            generate(schema, GeneratorConfig(max_depth=1))
