"""
Example value generator.

Walks a JSON schema and builds a random value that satisfies it:

1. $ref is resolved against the root schema's definitions; steps 2-4 then
   apply to the resolved schema, whose own $ref is ignored
2. anyOf picks one alternative
3. enum picks one value
4. type selects the object, array, boolean, integer, number or string
   generator; any other type falls back to the schema's default

The generator keeps no state between calls. Randomness comes from the
callable given at construction, which returns floats in [0, 1).
"""

from __future__ import annotations

import json
import math
import random as _random
import string
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from .analyzer.reference_resolver import ReferenceResolver
from .config import GeneratorConfig
from .errors import RecursionDepthError
from .schema_ast.nodes import (
    AnyOfNode,
    ArrayNode,
    BooleanNode,
    EnumNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    RefNode,
    StringNode,
)
from .schema_ast.parser import SchemaParser

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

RandomSource = Callable[[], float]


class SchemaGenerator:
    """Generates example values from JSON schemas."""

    def __init__(self, config: GeneratorConfig | None = None, random: RandomSource | None = None):
        """
        Initialize the generator.

        Args:
            config: Fallback values for absent constraints
            random: Source of uniform floats in [0, 1), defaults to random.random
        """
        self.config = config or GeneratorConfig()
        self.random = random or _random.random
        self.parser = SchemaParser()

    def generate_object_from_json_schema(self, json_schema: str) -> Any:
        """
        Parse JSON text and generate a value from it.

        The parsed schema is also the root used for $ref resolution.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
        """
        parsed_schema = json.loads(json_schema)
        return self.generate_object_from_schema(parsed_schema, parsed_schema)

    def generate_object_from_schema(self, schema: dict[str, Any], root_schema: dict[str, Any]) -> Any:
        """
        Generate a value from an already parsed schema.

        Args:
            schema: The schema to generate a value for
            root_schema: The schema whose definitions resolve $ref

        Returns:
            A JSON compatible value
        """
        resolver = ReferenceResolver(root_schema, self.parser)
        return self._generate(schema, resolver, 0)

    def _generate(self, schema: dict[str, Any], resolver: ReferenceResolver, depth: int) -> Any:
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            raise RecursionDepthError(max_depth)

        node = self.parser.parse_node(schema)

        # One hop only: a $ref on the resolved schema is not followed
        if isinstance(node, RefNode):
            node = self.parser.parse_node(resolver.resolve(node.ref), follow_ref=False)

        if isinstance(node, AnyOfNode):
            return self._generate(self._pick(node.variants), resolver, depth + 1)
        if isinstance(node, EnumNode):
            return self._pick(node.values)
        if isinstance(node, ObjectNode):
            return self._generate_object(node, resolver, depth)
        if isinstance(node, ArrayNode):
            return self._generate_array(node, resolver, depth)
        if isinstance(node, BooleanNode):
            return self.random() < 0.5
        if isinstance(node, IntegerNode):
            return self._generate_integer(node)
        if isinstance(node, NumberNode):
            return self._generate_number(node)
        if isinstance(node, StringNode):
            return self._generate_string(node)

        # LeafNode: unknown or missing type
        return node.default

    def _pick(self, values: list[Any]) -> Any:
        """Pick one element uniformly by index."""
        return values[math.floor(self.random() * len(values))]

    def _generate_object(self, node: ObjectNode, resolver: ReferenceResolver, depth: int) -> dict[str, Any]:
        """Generate required properties always and optional ones by coin flip."""
        obj = {}
        threshold = self.config.optional_property_probability
        for key, property_schema in node.properties.items():
            if key in node.required or self.random() > threshold:
                obj[key] = self._generate(property_schema, resolver, depth + 1)
        return obj

    def _generate_array(self, node: ArrayNode, resolver: ReferenceResolver, depth: int) -> list[Any]:
        if node.items is None:
            return []

        min_items = node.min_items if node.min_items is not None else self.config.default_min_items
        max_items = node.max_items if node.max_items is not None else self.config.default_max_items
        length = math.floor(self.random() * (max_items - min_items + 1)) + min_items

        return [self._generate(node.items, resolver, depth + 1) for _ in range(length)]

    def _bounds(self, node: IntegerNode | NumberNode) -> tuple[int | float, int | float]:
        minimum = node.minimum if node.minimum is not None else self.config.default_minimum
        maximum = node.maximum if node.maximum is not None else self.config.default_maximum
        return minimum, maximum

    def _generate_integer(self, node: IntegerNode) -> int | float:
        minimum, maximum = self._bounds(node)
        # both bounds included: [minimum, maximum]
        return math.floor(self.random() * (maximum - minimum + 1)) + minimum

    def _generate_number(self, node: NumberNode) -> float:
        minimum, maximum = self._bounds(node)
        number = self.random() * (maximum - minimum) + minimum
        return round_half_away_from_zero(number, self.config.number_precision)

    def _generate_string(self, node: StringNode) -> str:
        # The pattern itself is never compiled
        if node.pattern:
            return self.config.pattern_placeholder

        return "".join(ALPHABET[math.floor(self.random() * len(ALPHABET))] for _ in range(self.config.string_length))


def round_half_away_from_zero(value: float, digits: int) -> float:
    """Round to a number of decimal digits, ties away from zero.

    Examples:
        1.005 -> 1.01
        -2.675 -> -2.68
        10.5 -> 10.5
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


_default_generator = SchemaGenerator()


def generate_object_from_schema(schema: dict[str, Any], root_schema: dict[str, Any]) -> Any:
    """Generate a value from a parsed schema with the default generator."""
    return _default_generator.generate_object_from_schema(schema, root_schema)


def generate_object_from_json_schema(json_schema: str) -> Any:
    """Generate a value from JSON schema text with the default generator."""
    return _default_generator.generate_object_from_json_schema(json_schema)
