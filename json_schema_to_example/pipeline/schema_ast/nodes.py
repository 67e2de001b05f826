"""
Node definitions for classified schema mappings.

A raw schema mapping is classified into exactly one of these variants.
Child schemas are kept as raw mappings and classified when the generator
reaches them, so a node never holds more than one level of the tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all nodes."""


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref to a definition's $id."""

    ref: str = ""


@dataclass
class AnyOfNode(SchemaNode):
    """Represents a non-empty anyOf list of alternatives."""

    variants: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class EnumNode(SchemaNode):
    """Represents a non-empty enum list."""

    values: list[Any] = field(default_factory=list)


@dataclass
class ObjectNode(SchemaNode):
    """Represents an object type."""

    properties: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: dict[str, Any] | None = None
    min_items: int | None = None
    max_items: int | None = None


@dataclass
class BooleanNode(SchemaNode):
    """Represents a boolean type."""


@dataclass
class IntegerNode(SchemaNode):
    """Represents an integer type."""

    minimum: int | float | None = None
    maximum: int | float | None = None


@dataclass
class NumberNode(SchemaNode):
    """Represents a number type."""

    minimum: int | float | None = None
    maximum: int | float | None = None


@dataclass
class StringNode(SchemaNode):
    """Represents a string type."""

    pattern: str | None = None


@dataclass
class LeafNode(SchemaNode):
    """Represents a schema with an unknown or missing type."""

    default: Any = None


@dataclass
class DefinitionNode:
    """Represents one top-level entry of the root's definitions."""

    key: str = ""  # Key in the definitions mapping (not used for lookup)
    schema_id: str | None = None  # The $id the entry is referenced by
    raw: dict[str, Any] = field(default_factory=dict)
