"""
Schema AST module.

Classifies raw JSON schema mappings into node variants.
"""

from __future__ import annotations

from .nodes import (
    AnyOfNode,
    ArrayNode,
    BooleanNode,
    DefinitionNode,
    EnumNode,
    IntegerNode,
    LeafNode,
    NumberNode,
    ObjectNode,
    RefNode,
    SchemaNode,
    StringNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaParser",
    "SchemaNode",
    "RefNode",
    "AnyOfNode",
    "EnumNode",
    "ObjectNode",
    "ArrayNode",
    "BooleanNode",
    "IntegerNode",
    "NumberNode",
    "StringNode",
    "LeafNode",
    "DefinitionNode",
]
