"""
Schema classifier.

Turns one raw schema mapping into the node variant the generator
dispatches on. The order of the checks is the keyword precedence:
$ref, then anyOf, then enum, then type.
"""

from __future__ import annotations

from typing import Any

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


class SchemaParser:
    """Classifies schema mappings into nodes."""

    def parse_node(self, schema: Any, follow_ref: bool = True) -> SchemaNode:
        """
        Classify a single schema mapping.

        Args:
            schema: The schema dictionary
            follow_ref: False for a schema reached through a $ref, whose own
                $ref is then ignored

        Returns:
            Appropriate SchemaNode subclass
        """
        # Scalars and lists carry no keywords
        if not isinstance(schema, dict):
            return LeafNode()

        if follow_ref and schema.get("$ref"):
            return RefNode(ref=schema["$ref"])

        # Empty anyOf/enum lists fall through to the type switch
        if schema.get("anyOf"):
            return AnyOfNode(variants=list(schema["anyOf"]))

        if schema.get("enum"):
            return EnumNode(values=list(schema["enum"]))

        return self._parse_type_node(schema)

    def _parse_type_node(self, schema: dict[str, Any]) -> SchemaNode:
        type_name = schema.get("type")

        if type_name == "object":
            return ObjectNode(
                properties=schema.get("properties") or {},
                required=list(schema.get("required") or []),
            )
        if type_name == "array":
            return ArrayNode(
                items=schema.get("items"),
                min_items=schema.get("minItems"),
                max_items=schema.get("maxItems"),
            )
        if type_name == "boolean":
            return BooleanNode()
        if type_name == "integer":
            return IntegerNode(minimum=schema.get("minimum"), maximum=schema.get("maximum"))
        if type_name == "number":
            return NumberNode(minimum=schema.get("minimum"), maximum=schema.get("maximum"))
        if type_name == "string":
            return StringNode(pattern=schema.get("pattern"))

        # Unknown or missing type
        return LeafNode(default=schema.get("default"))

    def parse_definitions(self, root_schema: Any) -> list[DefinitionNode] | None:
        """
        Collect the top-level definitions of a root schema.

        Args:
            root_schema: The schema used as reference scope

        Returns:
            None if the root has no definitions at all, otherwise the
            entries in insertion order. Nested definitions are not visited.
        """
        if not isinstance(root_schema, dict):
            return None
        definitions = root_schema.get("definitions")
        if definitions is None:
            return None

        nodes = []
        if not isinstance(definitions, dict):
            return nodes
        for key, def_schema in definitions.items():
            # Skip comment fields and other non-schema values
            if not isinstance(def_schema, dict):
                continue
            nodes.append(
                DefinitionNode(
                    key=key,
                    schema_id=self._schema_id(def_schema),
                    raw=def_schema,
                )
            )
        return nodes

    def _schema_id(self, schema: dict[str, Any]) -> str | None:
        """Return the identifier of a schema, preferring $id over the draft-04 id."""
        return schema.get("$id") or schema.get("id")
