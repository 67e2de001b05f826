"""
Reference resolver for $ref resolution.

A $ref is matched against the $id of the root schema's top-level
definitions, never against the keys of the definitions mapping.
"""

from __future__ import annotations

from typing import Any

from ..errors import MissingDefinitionsError, UnresolvedReferenceError
from ..schema_ast.nodes import DefinitionNode
from ..schema_ast.parser import SchemaParser


class ReferenceResolver:
    """Resolves $ref to the definition carrying the same $id."""

    def __init__(self, root_schema: dict[str, Any], parser: SchemaParser | None = None):
        """
        Initialize the resolver.

        Args:
            root_schema: The schema whose definitions are the lookup scope
            parser: Parser used to collect the definitions
        """
        self.parser = parser or SchemaParser()
        self.definitions: list[DefinitionNode] | None = self.parser.parse_definitions(root_schema)
        self._definition_cache: dict[str, DefinitionNode] = {}
        self._build_cache()

    def _build_cache(self) -> None:
        """Build a cache of definitions by $id, keeping the first entry for duplicates."""
        for def_node in self.definitions or []:
            if def_node.schema_id is not None and def_node.schema_id not in self._definition_cache:
                self._definition_cache[def_node.schema_id] = def_node

    def resolve(self, ref: str) -> dict[str, Any]:
        """
        Resolve a $ref to its target schema.

        Args:
            ref: The referenced $id, compared case-sensitively

        Returns:
            The raw schema of the matching definition

        Raises:
            MissingDefinitionsError: If the root schema has no definitions
            UnresolvedReferenceError: If no definition carries the $id
        """
        if self.definitions is None:
            raise MissingDefinitionsError()

        def_node = self._definition_cache.get(ref)
        if def_node is None:
            raise UnresolvedReferenceError(ref)
        return def_node.raw
