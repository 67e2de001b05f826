"""
Pipeline - JSON Schema to example value generator.

1. Classify: turn a schema mapping into a node variant (schema_ast)
2. Resolve: map $ref to definitions by $id (analyzer)
3. Generate: build a random value for the node (generator)
4. Write: optionally persist the rendered result atomically (writer)
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import (
    MissingDefinitionsError,
    ParseError,
    RecursionDepthError,
    SchemaGenerationError,
    UnresolvedReferenceError,
)
from .generator import (
    SchemaGenerator,
    generate_object_from_json_schema,
    generate_object_from_schema,
)
from .writer import AtomicWriter

__all__ = [
    "SchemaGenerator",
    "generate_object_from_schema",
    "generate_object_from_json_schema",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "ParseError",
    "SchemaGenerationError",
    "MissingDefinitionsError",
    "UnresolvedReferenceError",
    "RecursionDepthError",
    "AtomicWriter",
]
