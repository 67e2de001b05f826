"""JSON Schema to Example Generator

A Python package for generating random example values from JSON Schema
definitions, for sample payloads in UI testing and demos.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    GeneratorConfig,
    MissingDefinitionsError,
    OutputConfig,
    OutputMode,
    ParseError,
    RecursionDepthError,
    SchemaGenerationError,
    SchemaGenerator,
    UnresolvedReferenceError,
    generate_object_from_json_schema,
    generate_object_from_schema,
)

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
