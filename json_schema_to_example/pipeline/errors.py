"""
Errors raised while generating example values.

Invalid JSON text is not wrapped: the ``json.JSONDecodeError`` raised by the
parser reaches the caller unchanged. ``ParseError`` is exported as an alias
so callers can catch it under a name of this package.
"""

from __future__ import annotations

import json

ParseError = json.JSONDecodeError


class SchemaGenerationError(Exception):
    """Base class for errors raised by the schema generator."""

    pass


class MissingDefinitionsError(SchemaGenerationError):
    """Raised when a $ref is found but the root schema has no definitions."""

    def __init__(self):
        super().__init__("No definitions found in the root schema.")


class UnresolvedReferenceError(SchemaGenerationError):
    """Raised when no definition carries the $id named by a $ref."""

    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f"Schema with $id '{ref}' not found in definitions.")


class RecursionDepthError(SchemaGenerationError):
    """Raised when the optional nesting guard is enabled and exceeded."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum schema nesting depth of {max_depth} exceeded.")
