import unittest
from unittest import TestCase

from json_schema_to_example.pipeline.analyzer import ReferenceResolver
from json_schema_to_example.pipeline.errors import (
    MissingDefinitionsError,
    SchemaGenerationError,
    UnresolvedReferenceError,
)


class TestReferenceResolver(TestCase):
    """Lookup of $ref targets among the root's definitions"""

    def setUp(self):
        self.root = {
            "definitions": {
                "refSchema": {"$id": "#myRef", "type": "string"},
                "other": {"$id": "#other", "type": "integer"},
                "duplicate": {"$id": "#myRef", "type": "boolean"},
            }
        }

    def test_resolves_by_id(self):
        resolver = ReferenceResolver(self.root)
        self.assertEqual(resolver.resolve("#other"), {"$id": "#other", "type": "integer"})

    def test_first_match_wins(self):
        resolver = ReferenceResolver(self.root)
        self.assertEqual(resolver.resolve("#myRef")["type"], "string")

    def test_map_key_is_not_a_reference_target(self):
        resolver = ReferenceResolver(self.root)
        with self.assertRaises(UnresolvedReferenceError) as ctx:
            resolver.resolve("refSchema")
        self.assertEqual(ctx.exception.ref, "refSchema")

    def test_match_is_case_sensitive(self):
        resolver = ReferenceResolver(self.root)
        with self.assertRaises(UnresolvedReferenceError):
            resolver.resolve("#MYREF")

    def test_unresolved_message(self):
        resolver = ReferenceResolver(self.root)
        with self.assertRaises(UnresolvedReferenceError) as ctx:
            resolver.resolve("#nonExistentSchema")
        self.assertEqual(str(ctx.exception), "Schema with $id '#nonExistentSchema' not found in definitions.")

    def test_missing_definitions_message(self):
        resolver = ReferenceResolver({})
        with self.assertRaises(MissingDefinitionsError) as ctx:
            resolver.resolve("#myRef")
        self.assertEqual(str(ctx.exception), "No definitions found in the root schema.")

    def test_empty_definitions_is_not_missing(self):
        resolver = ReferenceResolver({"definitions": {}})
        with self.assertRaises(UnresolvedReferenceError):
            resolver.resolve("#myRef")

    def test_nested_definitions_not_searched(self):
        root = {
            "definitions": {
                "outer": {
                    "$id": "#outer",
                    "definitions": {"inner": {"$id": "#inner", "type": "string"}},
                }
            }
        }
        resolver = ReferenceResolver(root)
        with self.assertRaises(UnresolvedReferenceError):
            resolver.resolve("#inner")

    def test_draft04_id_fallback(self):
        resolver = ReferenceResolver({"definitions": {"legacy": {"id": "#legacy", "type": "number"}}})
        self.assertEqual(resolver.resolve("#legacy")["type"], "number")

    def test_null_dollar_id_falls_back_to_id(self):
        resolver = ReferenceResolver({"definitions": {"legacy": {"$id": None, "id": "#legacy", "type": "number"}}})
        self.assertEqual(resolver.resolve("#legacy")["type"], "number")

    def test_non_schema_entries_skipped(self):
        root = {"definitions": {"_comment": "shared types", "a": {"$id": "#a"}}}
        resolver = ReferenceResolver(root)
        self.assertEqual(len(resolver.definitions), 1)
        self.assertEqual(resolver.resolve("#a"), {"$id": "#a"})

    def test_errors_share_base_class(self):
        self.assertTrue(issubclass(MissingDefinitionsError, SchemaGenerationError))
        self.assertTrue(issubclass(UnresolvedReferenceError, SchemaGenerationError))


if __name__ == "__main__":
    unittest.main()
