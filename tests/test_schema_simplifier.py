import unittest

from contract.contract_schema_simplifier import simplify_content, simplify_schema


class TestSchemaSimplifier(unittest.TestCase):
    def test_none_stays_none(self):
        self.assertIsNone(simplify_schema(None))

    def test_ref_short_circuits(self):
        with_sibling = {"$ref": "#/components/schemas/Foo", "description": "ignored"}
        self.assertEqual(simplify_schema(with_sibling), simplify_schema({"$ref": "#/components/schemas/Foo"}))
        self.assertEqual(simplify_schema(with_sibling), {"$ref": "#/components/schemas/Foo"})

    def test_documentation_fields_are_dropped(self):
        schema = {"type": "string", "format": "date", "title": "Day", "example": "2024-01-01",
                  "description": "A day", "x-internal": True}
        self.assertEqual(simplify_schema(schema), {"type": "string", "format": "date"})
        self.assertEqual(simplify_schema(schema), simplify_schema({"type": "string", "format": "date"}))

    def test_nested_schemas_are_simplified(self):
        schema = {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "string", "example": "a"}},
                "owner": {"$ref": "#/components/schemas/User", "description": "x"},
            },
            "oneOf": [{"type": "object", "title": "A"}],
            "required": ["tags"],
        }
        self.assertEqual(simplify_schema(schema), {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "string"}},
                "owner": {"$ref": "#/components/schemas/User"},
            },
            "oneOf": [{"type": "object"}],
            "required": ["tags"],
        })

    def test_tuple_items_are_simplified_individually(self):
        schema = {"type": "array", "items": [{"type": "string", "title": "a"}, {"type": "integer"}]}
        self.assertEqual(simplify_schema(schema)["items"], [{"type": "string"}, {"type": "integer"}])

    def test_boolean_schema_passes_through(self):
        self.assertIs(simplify_schema(True), True)
        self.assertIs(simplify_schema(False), False)

    def test_array_order_kept_by_default(self):
        schema = {"required": ["b", "a"], "enum": [3, 1, 2]}
        self.assertEqual(simplify_schema(schema), {"enum": [3, 1, 2], "required": ["b", "a"]})

    def test_sort_unordered_sorts_required_and_enum(self):
        schema = {"required": ["b", "a"], "enum": ["z", "x"], "properties": {"p": {"enum": [2, 1]}}}
        simplified = simplify_schema(schema, sort_unordered=True)
        self.assertEqual(simplified["required"], ["a", "b"])
        self.assertEqual(simplified["enum"], ["x", "z"])
        self.assertEqual(simplified["properties"]["p"]["enum"], [1, 2])

    def test_content_is_keyed_by_media_type(self):
        content = {
            "text/plain": {"schema": {"type": "string", "example": "hi"}},
            "application/json": {"example": {}},
        }
        simplified = simplify_content(content)
        self.assertEqual(list(simplified), ["application/json", "text/plain"])
        self.assertEqual(simplified["application/json"], {"schema": None})
        self.assertEqual(simplified["text/plain"], {"schema": {"type": "string"}})

    def test_missing_content_is_empty(self):
        self.assertEqual(simplify_content(None), {})


if __name__ == "__main__":
    unittest.main()
