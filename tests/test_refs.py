import json

import pytest

from oas2json.errors import ConversionError
from oas2json.generator.refs import adapt_schema, rewrite_refs, serialize


class TestAdaptSchema:
    def test_sets_title_and_id(self):
        schema = adapt_schema({"type": "object", "$schema": "http://json-schema.org/draft-04/schema#"}, "Pet", "Pet")
        assert schema == {"type": "object", "title": "Pet", "$id": "Pet.json"}

    def test_title_is_name_not_filename(self):
        schema = adapt_schema({}, "Example Pet", "Example_Pet")
        assert schema["title"] == "Example Pet"
        assert schema["$id"] == "Example_Pet.json"

    def test_id_strips_non_uri_chars(self):
        assert adapt_schema({}, "x", "a{b}")["$id"] == "ab.json"

    @pytest.mark.parametrize("fmt", ["date", "date-time"])
    def test_date_formats_get_ts_type(self, fmt):
        assert adapt_schema({"type": "string", "format": fmt}, "D", "D")["tsType"] == "Date"

    def test_other_formats_have_no_ts_type(self):
        assert "tsType" not in adapt_schema({"type": "string", "format": "uuid"}, "U", "U")
        assert "tsType" not in adapt_schema({"type": "string"}, "S", "S")

    def test_non_object_raises(self):
        with pytest.raises(ConversionError):
            adapt_schema("not an object", "Foo", "Foo")


class TestRewriteRefs:
    def test_schema_ref(self):
        assert rewrite_refs('{"$ref": "#/components/schemas/Pet"}') == '{"$ref": "Pet.json"}'

    def test_every_kind_rewritten(self):
        text = '["#/components/responses/NotFound", "#/components/requestBodies/NewPet"]'
        assert rewrite_refs(text) == '["NotFound.json", "NewPet.json"]'

    def test_every_occurrence_rewritten(self):
        text = '{"a": {"$ref": "#/components/schemas/Owner"}, "b": {"$ref": "#/components/schemas/Owner"}}'
        assert rewrite_refs(text).count("Owner.json") == 2
        assert "#/components" not in rewrite_refs(text)

    def test_unknown_kind_untouched(self):
        text = '{"$ref": "#/components/pathItems/Thing"}'
        assert rewrite_refs(text) == text

    def test_non_component_ref_untouched(self):
        text = '{"$ref": "#/definitions/Pet"}'
        assert rewrite_refs(text) == text


class TestSerialize:
    def test_two_space_indent_and_rewrite(self):
        text = serialize({"items": {"$ref": "#/components/schemas/Pet"}})
        assert text == '{\n  "items": {\n    "$ref": "Pet.json"\n  }\n}'

    def test_stable_key_order(self):
        schema = {"type": "object", "title": "T", "$id": "T.json"}
        assert list(json.loads(serialize(schema))) == ["type", "title", "$id"]
