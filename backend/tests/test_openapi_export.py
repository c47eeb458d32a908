"""
CareBook Backend — OpenAPI Document Tests
===========================================

What:  The generated document covers every route with its error models,
       and the exporter writes it to disk.
"""

import json

import pytest

from carebook.docs import downgrade_schema
from carebook.openapi_export import build_openapi, main


class TestGeneratedDocument:

    def setup_method(self):
        self.document = build_openapi()

    def test_all_resource_paths_present(self):
        paths = self.document["paths"]
        for resource, param in (
            ("patients", "patient_id"),
            ("providers", "provider_id"),
            ("appointments", "appointment_id"),
        ):
            assert set(paths[f"/{resource}"]) == {"get", "post"}
            assert set(paths[f"/{resource}/{{{param}}}"]) == {"get", "put", "delete"}

    def test_error_responses_documented(self):
        operation = self.document["paths"]["/appointments"]["post"]
        assert operation["responses"]["400"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }
        get_one = self.document["paths"]["/patients/{patient_id}"]["get"]
        assert "404" in get_one["responses"]

    def test_schemas_use_camel_case(self):
        properties = self.document["components"]["schemas"]["Appointment"]["properties"]
        assert {"patientId", "providerId", "date", "type", "status"} <= set(properties)

    def test_tags_and_title(self):
        assert self.document["info"]["title"] == "CareBook Scheduling API"
        tags = {
            tag
            for path in self.document["paths"].values()
            for operation in path.values()
            for tag in operation.get("tags", [])
        }
        assert {"Patients", "Providers", "Appointments"} <= tags

    def test_legacy_redirect_not_documented(self):
        assert "/api-docs" not in self.document["paths"]


class TestOpenAPI30Shape:
    """The published document is OpenAPI 3.0, not the 3.1 FastAPI emits by default."""

    def setup_method(self):
        self.document = build_openapi()

    def test_version(self):
        assert self.document["openapi"] == "3.0.3"

    def test_no_null_types_remain(self):
        assert '{"type": "null"}' not in json.dumps(self.document)

    def test_optional_fields_are_nullable(self):
        contact = self.document["components"]["schemas"]["Patient"]["properties"]["contactNumber"]
        assert contact["type"] == "string"
        assert contact["nullable"] is True
        assert "anyOf" not in contact

    def test_parameter_examples_become_example(self):
        parameters = self.document["paths"]["/patients/{patient_id}"]["get"]["parameters"]
        schema = parameters[0]["schema"]
        assert schema["example"] == "pat1"
        assert "examples" not in schema

    @pytest.mark.asyncio
    async def test_served_document_matches(self, test_client):
        response = await test_client.get("/openapi.json")
        assert response.status_code == 200
        assert response.json()["openapi"] == "3.0.3"


class TestDowngradeSchema:

    def test_reference_union_wrapped_in_all_of(self):
        node = {"anyOf": [{"$ref": "#/components/schemas/X"}, {"type": "null"}], "title": "X"}
        assert downgrade_schema(node) == {
            "allOf": [{"$ref": "#/components/schemas/X"}],
            "nullable": True,
            "title": "X",
        }

    def test_wider_union_keeps_any_of(self):
        node = {"anyOf": [{"type": "string"}, {"type": "integer"}, {"type": "null"}]}
        assert downgrade_schema(node) == {
            "anyOf": [{"type": "string"}, {"type": "integer"}],
            "nullable": True,
        }

    def test_const_becomes_enum(self):
        assert downgrade_schema({"const": "scheduled"}) == {"enum": ["scheduled"]}

    def test_media_type_examples_untouched(self):
        node = {"examples": {"basic": {"value": {"id": "pat1"}}}}
        assert downgrade_schema(node) == {"examples": {"basic": {"value": {"id": "pat1"}}}}


class TestExportCommand:

    def test_writes_json_file(self, tmp_path):
        output = tmp_path / "nested" / "openapi.json"
        main(["-o", str(output), "--server-url", "https://api.example.com"])

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["servers"][0] == {
            "url": "https://api.example.com",
            "description": "Production / Live API Server",
        }
        assert document["servers"][-1]["description"] == "Local development server"
        assert "/patients" in document["paths"]

    def test_rejects_unknown_option(self):
        with pytest.raises(SystemExit):
            main(["--bogus"])
