import json

import pytest


@pytest.fixture
def write_spec(tmp_path):
    """Write an OpenAPI document to a temp JSON file and return its path as a string."""
    def _write(name, paths=None, schemas=None, **extra):
        doc = {"openapi": "3.1.0", "info": {"title": "Test API", "version": "1.0.0"}}
        if paths is not None:
            doc["paths"] = paths
        if schemas is not None:
            doc["components"] = {"schemas": schemas}
        doc.update(extra)
        file_path = tmp_path / name
        file_path.write_text(json.dumps(doc), encoding="utf-8")
        return str(file_path)

    return _write


@pytest.fixture
def user_api():
    """A small document with one schema referenced from a parameterised operation."""
    return {
        "paths": {
            "/users/{id}": {
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
                ],
                "get": {
                    "operationId": "getUser",
                    "tags": ["users", "admin"],
                    "responses": {
                        "200": {
                            "description": "OK",
                            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/User"}}},
                        },
                        "404": {"description": "Not found"},
                    },
                },
            },
            "/users": {
                "post": {
                    "operationId": "createUser",
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/User"}}},
                    },
                    "responses": {"201": {"description": "Created"}},
                },
            },
        },
        "components": {
            "schemas": {
                "User": {
                    "type": "object",
                    "title": "User",
                    "properties": {"id": {"type": "string"}, "email": {"type": "string", "format": "email"}},
                    "required": ["id"],
                },
            },
        },
    }
