"""Shared test fixtures for the schematic test suite."""
from __future__ import annotations

from typing import Any

import pytest

from src.schematic.document import Document
from src.schematic.rendering import TypeRenderer
from src.shared.config import GeneratorConfig

APP_IDENTITY_HREF = "/apps/{(%23%2Fdefinitions%2Fapp%2Fdefinitions%2Fidentity)}"


def _sample_schema() -> dict[str, Any]:
    """A small hyper-schema in the shape of a platform API description."""
    return {
        "$schema": "http://json-schema.org/draft-04/hyper-schema",
        "title": "Heroku Platform API",
        "description": "The platform API empowers developers to automate.",
        "version": "3",
        "type": "object",
        "definitions": {
            "app": {
                "title": "App",
                "description": "An app represents the program that you would like to deploy.",
                "type": "object",
                "definitions": {
                    "id": {
                        "description": "unique identifier of app",
                        "format": "uuid",
                        "type": "string",
                    },
                    "name": {
                        "description": "unique name of app",
                        "type": "string",
                    },
                    "identity": {
                        "anyOf": [
                            {"$ref": "#/definitions/app/definitions/id"},
                            {"$ref": "#/definitions/app/definitions/name"},
                        ]
                    },
                    "created_at": {"format": "date-time", "type": "string"},
                    "maintenance": {"type": "boolean"},
                    "stack": {"type": ["null", "string"]},
                },
                "properties": {
                    "created_at": {"$ref": "#/definitions/app/definitions/created_at"},
                    "id": {"$ref": "#/definitions/app/definitions/id"},
                    "maintenance": {"$ref": "#/definitions/app/definitions/maintenance"},
                    "name": {"$ref": "#/definitions/app/definitions/name"},
                    "stack": {"$ref": "#/definitions/app/definitions/stack"},
                },
                "required": ["id", "name"],
                "links": [
                    {
                        "title": "Create",
                        "rel": "create",
                        "method": "POST",
                        "href": "/apps",
                        "schema": {
                            "type": "object",
                            "properties": {
                                "name": {"$ref": "#/definitions/app/definitions/name"},
                                "stack": {"$ref": "#/definitions/app/definitions/stack"},
                            },
                        },
                        "targetSchema": {"$ref": "#/definitions/app"},
                    },
                    {
                        "title": "Delete",
                        "rel": "destroy",
                        "method": "DELETE",
                        "href": APP_IDENTITY_HREF,
                    },
                    {
                        "title": "Info",
                        "rel": "self",
                        "method": "GET",
                        "href": APP_IDENTITY_HREF,
                        "targetSchema": {"$ref": "#/definitions/app"},
                    },
                    {
                        "title": "List",
                        "rel": "instances",
                        "method": "GET",
                        "href": "/apps",
                        "targetSchema": {
                            "type": "array",
                            "items": {"$ref": "#/definitions/app"},
                        },
                    },
                    {
                        "title": "Update",
                        "rel": "update",
                        "method": "PATCH",
                        "href": APP_IDENTITY_HREF,
                        "schema": {
                            "type": "object",
                            "properties": {
                                "maintenance": {
                                    "$ref": "#/definitions/app/definitions/maintenance"
                                },
                            },
                        },
                        "targetSchema": {"$ref": "#/definitions/app"},
                    },
                ],
            },
            "config-var": {
                "title": "Config Vars",
                "type": "object",
                "additionalProperties": False,
                "patternProperties": {
                    "^\\w+$": {"type": ["string", "null"]},
                },
                "links": [
                    {
                        "title": "Info",
                        "rel": "self",
                        "method": "GET",
                        "href": APP_IDENTITY_HREF + "/config-vars",
                        "targetSchema": {"$ref": "#/definitions/config-var"},
                    },
                ],
            },
            "region": {
                "description": "deployment region",
                "type": "string",
            },
        },
        "properties": {
            "app": {"$ref": "#/definitions/app"},
            "config-var": {"$ref": "#/definitions/config-var"},
            "region": {"$ref": "#/definitions/region"},
        },
        "links": [
            {"href": "https://api.heroku.com", "rel": "self"},
        ],
    }


@pytest.fixture
def sample_schema() -> dict[str, Any]:
    return _sample_schema()


@pytest.fixture
def generator_config(monkeypatch: pytest.MonkeyPatch) -> GeneratorConfig:
    """Generator configuration with defaults, isolated from the environment."""
    for name in (
        "SCHEMATIC_BOOLEAN_TYPE",
        "SCHEMATIC_STRING_TYPE",
        "SCHEMATIC_TIMESTAMP_TYPE",
        "SCHEMATIC_NUMBER_TYPE",
        "SCHEMATIC_INTEGER_TYPE",
        "SCHEMATIC_DYNAMIC_TYPE",
        "SCHEMATIC_BODY_PARAMETER",
        "SCHEMATIC_RANGE_PARAMETER",
        "SCHEMATIC_RANGE_TYPE",
        "SCHEMATIC_ERROR_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)
    return GeneratorConfig()


@pytest.fixture
def document(sample_schema: dict[str, Any], generator_config: GeneratorConfig) -> Document:
    return Document.from_dict(sample_schema, generator_config)


@pytest.fixture
def renderer(generator_config: GeneratorConfig) -> TypeRenderer:
    return TypeRenderer(generator_config)
