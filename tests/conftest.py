"""Shared fixtures for the swagger_types test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from swagger_types.codegen.core.config import GeneratorConfig
from swagger_types.codegen.languages.flow import FlowGenerator
from swagger_types.codegen.languages.typescript import TypeScriptGenerator


@pytest.fixture
def pet_order_document() -> dict[str, Any]:
    return {
        "definitions": {
            "Pet": {
                "type": "object",
                "properties": {"name": {"type": "string"}},
            },
            "Order": {
                "type": "object",
                "properties": {"pet": {"$ref": "#/definitions/Pet"}},
            },
        }
    }


@pytest.fixture
def petstore_document() -> dict[str, Any]:
    return {
        "swagger": "2.0",
        "definitions": {
            "Order": {
                "type": "object",
                "properties": {
                    "ID": {"type": "integer", "format": "int64"},
                    "petId": {"type": "integer"},
                    "quantity": {"type": "integer", "format": "int32"},
                    "shipDate": {"type": "string", "format": "date-time"},
                    "complete": {"type": "boolean"},
                },
            },
            "Category": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                },
            },
            "Tag": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                },
            },
            "Pet": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "category": {"$ref": "#/definitions/Category"},
                    "Name": {"type": "string"},
                    "photoUrls": {"type": "array", "items": {"type": "string"}},
                    "tags": {
                        "type": "array",
                        "items": {"$ref": "#/definitions/Tag"},
                    },
                },
            },
        },
    }


@pytest.fixture
def flow_generator() -> FlowGenerator:
    return FlowGenerator(GeneratorConfig())


@pytest.fixture
def ts_generator() -> TypeScriptGenerator:
    return TypeScriptGenerator(GeneratorConfig(use_tabs=False, indent_size=2))


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(data: Any, name: str = "swagger.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
