"""Compile schema definitions into JSON Schema documents."""

from typing import Any, Dict

from poster_extractor.errors import UnsupportedFieldType
from poster_extractor.schemas.base import FieldSpec, SchemaDefinition

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

SCALAR_TYPES = ("string", "boolean", "number", "integer")


def compile_schema(definition: SchemaDefinition) -> Dict[str, Any]:
    """Build the JSON Schema used to constrain and display model output.

    The result is a fresh dict on every call, so callers may hand it to a
    provider without affecting later requests.

    Args:
        definition: Schema definition from the registry

    Returns:
        JSON Schema document with an object root

    Raises:
        UnsupportedFieldType: If any field uses an unknown type marker
    """
    document: Dict[str, Any] = {"$schema": JSON_SCHEMA_DIALECT}
    document.update(_compile_object(definition.fields))
    return document


def _compile_object(fields: Dict[str, FieldSpec]) -> Dict[str, Any]:
    properties = {name: _compile_field(name, spec) for name, spec in fields.items()}
    return {
        "type": "object",
        "properties": properties,
        "required": [name for name, spec in fields.items() if spec.required],
        "additionalProperties": False,
    }


def _compile_field(name: str, spec: FieldSpec) -> Dict[str, Any]:
    if spec.type in SCALAR_TYPES:
        node: Dict[str, Any] = {"type": spec.type}
    elif spec.type == "array":
        node = {"type": "array"}
        if spec.items is not None:
            node["items"] = _compile_field(name, spec.items)
    elif spec.type == "object":
        node = _compile_object(spec.properties)
    else:
        raise UnsupportedFieldType(name, spec.type)

    if spec.description:
        node["description"] = spec.description
    return node
