"""Tests for the schema registry and JSON Schema compiler."""
import pytest
from poster_extractor.errors import SchemaNotFound, UnsupportedFieldType
from poster_extractor.schemas import DEFAULT_REGISTRY, SchemaRegistry, compile_schema
from poster_extractor.schemas.bands import BANDS_ONLY
from poster_extractor.schemas.base import FieldSpec, SchemaDefinition, array_of, object_of, string
from poster_extractor.schemas.events import EVENTS


def test_default_registry_names():
    """Test registry lists schemas in declaration order."""
    assert DEFAULT_REGISTRY.names() == ["Bands Only", "Events"]


def test_every_listed_name_resolves():
    """Test every listed schema name resolves to its definition."""
    for name in DEFAULT_REGISTRY.names():
        definition = DEFAULT_REGISTRY.resolve(name)
        assert definition is not None
        assert definition.name == name


def test_resolve_unknown_name():
    """Test unknown schema names raise SchemaNotFound."""
    with pytest.raises(SchemaNotFound) as exc_info:
        DEFAULT_REGISTRY.resolve("nonexistent")

    assert exc_info.value.name == "nonexistent"


def test_resolve_is_exact_match():
    """Test lookup does not ignore case or whitespace."""
    with pytest.raises(SchemaNotFound):
        DEFAULT_REGISTRY.resolve("bands only")
    with pytest.raises(SchemaNotFound):
        DEFAULT_REGISTRY.resolve("Events ")


def test_registry_rejects_duplicate_names():
    """Test duplicate schema names are refused at construction."""
    with pytest.raises(ValueError):
        SchemaRegistry([BANDS_ONLY, BANDS_ONLY])


def test_schema_definitions_are_frozen():
    """Test definitions cannot be reassigned at runtime."""
    with pytest.raises(Exception):
        BANDS_ONLY.name = "Other"


def test_compile_bands_only():
    """Test Bands Only compiles to an array of strings."""
    schema = compile_schema(BANDS_ONLY)

    assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
    assert schema["type"] == "object"
    assert schema["required"] == ["bands"]
    assert schema["additionalProperties"] is False
    assert schema["properties"]["bands"] == {
        "type": "array",
        "items": {"type": "string", "description": "The name of the band"},
    }


def test_compile_events():
    """Test Events compiles nested objects with descriptions and required lists."""
    schema = compile_schema(EVENTS)

    events = schema["properties"]["events"]
    assert events["type"] == "array"

    event = events["items"]
    assert event["type"] == "object"
    assert event["required"] == ["venue", "location", "date", "isUpcoming"]
    assert event["additionalProperties"] is False
    assert event["properties"]["isUpcoming"] == {
        "type": "boolean",
        "description": "Is this date in the future?",
    }
    assert "ISO-8601" in event["properties"]["date"]["description"]


def test_compile_is_deterministic():
    """Test compiling twice gives equal but independent documents."""
    first = compile_schema(EVENTS)
    second = compile_schema(EVENTS)

    assert first == second
    assert first is not second
    first["properties"].clear()
    assert compile_schema(EVENTS) == second


def test_compile_optional_fields():
    """Test optional fields are left out of the required list."""
    definition = SchemaDefinition(
        name="Optional",
        fields={
            "headliner": string("Top billed act"),
            "support": array_of(string(), required=False),
            "promoter": object_of({"name": string()}, required=False),
        },
    )

    schema = compile_schema(definition)

    assert schema["required"] == ["headliner"]
    assert list(schema["properties"]) == ["headliner", "support", "promoter"]
    assert "description" not in schema["properties"]["support"]
    assert schema["properties"]["promoter"]["required"] == ["name"]


def test_compile_number_and_integer():
    """Test numeric types map directly."""
    definition = SchemaDefinition(
        name="Prices",
        fields={
            "price": FieldSpec(type="number"),
            "age_limit": FieldSpec(type="integer", description="Minimum age"),
        },
    )

    schema = compile_schema(definition)

    assert schema["properties"]["price"] == {"type": "number"}
    assert schema["properties"]["age_limit"] == {"type": "integer", "description": "Minimum age"}


def test_compile_unsupported_type():
    """Test unknown type markers raise UnsupportedFieldType."""
    definition = SchemaDefinition(
        name="Broken",
        fields={"tickets": array_of(FieldSpec(type="money"))},
    )

    with pytest.raises(UnsupportedFieldType) as exc_info:
        compile_schema(definition)

    assert exc_info.value.field_type == "money"
    assert exc_info.value.field_name == "tickets"
