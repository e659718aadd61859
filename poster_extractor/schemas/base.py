"""Field and schema definitions for poster extraction."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldSpec(BaseModel):
    """Shape of one field the model should extract."""

    model_config = ConfigDict(frozen=True)

    type: str  # string, boolean, number, integer, array, object
    description: Optional[str] = None
    required: bool = True
    items: Optional["FieldSpec"] = None  # arrays only
    properties: Dict[str, "FieldSpec"] = Field(default_factory=dict)  # objects only


class SchemaDefinition(BaseModel):
    """A named extraction schema offered to the user."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: Dict[str, FieldSpec]


def string(description: Optional[str] = None, required: bool = True) -> FieldSpec:
    return FieldSpec(type="string", description=description, required=required)


def boolean(description: Optional[str] = None, required: bool = True) -> FieldSpec:
    return FieldSpec(type="boolean", description=description, required=required)


def array_of(
    items: FieldSpec, description: Optional[str] = None, required: bool = True
) -> FieldSpec:
    return FieldSpec(
        type="array", items=items, description=description, required=required
    )


def object_of(
    properties: Dict[str, FieldSpec],
    description: Optional[str] = None,
    required: bool = True,
) -> FieldSpec:
    return FieldSpec(
        type="object",
        properties=properties,
        description=description,
        required=required,
    )
