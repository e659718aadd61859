"""Band names only."""

from poster_extractor.schemas.base import SchemaDefinition, array_of, string

BANDS_ONLY = SchemaDefinition(
    name="Bands Only",
    fields={
        "bands": array_of(string("The name of the band")),
    },
)
