"""Schema registry."""

from typing import Iterable, List

from poster_extractor.errors import SchemaNotFound
from poster_extractor.schemas.bands import BANDS_ONLY
from poster_extractor.schemas.base import FieldSpec, SchemaDefinition
from poster_extractor.schemas.compiler import compile_schema
from poster_extractor.schemas.events import EVENTS


class SchemaRegistry:
    """Fixed, ordered set of extraction schemas.

    Built once at startup and shared read-only by every request.
    """

    def __init__(self, definitions: Iterable[SchemaDefinition]):
        self._definitions = tuple(definitions)
        names = [definition.name for definition in self._definitions]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate schema names: {', '.join(duplicates)}")

    def names(self) -> List[str]:
        """List schema names in registry order."""
        return [definition.name for definition in self._definitions]

    def resolve(self, name: str) -> SchemaDefinition:
        """Look up a schema by exact name.

        Args:
            name: Schema name as shown to the user

        Returns:
            The matching SchemaDefinition

        Raises:
            SchemaNotFound: If no schema has that name
        """
        for definition in self._definitions:
            if definition.name == name:
                return definition
        raise SchemaNotFound(name)

    def __len__(self) -> int:
        return len(self._definitions)


DEFAULT_REGISTRY = SchemaRegistry([BANDS_ONLY, EVENTS])


__all__ = [
    "DEFAULT_REGISTRY",
    "FieldSpec",
    "SchemaDefinition",
    "SchemaRegistry",
    "compile_schema",
]
