"""Exceptions raised by the extraction pipeline."""


class ExtractionError(Exception):
    """Base class for every error surfaced to API callers."""


class SchemaNotFound(ExtractionError):
    """No registry entry matches the requested schema name."""

    def __init__(self, name: str):
        super().__init__(f"Schema '{name}' not found")
        self.name = name


class InvalidUpload(ExtractionError):
    """The uploaded image is missing, empty, or has no MIME type."""


class UnsupportedFieldType(ExtractionError):
    """A field spec uses a type marker the compiler does not know."""

    def __init__(self, field_name: str, field_type: str):
        super().__init__(f"Unsupported type '{field_type}' for field '{field_name}'")
        self.field_name = field_name
        self.field_type = field_type


class ExternalModelError(ExtractionError):
    """The model provider failed or could not be reached."""


class ProviderNotConfigured(ExtractionError):
    """The configured model provider is missing credentials or settings."""
