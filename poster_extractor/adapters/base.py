"""Base adapter interface for vision model providers."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from poster_extractor.errors import ExternalModelError


class VisionAdapter(ABC):
    """Abstract base class for image-understanding model adapters.

    Messages use the chat format built by the pipeline: ``role`` plus either a
    text ``content`` or a list of content parts, where an image part is
    ``{"type": "image_url", "image_url": {"url": <data URL>}}``. Each adapter
    translates that into its provider's wire format.
    """

    name = "base"

    @abstractmethod
    async def complete(
        self, messages: List[Dict[str, Any]], json_schema: Dict[str, Any], max_tokens: int
    ) -> Any:
        """Run the model with output constrained to a JSON Schema.

        Args:
            messages: Chat messages (system, user text, user image)
            json_schema: JSON Schema the output should conform to
            max_tokens: Output token ceiling

        Returns:
            The model's JSON output, untouched

        Raises:
            ExternalModelError: If the provider call fails
        """
        pass

    @abstractmethod
    async def is_available(self) -> bool:
        """Check if the provider is reachable.

        Returns:
            True if available, False otherwise
        """
        pass


def split_data_url(url: str) -> Tuple[str, str]:
    """Split a base64 data URL into its MIME type and payload.

    Args:
        url: URL of the form ``data:<mime>;base64,<data>``

    Returns:
        Tuple of (mime_type, base64_data)
    """
    header, sep, data = url.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ExternalModelError("Image must be passed as a base64 data URL")
    return header[len("data:") : -len(";base64")], data
