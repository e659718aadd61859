"""Anthropic adapter for poster extraction."""

import logging
from typing import Any, Dict, List

from poster_extractor.adapters.base import VisionAdapter, split_data_url
from poster_extractor.config import ANTHROPIC_API_KEY, EXTRACTOR_MODEL_VISION, MODEL_TIMEOUT
from poster_extractor.errors import ExternalModelError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5"
TOOL_NAME = "record_poster_details"


class AnthropicAdapter(VisionAdapter):
    """Anthropic Claude-based vision adapter.

    Claude has no JSON Schema response format, so the schema is offered as the
    input schema of a single forced tool and the tool input is the output.
    """

    name = "anthropic"

    def __init__(self):
        if not ANTHROPIC_API_KEY:
            raise ValueError("ANTHROPIC_API_KEY environment variable is required")

        from anthropic import AsyncAnthropic

        self.client = AsyncAnthropic(api_key=ANTHROPIC_API_KEY, timeout=MODEL_TIMEOUT)
        self.vision_model = EXTRACTOR_MODEL_VISION or DEFAULT_MODEL

    async def complete(
        self, messages: List[Dict[str, Any]], json_schema: Dict[str, Any], max_tokens: int
    ) -> Any:
        """Run Claude with a forced tool call bound to the schema."""
        system, content = self._to_anthropic(messages)
        try:
            message = await self.client.messages.create(
                model=self.vision_model,
                max_tokens=max_tokens,
                system=system,
                tools=[
                    {
                        "name": TOOL_NAME,
                        "description": "Record the details extracted from the poster",
                        "input_schema": json_schema,
                    }
                ],
                tool_choice={"type": "tool", "name": TOOL_NAME},
                messages=[{"role": "user", "content": content}],
            )
        except Exception as e:
            logger.error(f"Anthropic request failed: {e}")
            raise ExternalModelError(f"Anthropic request failed: {e}") from e

        # Extract tool use from response
        for block in message.content:
            if block.type == "tool_use":
                return block.input

        raise ExternalModelError(f"No {TOOL_NAME} tool use in Anthropic response")

    async def is_available(self) -> bool:
        """Check if Anthropic API is available."""
        try:
            await self.client.models.retrieve(self.vision_model)
            return True
        except Exception as e:
            logger.warning(f"Anthropic availability check failed: {e}")
            return False

    def _to_anthropic(self, messages: List[Dict[str, Any]]) -> tuple[str, List[Dict[str, Any]]]:
        """Split out the system prompt and merge user turns into content blocks."""
        system_parts = []
        blocks: List[Dict[str, Any]] = []
        for message in messages:
            content = message["content"]
            if message["role"] == "system":
                system_parts.append(content)
                continue
            if isinstance(content, str):
                blocks.append({"type": "text", "text": content})
                continue
            for part in content:
                if part["type"] == "image_url":
                    media_type, data = split_data_url(part["image_url"]["url"])
                    blocks.append(
                        {
                            "type": "image",
                            "source": {"type": "base64", "media_type": media_type, "data": data},
                        }
                    )
                elif part["type"] == "text":
                    blocks.append({"type": "text", "text": part["text"]})
        return "\n".join(system_parts), blocks
