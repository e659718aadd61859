"""OpenAI adapter for poster extraction."""
import json
import logging
from typing import Any, Dict, List
from poster_extractor.adapters.base import VisionAdapter
from poster_extractor.config import EXTRACTOR_MODEL_VISION, MODEL_TIMEOUT, OPENAI_API_KEY
from poster_extractor.errors import ExternalModelError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class OpenAIAdapter(VisionAdapter):
    """OpenAI GPT-based vision adapter."""

    name = "openai"
    
    def __init__(self):
        if not OPENAI_API_KEY:
            raise ValueError("OPENAI_API_KEY environment variable is required")
        
        from openai import AsyncOpenAI
        self.client = AsyncOpenAI(api_key=OPENAI_API_KEY, timeout=MODEL_TIMEOUT)
        self.vision_model = EXTRACTOR_MODEL_VISION or DEFAULT_MODEL
    
    async def complete(
        self, messages: List[Dict[str, Any]], json_schema: Dict[str, Any], max_tokens: int
    ) -> Any:
        """Run GPT with structured outputs bound to the schema."""
        try:
            response = await self.client.chat.completions.create(
                model=self.vision_model,
                messages=messages,
                max_tokens=max_tokens,
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": "poster_extraction", "schema": json_schema},
                },
            )
        except Exception as e:
            logger.error(f"OpenAI request failed: {e}")
            raise ExternalModelError(f"OpenAI request failed: {e}") from e

        content = response.choices[0].message.content or ""
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            logger.warning("OpenAI output is not valid JSON; returning raw text")
            return content
    
    async def is_available(self) -> bool:
        """Check if OpenAI API is available."""
        try:
            await self.client.models.retrieve(self.vision_model)
            return True
        except Exception as e:
            logger.warning(f"OpenAI availability check failed: {e}")
            return False
