"""Ollama adapter for poster extraction."""

import json
import logging
from typing import Any, Dict, List

import httpx

from poster_extractor.adapters.base import VisionAdapter, split_data_url
from poster_extractor.config import EXTRACTOR_MODEL_VISION, MODEL_TIMEOUT, OLLAMA_URL
from poster_extractor.errors import ExternalModelError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llava"


class OllamaAdapter(VisionAdapter):
    """Ollama-based vision adapter."""

    name = "ollama"

    def __init__(self):
        self.base_url = OLLAMA_URL
        self.vision_model = EXTRACTOR_MODEL_VISION or DEFAULT_MODEL
        self.timeout = MODEL_TIMEOUT

    async def complete(
        self, messages: List[Dict[str, Any]], json_schema: Dict[str, Any], max_tokens: int
    ) -> Any:
        """Run the vision model through Ollama's chat endpoint."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/api/chat",
                    json={
                        "model": self.vision_model,
                        "messages": [self._to_ollama(m) for m in messages],
                        "stream": False,
                        "format": json_schema,
                        "options": {"num_predict": max_tokens},
                    },
                )
                response.raise_for_status()
                result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Ollama request failed: {e}")
            raise ExternalModelError(f"Ollama request failed: {e}") from e

        message = result.get("message") if isinstance(result, dict) else None
        if not isinstance(message, dict) or not isinstance(message.get("content", ""), str):
            raise ExternalModelError("Ollama response has no message content")

        generated_text = message.get("content", "")
        try:
            return json.loads(generated_text)
        except json.JSONDecodeError:
            logger.warning("Ollama output is not valid JSON; returning raw text")
            return generated_text

    async def is_available(self) -> bool:
        """Check if Ollama is reachable."""
        try:
            async with httpx.AsyncClient(timeout=5.0) as client:
                response = await client.get(f"{self.base_url}/api/tags")
                return response.status_code == 200
        except Exception as e:
            logger.warning(f"Ollama availability check failed: {e}")
            return False

    def _to_ollama(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """Convert a chat message; images go in a separate base64 list."""
        content = message["content"]
        if isinstance(content, str):
            return {"role": message["role"], "content": content}

        texts = []
        images = []
        for part in content:
            if part["type"] == "image_url":
                _, data = split_data_url(part["image_url"]["url"])
                images.append(data)
            elif part["type"] == "text":
                texts.append(part["text"])
        return {"role": message["role"], "content": "\n".join(texts), "images": images}
