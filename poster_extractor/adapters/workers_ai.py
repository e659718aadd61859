"""Cloudflare Workers AI adapter for poster extraction."""

import logging
from typing import Any, Dict, List

import httpx

from poster_extractor.adapters.base import VisionAdapter
from poster_extractor.config import (
    CLOUDFLARE_ACCOUNT_ID,
    CLOUDFLARE_API_TOKEN,
    EXTRACTOR_MODEL_VISION,
    MODEL_TIMEOUT,
    WORKERS_AI_URL,
)
from poster_extractor.errors import ExternalModelError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "@cf/meta/llama-4-scout-17b-16e-instruct"


class WorkersAIAdapter(VisionAdapter):
    """Workers AI REST adapter.

    Workers AI accepts OpenAI-style messages with inline ``image_url`` parts,
    so the pipeline's messages are forwarded as-is.
    """

    name = "workers_ai"

    def __init__(self):
        if not CLOUDFLARE_ACCOUNT_ID or not CLOUDFLARE_API_TOKEN:
            raise ValueError(
                "CLOUDFLARE_ACCOUNT_ID and CLOUDFLARE_API_TOKEN environment variables are required"
            )

        self.base_url = WORKERS_AI_URL.rstrip("/")
        self.account_id = CLOUDFLARE_ACCOUNT_ID
        self.headers = {"Authorization": f"Bearer {CLOUDFLARE_API_TOKEN}"}
        self.model = EXTRACTOR_MODEL_VISION or DEFAULT_MODEL
        self.timeout = MODEL_TIMEOUT

    async def complete(
        self, messages: List[Dict[str, Any]], json_schema: Dict[str, Any], max_tokens: int
    ) -> Any:
        """Run the vision model through the Workers AI REST API."""
        url = f"{self.base_url}/accounts/{self.account_id}/ai/run/{self.model}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    headers=self.headers,
                    json={
                        "messages": messages,
                        "max_tokens": max_tokens,
                        "response_format": {
                            "type": "json_schema",
                            "json_schema": json_schema,
                        },
                    },
                )
                response.raise_for_status()
                body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers bodies that are not JSON
            logger.error(f"Workers AI request failed: {e}")
            raise ExternalModelError(f"Workers AI request failed: {e}") from e

        if not isinstance(body, dict):
            raise ExternalModelError("Workers AI response body is not a JSON object")
        if not body.get("success", True):
            raise ExternalModelError(f"Workers AI returned errors: {body.get('errors')}")

        result = body.get("result") or {}
        if not isinstance(result, dict) or "response" not in result:
            raise ExternalModelError("Workers AI response has no 'response' field")
        return result["response"]

    async def is_available(self) -> bool:
        """Check if the Workers AI API accepts our token."""
        try:
            async with httpx.AsyncClient(timeout=5.0) as client:
                response = await client.get(
                    f"{self.base_url}/user/tokens/verify", headers=self.headers
                )
                return response.status_code == 200
        except Exception as e:
            logger.warning(f"Workers AI availability check failed: {e}")
            return False
