"""Extraction pipeline: schema lookup, prompt, model call, result."""

import base64
import json
import logging
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from poster_extractor.adapters.base import VisionAdapter
from poster_extractor.config import MAX_OUTPUT_TOKENS
from poster_extractor.errors import InvalidUpload
from poster_extractor.schemas import (
    DEFAULT_REGISTRY,
    SchemaDefinition,
    SchemaRegistry,
    compile_schema,
)

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You help extract information from concert posters."

# The date lets the model infer a missing year from a weekday and date
USER_PROMPT = "Today is {now}. Help me with this poster please"


class ExtractionRequest(BaseModel):
    """One uploaded poster and the schema to extract with."""

    schema_name: str
    image_bytes: bytes
    image_mime_type: str = ""


class ExtractionResult(BaseModel):
    """Model output together with the JSON Schema that constrained it."""

    model_config = ConfigDict(protected_namespaces=())

    schema_name: str
    model_output: Any = None
    json_schema: Dict[str, Any]


def encode_data_url(image_bytes: bytes, mime_type: str) -> str:
    """Encode raw image bytes as a base64 data URL."""
    data = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{data}"


def format_now(now: datetime) -> str:
    """Render a timestamp with weekday, date, time and zone."""
    return now.strftime("%a %b %d %Y %H:%M:%S %Z").strip()


def build_messages(image_url: str, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """Build the chat messages sent to the vision model.

    Args:
        image_url: Data URL of the poster image
        now: Current time; defaults to local now

    Returns:
        System message, user message with the date, user message with the image
    """
    if now is None:
        now = datetime.now().astimezone()

    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT.format(now=format_now(now))},
        {
            "role": "user",
            "content": [{"type": "image_url", "image_url": {"url": image_url}}],
        },
    ]


def validate_request(
    request: ExtractionRequest, registry: SchemaRegistry = DEFAULT_REGISTRY
) -> SchemaDefinition:
    """Resolve the schema and check the upload before any model work.

    Raises:
        SchemaNotFound: If the schema name is not registered
        InvalidUpload: If the image is empty or has no MIME type
    """
    definition = registry.resolve(request.schema_name)

    if not request.image_bytes:
        raise InvalidUpload("Uploaded image is empty")
    if not request.image_mime_type:
        raise InvalidUpload("Uploaded image has no content type")
    return definition


async def extract(
    request: ExtractionRequest,
    adapter: VisionAdapter,
    registry: SchemaRegistry = DEFAULT_REGISTRY,
    max_tokens: int = MAX_OUTPUT_TOKENS,
    now: Optional[datetime] = None,
) -> ExtractionResult:
    """Extract structured poster details with the vision model.

    The model output is returned exactly as the provider produced it. It is
    not validated against the schema and nothing is retried.

    Args:
        request: Uploaded image and selected schema name
        adapter: Model provider adapter
        registry: Schemas to resolve the name against
        max_tokens: Output token ceiling for the model
        now: Current time for the prompt; defaults to local now

    Returns:
        ExtractionResult with the schema that was sent to the model

    Raises:
        SchemaNotFound: If the schema name is not registered
        InvalidUpload: If the image is empty or has no MIME type
        ExternalModelError: If the model provider fails
    """
    definition = validate_request(request, registry)

    image_url = encode_data_url(request.image_bytes, request.image_mime_type)
    json_schema = compile_schema(definition)
    messages = build_messages(image_url, now)

    start_time = time.time()
    model_output = await adapter.complete(messages, json_schema, max_tokens)
    elapsed_ms = int((time.time() - start_time) * 1000)

    # Log structured completion event
    logger.info(
        json.dumps(
            {
                "event": "extraction_complete",
                "schemaName": definition.name,
                "provider": adapter.name,
                "imageBytes": len(request.image_bytes),
                "elapsed_ms": elapsed_ms,
            }
        )
    )

    # model_construct keeps the exact schema object that was sent to the model
    return ExtractionResult.model_construct(
        schema_name=definition.name,
        model_output=model_output,
        json_schema=json_schema,
    )
