"""JSON API routes: list schemas and extract from an uploaded poster."""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from poster_extractor.adapters import VisionAdapter
from poster_extractor.dependencies import get_adapter_loader, get_registry
from poster_extractor.errors import (
    ExternalModelError,
    InvalidUpload,
    ProviderNotConfigured,
    SchemaNotFound,
)
from poster_extractor.pipeline import ExtractionRequest, extract, validate_request
from poster_extractor.schemas import SchemaRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["extraction"])


async def read_upload(
    schema_name: Optional[str], upload: Optional[UploadFile]
) -> ExtractionRequest:
    """Turn the submitted form fields into an ExtractionRequest.

    Raises:
        InvalidUpload: If either field is missing
    """
    if not schema_name or upload is None:
        logger.warning(
            f"Missing information on upload: schema={schema_name!r} "
            f"upload={getattr(upload, 'filename', None)!r}"
        )
        raise InvalidUpload("Both 'schema' and 'upload' fields are required")

    return ExtractionRequest(
        schema_name=schema_name,
        image_bytes=await upload.read(),
        image_mime_type=upload.content_type or "",
    )


@router.get("/schemas")
async def list_schemas(registry: SchemaRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """List the names of all extraction schemas."""
    return {"result": registry.names()}


@router.post("/extract")
async def extract_poster(
    schema_name: Optional[str] = Form(None, alias="schema"),
    upload: Optional[UploadFile] = File(None),
    registry: SchemaRegistry = Depends(get_registry),
    load_adapter: Callable[[], VisionAdapter] = Depends(get_adapter_loader),
) -> Dict[str, Any]:
    """Extract structured data from a poster image.

    Missing fields, empty uploads and unknown schema names all answer 404,
    and are checked before the model adapter is built.
    """
    try:
        request = await read_upload(schema_name, upload)
        validate_request(request, registry)
        result = await extract(request, load_adapter(), registry)
    except SchemaNotFound as e:
        logger.warning(f"Schema name not found: {e.name!r}")
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidUpload as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProviderNotConfigured as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ExternalModelError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "schemaName": result.schema_name,
        "result": result.model_output,
        "jsonSchema": result.json_schema,
    }
