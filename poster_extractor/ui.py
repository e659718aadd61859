"""HTML upload page and rendered extraction results."""

import logging
from pathlib import Path
from typing import Callable, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from poster_extractor.adapters import VisionAdapter
from poster_extractor.api import read_upload
from poster_extractor.dependencies import get_adapter_loader, get_registry
from poster_extractor.errors import (
    ExternalModelError,
    InvalidUpload,
    ProviderNotConfigured,
    SchemaNotFound,
)
from poster_extractor.highlight import highlight
from poster_extractor.pipeline import extract, validate_request
from poster_extractor.schemas import SchemaRegistry

logger = logging.getLogger(__name__)
router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@router.get("/", response_class=HTMLResponse)
async def ui_home(request: Request, registry: SchemaRegistry = Depends(get_registry)):
    return templates.TemplateResponse(
        request, "index.html", {"schemas": registry.names(), "selected": ""}
    )


@router.post("/", response_class=HTMLResponse)
async def ui_extract(
    request: Request,
    schema_name: Optional[str] = Form(None, alias="schema"),
    upload: Optional[UploadFile] = File(None),
    registry: SchemaRegistry = Depends(get_registry),
    load_adapter: Callable[[], VisionAdapter] = Depends(get_adapter_loader),
):
    context = {"schemas": registry.names(), "selected": schema_name or ""}
    try:
        extraction_request = await read_upload(schema_name, upload)
        validate_request(extraction_request, registry)
        result = await extract(extraction_request, load_adapter(), registry)
    except (SchemaNotFound, InvalidUpload) as e:
        return templates.TemplateResponse(
            request, "index.html", {**context, "error": str(e)}, status_code=404
        )
    except ProviderNotConfigured as e:
        return templates.TemplateResponse(
            request, "index.html", {**context, "error": str(e)}, status_code=503
        )
    except ExternalModelError as e:
        logger.warning(f"Extraction failed for schema {schema_name!r}: {e}")
        return templates.TemplateResponse(
            request, "index.html", {**context, "error": str(e)}, status_code=502
        )

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            **context,
            "result_html": highlight(result.model_output),
            "schema_html": highlight(result.json_schema),
        },
    )
