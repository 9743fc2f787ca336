"""POST /api/parse, /api/export, /api/format, /api/html and /api/edit."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from coda.config import Settings
from coda.dependencies import get_settings
from coda.models.document import Document
from coda.models.export_config import ExportConfig
from coda.models.requests import EditRequest, ExportRequest, FormatRequest, HtmlRequest, ParseRequest
from coda.models.responses import EditResponse, HtmlResponse, ParseResponse, SourceResponse
from coda.svg.edit_applier import apply_edits
from coda.svg.errors import DocumentError
from coda.svg.html import export_html
from coda.svg.parser import parse_text
from coda.svg.serializer import export_text

router = APIRouter()
logger = logging.getLogger(__name__)


def _parse_source(source: str, settings: Settings) -> Document:
    """Parse request text, mapping failures to HTTP errors."""
    if len(source) > settings.max_document_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Document has {len(source)} chars, limit is {settings.max_document_chars}",
        )
    try:
        return parse_text(source)
    except DocumentError as e:
        logger.warning("Parse failed: %s", e)
        raise HTTPException(status_code=422, detail=e.to_dict()) from e


def _export(document: Document, config: ExportConfig | None, settings: Settings) -> str:
    if config is None:
        config = ExportConfig(tab_size=settings.default_tab_size, line_break=settings.default_line_break)
    try:
        return export_text(document, config)
    except DocumentError as e:
        logger.warning("Export failed: %s", e)
        raise HTTPException(status_code=422, detail=e.to_dict()) from e


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest, settings: Settings = Depends(get_settings)) -> ParseResponse:
    document = _parse_source(req.source, settings)
    return ParseResponse(document=document, shape_count=sum(1 for _ in document.walk()))


@router.post("/export", response_model=SourceResponse)
async def export(req: ExportRequest, settings: Settings = Depends(get_settings)) -> SourceResponse:
    return SourceResponse(source=_export(req.document, req.config, settings))


@router.post("/format", response_model=SourceResponse)
async def format_source(req: FormatRequest, settings: Settings = Depends(get_settings)) -> SourceResponse:
    document = _parse_source(req.source, settings)
    return SourceResponse(source=_export(document, req.config, settings))


@router.post("/html", response_model=HtmlResponse)
async def html(req: HtmlRequest, settings: Settings = Depends(get_settings)) -> HtmlResponse:
    return HtmlResponse(html=export_html(_parse_source(req.source, settings)))


@router.post("/edit", response_model=EditResponse)
async def edit(req: EditRequest, settings: Settings = Depends(get_settings)) -> EditResponse:
    document = _parse_source(req.source, settings)
    result = apply_edits(document, req.operations)
    logger.info("Edit: %d applied, %d skipped", result.applied, len(result.skipped))
    return EditResponse(
        source=_export(result.document, req.config, settings),
        applied=result.applied,
        skipped=result.skipped,
    )
