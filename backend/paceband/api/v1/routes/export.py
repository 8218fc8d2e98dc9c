"""
Export Routes

Endpoint for the printable PDF band.
"""

import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import Field

from paceband.features.splits import RaceDistance, SplitRequest, compute_splits
from paceband.features.band import render_band
from paceband.features.export import (
    ExportBusyError,
    ExportFailed,
    PrintExporter,
    export_guard,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 6266 UTF-8 name."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "_")
    return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename)}'


class ExportRequest(SplitRequest):
    """Request for a PDF band."""
    theme: Optional[str] = Field(default=None, description="Theme key, e.g. 'classic'")


@router.post(
    "/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def export_pdf(request: ExportRequest):
    """
    Render the band and return it as a one-page A4 PDF.

    The band is printed 60mm wide (configurable) so it can be cut
    out and worn. Only one export runs at a time.
    """
    try:
        splits = compute_splits(request.goal_time, request.distance, request.unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if splits is None:
        raise HTTPException(
            status_code=422,
            detail=f"Cannot parse goal time: {request.goal_time!r} (expected H:MM:SS)"
        )

    surface = render_band(
        splits,
        request.goal_time,
        RaceDistance(request.distance, request.unit),
        theme=request.theme,
    )

    try:
        with export_guard.acquire():
            result = await PrintExporter().export(surface, request.goal_time)
    except ExportBusyError as e:
        logger.warning(f"Export for {request.goal_time} rejected: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    if isinstance(result, ExportFailed):
        raise HTTPException(status_code=500, detail=result.message)

    return Response(
        content=result.content,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(result.filename)},
    )
