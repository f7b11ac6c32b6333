"""
Color detection in parsed documents and in-place recoloring.
The caller supplies the document text and its syntax tree; offsets in
the responses index into that same text.
"""

import logging
from fastapi import HTTPException, APIRouter

from engine import ColorEngineError, apply, render, scan, scan_ranges
from schemas.requests import RecolorRequest, RenderRequest, ScanRequest
from schemas.responses import ErrorResponse, RecolorResponse, RenderResponse, ScanResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "/scan_colors",
    response_model=ScanResponse,
    responses={400: {"model": ErrorResponse}},
    operation_id="scan_colors",
    description="Find every hex, rgb(), hsl() and named color in a parsed stylesheet or HTML document",
)
def scan_colors(request: ScanRequest):
    """Scan the requested ranges, or the whole tree."""
    try:
        if request.ranges is None:
            tokens = scan(request.tree, None, request.document)
        else:
            tokens = scan_ranges(request.tree, [(r.start, r.end) for r in request.ranges], request.document)
    except ColorEngineError as e:
        logger.warning("rejected tree: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return ScanResponse(tokens=tokens)

@router.post(
    "/render_color",
    response_model=RenderResponse,
    operation_id="render_color",
    description="Render a newly picked color in the notation of a scanned token",
)
def render_color(request: RenderRequest):
    """Replacement text for the token's span."""
    token = request.token
    return RenderResponse(
        text=render(token, request.color),
        source_from=token.source_from,
        source_to=token.source_to,
    )

@router.post(
    "/recolor",
    response_model=RecolorResponse,
    responses={400: {"model": ErrorResponse}},
    operation_id="recolor",
    description="Replace a scanned color in the document with a newly picked color",
)
def recolor(request: RecolorRequest):
    """Apply the replacement and return the new document."""
    if request.token.source_to > len(request.document):
        raise HTTPException(status_code=400, detail="Token span lies outside the document")
    return RecolorResponse(document=apply(request.document, request.token, request.color))
