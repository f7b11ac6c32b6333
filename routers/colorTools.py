"""
Direct conversion of a single CSS color string between notations.
Supported: hex 3/4/6/8, rgb/rgba (comma or space separated, optional alpha),
hsl/hsla (comma or space separated, optional alpha), named keywords.
"""

import logging
from fastapi import HTTPException, APIRouter

from engine import Notation, convert
from schemas.requests import (
    ColorConvertRequest,
)
from schemas.responses import SuccessResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "/convert_color_code",
    response_model=SuccessResponse,
    responses={400: {"model": ErrorResponse}},
    operation_id="convert_color_code",
    description="Convert a CSS color code to a target format",
)
async def parse_and_convert(request: ColorConvertRequest):
    """Parse CSS color and convert to target format."""
    converted = convert(request.code, Notation(request.target))
    if converted is None:
        logger.info("rejected color code %r", request.code)
        raise HTTPException(status_code=400, detail="Invalid CSS color")
    return SuccessResponse(success=True, message=converted)
