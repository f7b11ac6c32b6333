from .requests import ColorConvertRequest, RecolorRequest, RenderRequest, ScanRequest, TextRangeModel
from .responses import SuccessResponse, ErrorResponse, ScanResponse, RenderResponse, RecolorResponse

__all__ = [
    "ColorConvertRequest",
    "RecolorRequest",
    "RenderRequest",
    "ScanRequest",
    "TextRangeModel",
    "SuccessResponse",
    "ErrorResponse",
    "ScanResponse",
    "RenderResponse",
    "RecolorResponse",
]
