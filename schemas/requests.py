from pydantic import BaseModel, Field, model_validator
from typing import List, Literal, Optional

from engine.tokens import ColorToken, HEX_COLOR_PATTERN
from engine.tree import SyntaxNode

class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to convert")
    target: Literal["hex", "rgb", "hsl", "named"] = Field(..., description="The target color code format to convert to")

class TextRangeModel(BaseModel):
    start: int = Field(..., ge=0, description="Start offset (inclusive)")
    end: int = Field(..., ge=0, description="End offset")

    @model_validator(mode="after")
    def _ordered(self) -> "TextRangeModel":
        if self.end < self.start:
            raise ValueError("end must not precede start")
        return self

class ScanRequest(BaseModel):
    document: str = Field(..., description="Full document text the tree was parsed from")
    tree: SyntaxNode = Field(..., description="Syntax tree of the document")
    ranges: Optional[List[TextRangeModel]] = Field(None, description="Ranges to scan, the whole document when omitted")

class RenderRequest(BaseModel):
    token: ColorToken = Field(..., description="A token returned by scan_colors")
    color: str = Field(..., pattern=HEX_COLOR_PATTERN, description="The newly picked color as #rrggbb")

class RecolorRequest(RenderRequest):
    document: str = Field(..., description="Document text the token was scanned from")
