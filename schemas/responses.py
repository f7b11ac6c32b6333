from pydantic import BaseModel, Field
from typing import List, Optional

from engine.tokens import ColorToken

class SuccessResponse(BaseModel):
    success: bool = Field(..., description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="The converted color code")

class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Why the request was rejected")

class ScanResponse(BaseModel):
    tokens: List[ColorToken] = Field(default_factory=list, description="Colors found, in document order")

class RenderResponse(BaseModel):
    text: str = Field(..., description="Replacement text in the token's notation")
    source_from: int = Field(..., description="Start of the span to replace")
    source_to: int = Field(..., description="End of the span to replace")

class RecolorResponse(BaseModel):
    document: str = Field(..., description="Document text after the replacement")
