"""Recognized color occurrences."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Notation(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    NAMED = "named"


HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class ColorToken(BaseModel):
    """A color found in a document.

    `source_from`/`source_to` is the half-open span of the notation text;
    `alpha` is the alpha fragment exactly as written, kept for re-emission.
    `function` and `separator` record how a call was spelled
    ("rgba", ", ") and are empty for hex literals and keywords.
    """

    model_config = ConfigDict(frozen=True)

    source_from: int = Field(ge=0)
    source_to: int = Field(ge=0)
    notation: Notation
    color: str = Field(pattern=HEX_COLOR_PATTERN)
    alpha: str = ""
    function: str = ""
    separator: str = ""

    @model_validator(mode="after")
    def _check_span(self) -> "ColorToken":
        if self.source_from >= self.source_to:
            raise ValueError("source_from must be smaller than source_to")
        return self

    def shifted(self, offset: int) -> "ColorToken":
        """Copy of this token moved by offset characters."""
        return self.model_copy(update={
            "source_from": self.source_from + offset,
            "source_to": self.source_to + offset,
        })
