"""
Per-notation recognizers.
Each takes the source text of one syntax node and returns a Recognition
(a ColorToken without its span) or None when the text is not a color.
"""

import re
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from engine.codec import hex_expand, hsl_to_hex, rgb_to_hex
from engine.named import lookup
from engine.tokens import Notation
from engine.tree import SyntaxNode


class Recognition(NamedTuple):
    notation: Notation
    color: str
    alpha: str = ""
    function: str = ""
    separator: str = ""


Recognizer = Callable[[str], Optional[Recognition]]

# Regular expression patterns
ws = r"\s*"
component = r"\d{1,3}%?"
sep = r"\s*,\s*|\s+"
alpha = r"\s*[,/]\s*(?:\d*\.\d+|\d+)%?"

HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

RGB_CALL_RE = re.compile(
    f"^(rgba?)\\({ws}({component})({sep})({component})(?:{sep})({component})({alpha})?{ws}\\)$",
    re.IGNORECASE | re.ASCII
)

HSL_CALL_RE = re.compile(
    f"^(hsla?)\\({ws}(\\d{{1,3}})(?:deg)?({sep})(\\d{{1,3}})%(?:{sep})(\\d{{1,3}})%({alpha})?{ws}\\)$",
    re.IGNORECASE | re.ASCII
)


def _separator_style(s: str) -> str:
    return ", " if "," in s else " "


# HEX -------------------------------------------------------------

def recognize_hex(text: str) -> Optional[Recognition]:
    if not HEX_RE.match(text):
        return None
    color, alpha_digits = hex_expand(text)
    return Recognition(Notation.HEX, color, alpha_digits)


# NAMED -----------------------------------------------------------

def recognize_named(text: str) -> Optional[Recognition]:
    color = lookup(text)
    if color is None:
        return None
    return Recognition(Notation.NAMED, color)


# RGB -------------------------------------------------------------

def recognize_rgb_call(text: str) -> Optional[Recognition]:
    """Match rgb(r, g, b[, a]) and rgb(r g b[ / a]); components may be percentages."""
    m = RGB_CALL_RE.match(text)
    if not m:
        return None
    fn, r, first_sep, g, b, a = m.groups()
    return Recognition(
        Notation.RGB,
        rgb_to_hex(r, g, b),
        a or "",
        fn,
        _separator_style(first_sep),
    )


# HSL -------------------------------------------------------------

def recognize_hsl_call(text: str) -> Optional[Recognition]:
    """Match hsl(h[deg], s%, l%[, a]) in comma or whitespace form."""
    m = HSL_CALL_RE.match(text)
    if not m:
        return None
    fn, h, first_sep, s, l, a = m.groups()
    return Recognition(
        Notation.HSL,
        hsl_to_hex(float(h), float(s), float(l)),
        a or "",
        fn,
        _separator_style(first_sep),
    )


# Embedded attribute ----------------------------------------------

def overlay_of(node: SyntaxNode) -> Optional[SyntaxNode]:
    """The tree mounted on an attribute value, if the host parser mounted one."""
    return node.overlay


# Dispatch --------------------------------------------------------

class NodeKind(Enum):
    HEX = "hex"
    NAMED = "named"
    RGB_CALL = "rgb_call"
    HSL_CALL = "hsl_call"
    ATTRIBUTE_OVERLAY = "attribute_overlay"


# syntax node names -> kinds tried on that node
NODE_KINDS: Dict[str, Tuple[NodeKind, ...]] = {
    "ColorLiteral": (NodeKind.HEX,),
    "ValueName": (NodeKind.NAMED,),
    "CallExpression": (NodeKind.RGB_CALL, NodeKind.HSL_CALL),
    "AttributeValue": (NodeKind.ATTRIBUTE_OVERLAY,),
}

RECOGNIZERS: Dict[NodeKind, Recognizer] = {
    NodeKind.HEX: recognize_hex,
    NodeKind.NAMED: recognize_named,
    NodeKind.RGB_CALL: recognize_rgb_call,
    NodeKind.HSL_CALL: recognize_hsl_call,
}


def recognize_text(text: str) -> Optional[Recognition]:
    """Try every notation on a bare color string."""
    s = text.strip()
    for recognize in RECOGNIZERS.values():
        result = recognize(s)
        if result:
            return result
    # keywords are case-insensitive outside a parsed stylesheet
    return recognize_named(s.lower())
