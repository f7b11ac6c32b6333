"""Color detection and notation codec for stylesheets and inline styles."""

from engine.codec import (
    hex_expand,
    hex_to_rgb_components,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_component_to_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from engine.errors import ColorEngineError, MisplacedOverlayError, NestedOverlayError
from engine.named import NAMED_COLORS, lookup, reverse_lookup
from engine.scanner import scan, scan_ranges, scan_subtree
from engine.tokens import ColorToken, Notation
from engine.tree import SyntaxNode, TextRange
from engine.writer import apply, convert, render

__all__ = [
    "ColorEngineError",
    "ColorToken",
    "MisplacedOverlayError",
    "NAMED_COLORS",
    "NestedOverlayError",
    "Notation",
    "SyntaxNode",
    "TextRange",
    "apply",
    "convert",
    "hex_expand",
    "hex_to_rgb_components",
    "hsl_to_hex",
    "hsl_to_rgb",
    "lookup",
    "render",
    "reverse_lookup",
    "rgb_component_to_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    "scan",
    "scan_ranges",
    "scan_subtree",
]
