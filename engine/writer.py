"""
Regenerates color text in the notation a token was written in.
"""

from typing import Optional

from engine.codec import (
    alpha_to_hex,
    alpha_value,
    format_alpha,
    hex_alpha_value,
    hex_to_rgb_components,
    rgb_to_hsl,
    round_half_up,
)
from engine.named import reverse_lookup
from engine.recognizers import Recognition, recognize_text
from engine.tokens import ColorToken, Notation


def _hex_literal(color: str, alpha: str = "") -> str:
    return color.lower() + alpha


def render(token: ColorToken, color: str) -> str:
    """Text replacing token's span once the user picked `color` ("#rrggbb")."""
    function = token.function or token.notation.value
    separator = token.separator or ", "

    if token.notation is Notation.RGB:
        r, g, b = hex_to_rgb_components(color)
        return f"{function}({separator.join(str(c) for c in (r, g, b))}{token.alpha})"

    if token.notation is Notation.HSL:
        h, s, l = rgb_to_hsl(*hex_to_rgb_components(color))
        parts = (str(h), f"{round_half_up(s * 100)}%", f"{round_half_up(l * 100)}%")
        return f"{function}({separator.join(parts)}{token.alpha})"

    if token.notation is Notation.NAMED:
        name = reverse_lookup(color)
        return name if name is not None else _hex_literal(color)

    return _hex_literal(color, token.alpha)


def apply(document: str, token: ColorToken, color: str) -> str:
    """Document text after replacing the token's span with the rendered color."""
    return document[:token.source_from] + render(token, color) + document[token.source_to:]


def _opacity(found: Recognition) -> Optional[float]:
    if not found.alpha:
        return None
    if found.notation is Notation.HEX:
        return hex_alpha_value(found.alpha)
    return alpha_value(found.alpha.strip().lstrip(",/").strip())


def convert(text: str, notation: Notation) -> Optional[str]:
    """Rewrite a bare color string in another notation, or None if it is not a color.

    Alpha is carried into the target: hex digits become a `, a` call
    argument and call alpha becomes two hex digits. Keywords are opaque,
    so a translucent color asked for as a keyword stays a hex literal.
    """
    found = recognize_text(text)
    if found is None:
        return None
    if notation is found.notation:
        return render(ColorToken(source_from=0, source_to=1, **found._asdict()), found.color)

    opacity = _opacity(found)
    translucent = opacity is not None and opacity < 1
    if notation is Notation.HEX or (notation is Notation.NAMED and translucent):
        if opacity is None:
            digits = ""
        elif found.notation is Notation.HEX:
            digits = found.alpha
        else:
            digits = alpha_to_hex(opacity)
        return _hex_literal(found.color, digits)

    calls = (Notation.RGB, Notation.HSL)
    if notation is Notation.NAMED:
        template = ColorToken(source_from=0, source_to=1, notation=notation, color=found.color)
    elif found.notation in calls:
        template = ColorToken(source_from=0, source_to=1, notation=notation, color=found.color,
                              alpha=found.alpha, separator=found.separator)
    else:
        alpha = "" if opacity is None else f", {format_alpha(opacity)}"
        template = ColorToken(source_from=0, source_to=1, notation=notation, color=found.color, alpha=alpha)
    return render(template, found.color)
