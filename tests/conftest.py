"""
Fixtures and a tiny stand-in for the host parser.

The real trees come from the editor's CSS/HTML grammar; these helpers
build the same node kinds (ColorLiteral, ValueName, CallExpression,
AttributeValue with a mounted stylesheet) for declaration values only.
"""

import re

import pytest
from fastapi.testclient import TestClient

from engine.tree import SyntaxNode

DECLARATION_RE = re.compile(r"([\w-]+)\s*:\s*([^;{}]*)")
VALUE_RE = re.compile(
    r"(?P<call>[a-zA-Z-]+\([^()]*\))"
    r"|(?P<hex>#\w+)"
    r"|(?P<number>-?\d[\w.%]*)"
    r"|(?P<ident>[a-zA-Z-]+)"
)
ATTRIBUTE_RE = re.compile(r'([\w-]+)=("[^"]*")')

KINDS = {
    "call": "CallExpression",
    "hex": "ColorLiteral",
    "number": "NumberLiteral",
    "ident": "ValueName",
}

STYLESHEET = """
.wow {
  font-family: Helvetica Neue;
  font-size: 17px;
  color: #ff0000;
  border-color: rgb(0, 255, 0%);
  background-color: #00f;
}

#alpha {
  color: #FF00FFAA;
  border-color: rgb(255, 50%, 64, 0.5);
}

.hex4 {
  color: #ABCD;
}

.named {
  color: red;
  background-color: blue;
  border-bottom-color: snow;
}

#hue {
  color: hsl(0, 100%, 50%);
}
"""

HTML = (
    '<div style="color: #abcd">x</div>\n'
    '<p class="red" style="background: rgb(1 2 3 / 0.5); border-color: teal">y</p>\n'
)


def _value_node(kind: str, start: int, end: int, text: str) -> SyntaxNode:
    children = []
    if kind == "CallExpression":
        callee = text.index("(")
        children.append(SyntaxNode(name="Callee", start=start, end=start + callee))
    return SyntaxNode(name=kind, start=start, end=end, children=children)


def parse_css(text: str) -> SyntaxNode:
    """Stylesheet tree whose leaves are the value tokens of each declaration."""
    declarations = []
    for decl in DECLARATION_RE.finditer(text):
        value_start = decl.start(2)
        values = [
            _value_node(KINDS[m.lastgroup], value_start + m.start(), value_start + m.end(), m.group())
            for m in VALUE_RE.finditer(decl.group(2))
        ]
        declarations.append(SyntaxNode(
            name="Declaration",
            start=decl.start(),
            end=decl.end(),
            children=[SyntaxNode(name="PropertyName", start=decl.start(1), end=decl.end(1))] + values,
        ))
    return SyntaxNode(name="StyleSheet", start=0, end=len(text), children=declarations)


def parse_html(text: str) -> SyntaxNode:
    """Document tree; style attribute values get a mounted stylesheet."""
    attributes = []
    for attr in ATTRIBUTE_RE.finditer(text):
        quoted = attr.group(2)
        overlay = parse_css(quoted[1:-1]) if attr.group(1) == "style" else None
        attributes.append(SyntaxNode(
            name="Attribute",
            start=attr.start(),
            end=attr.end(),
            children=[
                SyntaxNode(name="AttributeName", start=attr.start(1), end=attr.end(1)),
                SyntaxNode(name="AttributeValue", start=attr.start(2), end=attr.end(2), overlay=overlay),
            ],
        ))
    return SyntaxNode(name="Document", start=0, end=len(text), children=attributes)


def span_of(document: str, text: str, after: int = 0):
    start = document.index(text, after)
    return start, start + len(text)


@pytest.fixture
def stylesheet():
    return STYLESHEET, parse_css(STYLESHEET)


@pytest.fixture
def html():
    return HTML, parse_html(HTML)


@pytest.fixture
def client():
    from main import app
    return TestClient(app)
