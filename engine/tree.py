"""
Syntax tree interface consumed by the scanner.

The host parser produces the tree; nodes carry a kind name, a half-open
span and, for attribute values written in another grammar (inline
`style="..."`), an `overlay` tree whose offsets start after the opening
quote. Only attribute value nodes may carry an overlay; the scanner
rejects one mounted anywhere else.
"""

from typing import Iterator, List, NamedTuple, Optional

from pydantic import BaseModel, Field


class TextRange(NamedTuple):
    start: int
    end: int


class SyntaxNode(BaseModel):
    name: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    children: List["SyntaxNode"] = Field(default_factory=list)
    overlay: Optional["SyntaxNode"] = None

    def intersects(self, start: int, end: int) -> bool:
        """True when the node touches [start, end]."""
        return self.start <= end and self.end >= start

    def iterate(self, start: Optional[int] = None, end: Optional[int] = None) -> Iterator["SyntaxNode"]:
        """Yield this node and its descendants in document order.

        Subtrees that do not touch [start, end] are skipped entirely.
        """
        lo = self.start if start is None else start
        hi = self.end if end is None else end
        stack = [self]
        while stack:
            node = stack.pop()
            if not node.intersects(lo, hi):
                continue
            yield node
            stack.extend(reversed(node.children))

    @property
    def extent(self) -> TextRange:
        return TextRange(self.start, self.end)


SyntaxNode.model_rebuild()
