"""
Walks a syntax tree and collects every color it can recognize.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from engine.errors import MisplacedOverlayError, NestedOverlayError
from engine.recognizers import NODE_KINDS, RECOGNIZERS, NodeKind, overlay_of
from engine.tokens import ColorToken
from engine.tree import SyntaxNode, TextRange

logger = logging.getLogger(__name__)

# width of the opening quote of an attribute value
OVERLAY_DELIMITER_WIDTH = 1

RangeLike = Tuple[int, int]


def _recognize(node: SyntaxNode, text: str, base_offset: int) -> Optional[ColorToken]:
    for kind in NODE_KINDS.get(node.name, ()):
        recognize = RECOGNIZERS.get(kind)
        if recognize is None:
            continue
        result = recognize(text)
        if result:
            token = ColorToken(source_from=node.start, source_to=node.end, **result._asdict())
            return token.shifted(base_offset)
    return None


def _is_attribute(node: SyntaxNode) -> bool:
    return NodeKind.ATTRIBUTE_OVERLAY in NODE_KINDS.get(node.name, ())


def scan_subtree(tree: SyntaxNode,
                 base_offset: int,
                 document: str,
                 text_range: Optional[RangeLike] = None,
                 nested: bool = False) -> List[ColorToken]:
    """Scan `tree`, whose offsets are relative to `base_offset` in `document`.

    Returned tokens carry absolute document offsets. `text_range` is in
    the tree's own coordinates; None means the whole tree.
    """
    start, end = text_range if text_range is not None else tree.extent
    tokens: List[ColorToken] = []
    for node in tree.iterate(start, end):
        if _is_attribute(node):
            mounted = overlay_of(node)
            if mounted is not None:
                if nested:
                    raise NestedOverlayError(base_offset + node.start)
                overlay_base = base_offset + node.start + OVERLAY_DELIMITER_WIDTH
                logger.debug("scanning embedded tree at %d", overlay_base)
                tokens.extend(scan_subtree(mounted, overlay_base, document, nested=True))
            continue
        if node.overlay is not None:
            raise MisplacedOverlayError(node.name, base_offset + node.start)
        text = document[base_offset + node.start:base_offset + node.end]
        token = _recognize(node, text, base_offset)
        if token is not None:
            tokens.append(token)
    return tokens


def scan(tree: SyntaxNode, text_range: Optional[RangeLike], document: str) -> List[ColorToken]:
    """Every color token among the nodes of `tree` touching `text_range`."""
    tokens = scan_subtree(tree, 0, document, text_range)
    logger.debug("found %d color tokens in %s", len(tokens), text_range)
    return tokens


def scan_ranges(tree: SyntaxNode, ranges: Iterable[RangeLike], document: str) -> List[ColorToken]:
    """Scan several ranges (e.g. the visible parts of an editor) in order.

    Tokens reached from more than one range are reported once.
    """
    seen = set()
    tokens: List[ColorToken] = []
    for r in ranges:
        for token in scan(tree, TextRange(*r), document):
            if token not in seen:
                seen.add(token)
                tokens.append(token)
    return tokens
