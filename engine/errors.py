"""Exceptions raised by the color engine."""


class ColorEngineError(Exception):
    """Base class for engine errors."""


class NestedOverlayError(ColorEngineError):
    """An embedded tree was mounted inside another embedded tree."""

    def __init__(self, position: int):
        super().__init__(f"embedded tree nested inside another embedded tree at offset {position}")
        self.position = position


class MisplacedOverlayError(ColorEngineError):
    """An embedded tree was mounted on a node that is not an attribute value."""

    def __init__(self, name: str, position: int):
        super().__init__(f"embedded tree mounted on {name} node at offset {position}")
        self.name = name
        self.position = position
