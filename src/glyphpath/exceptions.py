"""Exception hierarchy for glyphpath."""


class GlyphPathError(Exception):
    """Base exception for all glyphpath errors."""

    pass


class FontError(GlyphPathError):
    """Errors related to loading a font resource."""

    pass


class InvalidSourceDataError(FontError):
    """Font source is neither a path, a data URI, nor a binary buffer."""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(
            f"Invalid font data of type '{type(source).__name__}': "
            "expected a file path, a data URI or a binary buffer"
        )


class FontParseError(FontError):
    """Font bytes could not be interpreted as a valid font."""

    def __init__(self, origin: str, reason: str) -> None:
        self.origin = origin
        self.reason = reason
        super().__init__(f"Could not parse font data from {origin}: {reason}")


class FontIOError(FontError):
    """Font file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font '{path}': {reason}")
