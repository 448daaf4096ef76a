"""Font resource and its loading state machine.

A FontResource starts UNLOADED. Each load attempt moves it to LOADING and
then to LOADED or FAILED. ``load_sync`` and ``load_async`` are two entry
points into the same transitions, so both end in identical states.
"""

import asyncio
from enum import Enum

import structlog

from glyphpath.exceptions import FontError
from glyphpath.io.font import ParsedFont
from glyphpath.io.source import FontSource, describe_source, read_source, read_source_async

logger = structlog.get_logger(__name__)


class LoadState(str, Enum):
    """Loading state of a font resource."""

    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class FontResource:
    """One registered font: where it comes from and, once loaded, its data.

    ``font`` is set if and only if ``state`` is LOADED. A FAILED resource
    keeps the exception in ``error`` and is only retried by an explicit
    load call.

    Attributes:
        family: Registry key
        source: File path, data URI or binary buffer
        weight: Descriptive only, never used for lookup
        style: Descriptive only, never used for lookup
        variant: Descriptive only, never used for lookup
    """

    def __init__(
        self,
        source: FontSource,
        family: str,
        weight: int | None = None,
        style: str | None = None,
        variant: str | None = None,
    ) -> None:
        self.source = source
        self.family = family
        self.weight = weight
        self.style = style
        self.variant = variant
        self._state = LoadState.UNLOADED
        self._font: ParsedFont | None = None
        self._error: FontError | None = None
        self._pending: asyncio.Task[None] | None = None

    def __repr__(self) -> str:
        return f"FontResource(family={self.family!r}, state={self._state.value})"

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def loaded(self) -> bool:
        return self._state is LoadState.LOADED

    @property
    def font(self) -> ParsedFont | None:
        """Parsed font, or None unless LOADED."""
        return self._font

    @property
    def error(self) -> FontError | None:
        """Why the last load attempt failed, or None."""
        return self._error

    def _begin(self) -> None:
        self._state = LoadState.LOADING
        self._error = None
        logger.debug("Loading font", family=self.family)

    def _finish(self, data: bytes) -> None:
        try:
            font = ParsedFont.from_bytes(data, origin=describe_source(self.source))
        except FontError as e:
            self._fail(e)
            raise
        self._font = font
        self._state = LoadState.LOADED
        logger.info(
            "Font loaded",
            family=self.family,
            format=font.format,
            glyphs=font.glyph_count,
            upm=font.units_per_em,
        )

    def _fail(self, error: FontError) -> None:
        self._font = None
        self._error = error
        self._state = LoadState.FAILED
        logger.error("Font load failed", family=self.family, error=str(error))

    def load_sync(self) -> "FontResource":
        """Load the font, blocking on file I/O and parsing.

        Returns:
            This resource, now LOADED

        Raises:
            InvalidSourceDataError: If the source is not a path, data URI or buffer
            FontIOError: If the font file cannot be read
            FontParseError: If the bytes are not a valid font
        """
        if self.loaded:
            return self

        self._begin()
        try:
            data = read_source(self.source)
        except FontError as e:
            self._fail(e)
            raise
        self._finish(data)
        return self

    async def load_async(self) -> None:
        """Load the font without blocking the event loop.

        Concurrent calls share one pending load, so the font is read and
        parsed once. Cancelling a caller does not cancel the shared load.

        Raises:
            InvalidSourceDataError: If the source is not a path, data URI or buffer
            FontIOError: If the font file cannot be read
            FontParseError: If the bytes are not a valid font
        """
        if self.loaded:
            return

        if self._pending is None or self._pending.done():
            self._pending = asyncio.ensure_future(self._load_once())
        pending = self._pending
        try:
            await asyncio.shield(pending)
        finally:
            if pending.done() and self._pending is pending:
                self._pending = None

    async def _load_once(self) -> None:
        self._begin()
        try:
            data = await read_source_async(self.source)
        except FontError as e:
            self._fail(e)
            raise
        except asyncio.CancelledError:
            # Abandoned attempt: the next load call starts over
            self._state = LoadState.UNLOADED
            logger.debug("Font load cancelled", family=self.family)
            raise
        self._finish(data)
