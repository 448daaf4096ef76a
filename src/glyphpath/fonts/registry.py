"""Font registry: family name to font resource.

The registry is an ordinary object, not a module-level global. Create one,
register fonts into it, and hand it to whatever needs to resolve families
(usually a TextContext). Lookup is by family name only; weight, style and
variant are stored on the resource as metadata.
"""

import asyncio
from collections.abc import Iterator

import structlog

from glyphpath.fonts.resource import FontResource
from glyphpath.io.source import FontSource

logger = structlog.get_logger(__name__)


class FontRegistry:
    """Insertion-ordered mapping of family name to FontResource.

    Registering an existing family replaces its resource (last write wins)
    but keeps the family's original position, so the fallback font used by
    ``resolve`` is always the first family ever registered.

    Example:
        registry = FontRegistry()
        registry.register("fonts/Inter.ttf", "Inter").load_sync()
        registry.resolve("Inter")
    """

    def __init__(self) -> None:
        self._fonts: dict[str, FontResource] = {}

    def register(
        self,
        source: FontSource,
        family: str,
        weight: int | None = None,
        style: str | None = None,
        variant: str | None = None,
    ) -> FontResource:
        """Register a font under ``family``. No I/O happens until it is loaded.

        Args:
            source: File path, ``data:`` URI or binary buffer
            family: Name to register the font under
            weight: Font weight (metadata only)
            style: Font style (metadata only)
            variant: Font variant (metadata only)

        Returns:
            The new, unloaded FontResource
        """
        if family in self._fonts:
            logger.debug("Replacing registered font", family=family)
        resource = FontResource(source, family, weight=weight, style=style, variant=variant)
        self._fonts[family] = resource
        return resource

    def get(self, family: str) -> FontResource | None:
        """Exact lookup, no fallback."""
        return self._fonts.get(family)

    def resolve(self, family: str) -> FontResource | None:
        """Find the font for ``family``.

        An unknown family falls back to the first registered font so that
        drawing still produces something readable.

        Returns:
            The matching resource, the fallback resource, or None if the
            registry is empty
        """
        resource = self._fonts.get(family)
        if resource is not None:
            return resource

        fallback = next(iter(self._fonts.values()), None)
        if fallback is not None:
            logger.warning(
                "Font family not found, using fallback", family=family, fallback=fallback.family
            )
        return fallback

    def families(self) -> list[str]:
        """Registered family names in registration order."""
        return list(self._fonts)

    def load_all(self) -> None:
        """Load every registered font, blocking. Stops at the first error."""
        for resource in self._fonts.values():
            resource.load_sync()

    async def load_all_async(self) -> None:
        """Load every registered font concurrently. Raises the first error."""
        await asyncio.gather(*(resource.load_async() for resource in self._fonts.values()))

    def __contains__(self, family: object) -> bool:
        return family in self._fonts

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[FontResource]:
        return iter(list(self._fonts.values()))
