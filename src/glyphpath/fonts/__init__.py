"""Font registry and font resources.

Key classes:
- FontRegistry: Family name to FontResource, with first-registered fallback
- FontResource: One font source plus its loading state
- LoadState: UNLOADED, LOADING, LOADED or FAILED
"""

from glyphpath.fonts.registry import FontRegistry
from glyphpath.fonts.resource import FontResource, LoadState

__all__ = [
    "FontRegistry",
    "FontResource",
    "LoadState",
]
