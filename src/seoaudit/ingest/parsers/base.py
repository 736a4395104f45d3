"""Shared interface for per-format parsers."""

from ..markup import collapse
from ...models import PageMeta


class FormatParser:
    """Turns one source format into body text, metadata and scoring prose.

    Subclasses override the three views they treat differently; the defaults
    pass text through unchanged.
    """

    def body(self, raw: str) -> str:
        """Analyzable text with format noise removed."""
        return raw

    def metadata(self, raw: str, body: str) -> PageMeta:
        """Title, description and headings. ``raw`` keeps any front-matter."""
        return PageMeta()

    def prose(self, body: str) -> str:
        """Natural-language text used for readability and tokens."""
        return collapse(body)

    def fallback_h1(self, raw: str) -> str | None:
        """Last-resort H1 when neither headings nor a title were found."""
        return None
