"""Astro component parser."""

import re

from ..frontmatter import strip_frontmatter
from ...models import PageMeta
from .html import HtmlParser

_ASSIGN = r"\b(?:const|let|var)\s+{name}\s*=\s*([`'\"])([\s\S]*?)\1"
_LAYOUT_ATTR = r"<BaseLayout[^>]*\b{name}=([\"'])([^\"']+)\1"


def _source_value(raw: str, name: str) -> str | None:
    """Find ``name`` as a script assignment in the fence, else as a layout attribute."""
    start = raw.find("---")
    if start != -1:
        end = raw.find("\n---", start + 3)
        if end != -1:
            m = re.search(_ASSIGN.format(name=name), raw[start + 3:end])
            if m:
                return m.group(2).strip()
    m = re.search(_LAYOUT_ATTR.format(name=name), raw, re.IGNORECASE)
    return m.group(2).strip() if m else None


class AstroParser(HtmlParser):
    """Component script fence is dropped; the template is read as markup."""

    def body(self, raw: str) -> str:
        return strip_frontmatter(raw)

    def metadata(self, raw: str, body: str) -> PageMeta:
        meta = super().metadata(raw, body)
        if not meta.title:
            meta.title = _source_value(raw, "title")
        if not meta.description:
            meta.description = _source_value(raw, "description")
        return meta
