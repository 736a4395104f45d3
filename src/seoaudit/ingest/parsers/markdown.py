"""Markdown and MDX parser."""

import re

from ..frontmatter import parse_simple_frontmatter, read_frontmatter_block, strip_frontmatter
from ..markup import headings_from_markdown
from ...models import PageMeta
from .base import FormatParser

_CODE_FENCE = re.compile(r"```[\s\S]*?```")
_INLINE_CODE = re.compile(r"`[^`]*`")
_TAG = re.compile(r"<[^>]+>")
_EXPRESSION = re.compile(r"\{[\s\S]*?\}")
_HEADING_MARK = re.compile(r"^\s*#+\s+", re.MULTILINE)
_LINK = re.compile(r"\[[^\]]*\]\(([^)]+)\)")
_IMAGE = re.compile(r"!\[[^\]]*\]\(([^)]+)\)")


class MarkdownParser(FormatParser):
    """Front-matter metadata plus line-based headings."""

    def body(self, raw: str) -> str:
        text = strip_frontmatter(raw)
        text = _CODE_FENCE.sub(" ", text)
        text = _INLINE_CODE.sub(" ", text)
        text = _TAG.sub(" ", text)
        return _EXPRESSION.sub(" ", text)

    def metadata(self, raw: str, body: str) -> PageMeta:
        meta = PageMeta(headings=headings_from_markdown(body))
        block = read_frontmatter_block(raw)
        if block:
            fm = parse_simple_frontmatter(block)
            meta.title = fm.get("title") or None
            meta.description = fm.get("description") or None
        return meta

    def prose(self, body: str) -> str:
        text = _HEADING_MARK.sub(" ", body)
        text = _LINK.sub(" ", text)
        text = _IMAGE.sub(" ", text)
        text = _EXPRESSION.sub(" ", text)
        return _TAG.sub(" ", text)
