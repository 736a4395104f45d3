"""JSON data record parser."""

import json
import logging
from typing import Any

from ...models import PageMeta
from ..markup import headings_from_markdown
from .markdown import MarkdownParser

logger = logging.getLogger(__name__)


def collect_strings(value: Any, out: list[str]) -> list[str]:
    """Depth-first collection of every string leaf."""
    if isinstance(value, str):
        out.append(value)
    elif isinstance(value, list):
        for v in value:
            collect_strings(v, out)
    elif isinstance(value, dict):
        for v in value.values():
            collect_strings(v, out)
    return out


def _load(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        logger.debug(f"Unparseable JSON record: {e}")
        return None


class JsonParser(MarkdownParser):
    """Records carry no page metadata; their string values are the text."""

    def body(self, raw: str) -> str:
        data = _load(raw)
        if data is None:
            return ""
        return "\n".join(collect_strings(data, []))

    def metadata(self, raw: str, body: str) -> PageMeta:
        return PageMeta(headings=headings_from_markdown(body))

    def fallback_h1(self, raw: str) -> str | None:
        data = _load(raw)
        if isinstance(data, dict):
            name = data.get("name")
            if isinstance(name, str) and name.strip():
                return name.strip()
        return None
