"""Helpers for markup-bearing sources: text, headings, links and images."""

import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ..models import Headings

_ENTITIES = [("&amp;", "&"), ("&lt;", "<"), ("&gt;", ">"), ("&quot;", '"'), ("&#39;", "'")]
_EXPRESSION = re.compile(r"\{[\s\S]*?\}")
_WHITESPACE = re.compile(r"\s+")
_MD_LINK = re.compile(r"(?<!!)\[[^\]]*\]\(([^)]+)\)")
_MD_IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")


def soup_for(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def decode_entities(s: str) -> str:
    for entity, char in _ENTITIES:
        s = s.replace(entity, char)
    return s


def collapse(s: str) -> str:
    return _WHITESPACE.sub(" ", s).strip()


def text_from_html(fragment: str) -> str:
    """Visible prose of a markup fragment.

    Scripts, styles, tags and ``{...}`` template expressions are removed and
    whitespace is collapsed.
    """
    soup = soup_for(fragment)
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = _EXPRESSION.sub(" ", soup.get_text(" "))
    return decode_entities(collapse(text))


def _meta_content(soup: BeautifulSoup, **attrs) -> str | None:
    tag = soup.find("meta", attrs=attrs)
    content = tag.get("content") if tag else None
    if isinstance(content, str) and content.strip():
        return decode_entities(content.strip())
    return None


def title_from_markup(soup: BeautifulSoup) -> str | None:
    """``<title>``, then ``meta[name=title]``, then ``og:title``, then the first H1."""
    if soup.title:
        text = collapse(soup.title.get_text())
        if text:
            return decode_entities(text)
    meta = _meta_content(soup, name="title") or _meta_content(soup, property="og:title")
    if meta:
        return meta
    h1 = soup.find("h1")
    if h1:
        text = text_from_html(h1.decode_contents())
        if text:
            return text
    return None


def description_from_markup(soup: BeautifulSoup) -> str | None:
    return _meta_content(soup, name="description") or _meta_content(soup, property="og:description")


def headings_from_markup(soup: BeautifulSoup) -> Headings:
    headings = Headings()
    for level in ("h1", "h2", "h3"):
        texts = [text_from_html(el.decode_contents()) for el in soup.find_all(level)]
        setattr(headings, level, [t for t in texts if t])
    return headings


def headings_from_markdown(text: str) -> Headings:
    """ATX headings (``#``, ``##``, ``###``) read line by line."""
    headings = Headings()
    for line in text.splitlines():
        m = re.match(r"^\s*(#{1,3})\s+(.+)$", line)
        if m:
            getattr(headings, f"h{len(m.group(1))}").append(decode_entities(collapse(m.group(2))))
    return headings


def is_external(href: str, site_host: str) -> bool:
    """True for absolute URLs whose host differs from the audited site."""
    if not href:
        return False
    if href.startswith(("/", "#", ".")):
        return False
    try:
        host = urlparse(href).netloc
    except ValueError:
        return False
    return bool(host) and host.lower() != site_host.lower()


def extract_links(text: str, site_host: str) -> tuple[list[str], list[str]]:
    """Split ``<a href>`` and ``[label](url)`` targets into (internal, external)."""
    urls = [a.get("href") or "" for a in soup_for(text).find_all("a", href=True)]
    urls.extend(m.group(1).strip() for m in _MD_LINK.finditer(text))

    internal: list[str] = []
    external: list[str] = []
    for url in urls:
        (external if is_external(url, site_host) else internal).append(url)
    return internal, external


def count_images_without_alt(text: str) -> int:
    count = 0
    for img in soup_for(text).find_all("img"):
        alt = img.get("alt") or ""
        if not alt.strip():
            count += 1
    for m in _MD_IMAGE.finditer(text):
        if not m.group(1).strip():
            count += 1
    return count
