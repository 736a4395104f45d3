"""Source parsers for the audited file formats."""

from .astro import AstroParser
from .base import FormatParser
from .html import HtmlParser
from .json_parser import JsonParser
from .markdown import MarkdownParser

PARSERS = {
    ".md": MarkdownParser,
    ".mdx": MarkdownParser,
    ".astro": AstroParser,
    ".html": HtmlParser,
    ".json": JsonParser,
}


def parser_for(ext: str) -> FormatParser:
    """Instantiate the parser for an extension; unknown formats pass through."""
    return PARSERS.get(ext.lower(), FormatParser)()


__all__ = ["PARSERS", "parser_for", "FormatParser", "MarkdownParser", "AstroParser", "HtmlParser", "JsonParser"]
