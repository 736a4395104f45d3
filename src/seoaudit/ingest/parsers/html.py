"""HTML parser."""

from ..markup import (
    description_from_markup,
    headings_from_markup,
    soup_for,
    text_from_html,
    title_from_markup,
)
from ...models import PageMeta
from .base import FormatParser


class HtmlParser(FormatParser):
    """Parse HTML pages using BeautifulSoup."""

    def metadata(self, raw: str, body: str) -> PageMeta:
        soup = soup_for(body)
        return PageMeta(
            title=title_from_markup(soup),
            description=description_from_markup(soup),
            headings=headings_from_markup(soup),
        )

    def prose(self, body: str) -> str:
        return text_from_html(body)
