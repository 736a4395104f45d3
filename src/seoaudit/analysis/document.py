"""Per-document analysis: metadata, links, readability and term bags."""

from pathlib import Path
from urllib.parse import urlparse

from ..ingest.loader import guess_route_hint, load_file
from ..ingest.markup import count_images_without_alt, extract_links
from ..ingest.parsers import parser_for
from ..models import AuditSettings, DocumentMetrics, PageMeta
from ..text.lexical import build_ngrams, to_words, weighted_terms
from ..text.readability import compute_readability


def collect_warnings(meta: PageMeta, settings: AuditSettings) -> list[str]:
    """Metadata problems, always in the order title, description, H1, lengths."""
    warnings = []
    if not meta.title:
        warnings.append("Missing <title>")
    if not meta.description:
        warnings.append("Missing meta description")
    if not meta.headings.h1:
        warnings.append("Missing H1 heading")

    lo, hi = settings.description_length
    if meta.description and not lo <= len(meta.description) <= hi:
        warnings.append(f"Description length {len(meta.description)} (recommended {lo}-{hi})")
    lo, hi = settings.title_length
    if meta.title and not lo <= len(meta.title) <= hi:
        warnings.append(f"Title length {len(meta.title)} (recommended {lo}-{hi})")
    return warnings


def analyze_file(file_path: str | Path, root_dir: str | Path, settings: AuditSettings) -> DocumentMetrics:
    """Analyze one file. Raises on read errors; callers decide what to skip."""
    loaded = load_file(file_path)
    parser = parser_for(loaded.ext)

    meta = parser.metadata(loaded.raw, loaded.body)
    if not meta.headings.h1:
        # layouts usually render the title as the page's H1
        fallback = meta.title or parser.fallback_h1(loaded.raw)
        if fallback:
            meta.headings.h1 = [fallback]

    site_host = urlparse(settings.site_url).netloc
    internal, external = extract_links(loaded.body, site_host)

    text = parser.prose(loaded.body)
    readability = compute_readability(text)
    tokens = to_words(text, settings.stopwords)

    sections = [
        (meta.title, settings.title_weight),
        (meta.description, settings.description_weight),
    ]
    sections += [(h, settings.h1_weight) for h in meta.headings.h1]
    sections += [(h, settings.h2_weight) for h in meta.headings.h2]
    sections += [(h, settings.h3_weight) for h in meta.headings.h3]

    return DocumentMetrics(
        file_path=loaded.path,
        route_hint=guess_route_hint(loaded.path, root_dir, settings.pages_dir),
        title=meta.title,
        description=meta.description,
        headings=meta.headings,
        word_count=readability.word_count,
        sentence_count=readability.sentence_count,
        flesch_reading_ease=readability.flesch_reading_ease,
        flesch_kincaid_grade=readability.flesch_kincaid_grade,
        internal_links=internal,
        external_links=external,
        images_without_alt=count_images_without_alt(loaded.body),
        warnings=collect_warnings(meta, settings),
        tokens=tokens,
        bigrams=build_ngrams(tokens, 2),
        trigrams=build_ngrams(tokens, 3),
        tfidf_terms=weighted_terms(sections, tokens, settings.stopwords),
    )
