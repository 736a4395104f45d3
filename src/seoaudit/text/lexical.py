"""Tokenization, n-grams and stemming normalization."""

import re
from collections.abc import Iterable

from nltk.stem import PorterStemmer

from .stopwords import build_stopwords

DEFAULT_STOPWORDS = build_stopwords()

_PUNCTUATION = re.compile(r"[`~!@#$%^&*()_+={}\[\]|\\:;\"'<>,.?/\-]")
_HAS_ALPHA = re.compile(r"[a-z]")
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")

_stemmer = PorterStemmer()


def _keep(token: str, stopwords: frozenset[str]) -> bool:
    return (
        len(token) > 1
        and token not in stopwords
        and _HAS_ALPHA.search(token) is not None
        and not token.isdigit()
    )


def to_words(text: str, stopwords: frozenset[str] = DEFAULT_STOPWORDS) -> list[str]:
    """Lowercase, blank out punctuation and split into filtered tokens.

    Token order is preserved so the result can feed n-gram construction.
    """
    cleaned = _PUNCTUATION.sub(" ", text.lower())
    return [w for w in cleaned.split() if _keep(w, stopwords)]


def filter_terms(terms: Iterable[str], stopwords: frozenset[str] = DEFAULT_STOPWORDS) -> list[str]:
    """Apply the token filters to terms that were not produced by ``to_words``."""
    out = []
    for t in terms:
        t = t.lower().strip()
        if t and _keep(t, stopwords):
            out.append(t)
    return out


def build_ngrams(tokens: list[str], n: int) -> list[str]:
    """Contiguous windows of ``n`` tokens joined by a single space."""
    return [" ".join(tokens[i:i + n]) for i in range(len(tokens) - n + 1)]


def normalize_term(term: str) -> str:
    """Reduce a surface term to the key used for statistics.

    Lowercases, strips everything except ``[a-z0-9]`` and whitespace, then
    stems until the stem stops changing. Digit-only strings and terms of two
    characters or fewer are left unstemmed. Returns ``""`` when nothing survives.
    """
    s = _NON_ALNUM.sub("", term.lower()).strip()
    if not s:
        return ""
    if s.isdigit() or len(s) <= 2:
        return s
    prev = None
    try:
        while s != prev and len(s) > 2:
            prev, s = s, _stemmer.stem(s)
    except Exception:
        return s
    return s


def weighted_terms(
    sections: Iterable[tuple[str | None, int]],
    body_tokens: list[str],
    stopwords: frozenset[str] = DEFAULT_STOPWORDS,
) -> list[str]:
    """Build the weighted term bag: each section's tokens repeated ``weight`` times, then the body."""
    terms: list[str] = []
    for text, weight in sections:
        if not text:
            continue
        words = to_words(text, stopwords)
        for _ in range(weight):
            terms.extend(words)
    terms.extend(body_tokens)
    return filter_terms(terms, stopwords)
