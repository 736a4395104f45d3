"""Corpus TF-IDF with sublinear TF, smoothed IDF and readable surface forms.

Scoring runs in two phases over the same immutable collection:

1. ``compute_tfidf`` / ``global_idf`` read the whole corpus to get document
   frequencies and an IDF per normalized term.
2. ``rank_keywords`` scores one document's own term frequencies against that
   fixed IDF, so per-document keywords are prominent locally and distinctive
   across the corpus.
"""

import math
from collections import Counter, defaultdict
from dataclasses import dataclass, field

from ..models import ScoredTerm
from ..text.lexical import normalize_term


@dataclass(frozen=True)
class TermDocument:
    id: str
    terms: list[str]


@dataclass
class SurfaceForms:
    """Per-run accumulator: normalized term -> surface string -> occurrences."""
    counts: dict[str, Counter] = field(default_factory=lambda: defaultdict(Counter))

    def add(self, surface: str, norm: str) -> None:
        self.counts[norm][surface] += 1

    def canonical(self, norm: str) -> str:
        """Most frequent surface form; ties go to the shorter string."""
        forms = self.counts.get(norm)
        if not forms:
            return norm
        best = ""
        best_count = 0
        for surface, count in forms.items():
            if count > best_count or (count == best_count and (not best or len(surface) < len(best))):
                best, best_count = surface, count
        return best or norm


def _normalized(doc: TermDocument) -> list[tuple[str, str]]:
    pairs = []
    for surface in doc.terms:
        norm = normalize_term(surface)
        if norm:
            pairs.append((surface, norm))
    return pairs


def document_frequencies(docs: list[TermDocument], surfaces: SurfaceForms | None = None) -> Counter:
    """Number of documents containing each normalized term.

    When ``surfaces`` is given it also records every surface form seen.
    """
    df: Counter = Counter()
    for doc in docs:
        pairs = _normalized(doc)
        if surfaces is not None:
            for surface, norm in pairs:
                surfaces.add(surface, norm)
        df.update({norm for _, norm in pairs})
    return df


def smoothed_idf(df: int, doc_count: int) -> float:
    return math.log((doc_count + 1) / (df + 1)) + 1


def sublinear_tf(f: int) -> float:
    return 1 + math.log(f)


def canonicalize_corpus(docs: list[TermDocument]) -> dict[str, str]:
    """Map each normalized term to its display form across the corpus."""
    surfaces = SurfaceForms()
    document_frequencies(docs, surfaces)
    return {norm: surfaces.canonical(norm) for norm in surfaces.counts}


def compute_tfidf(docs: list[TermDocument], top_k: int = 25, min_doc_freq: int = 2) -> list[ScoredTerm]:
    """Rank normalized terms by TF-IDF summed over every document.

    Terms found in fewer than ``min_doc_freq`` documents are skipped.
    """
    surfaces = SurfaceForms()
    df = document_frequencies(docs, surfaces)
    doc_count = len(docs)

    scores: dict[str, float] = defaultdict(float)
    for doc in docs:
        tf = Counter(norm for _, norm in _normalized(doc))
        for term, f in tf.items():
            if df[term] < min_doc_freq:
                continue
            scores[term] += sublinear_tf(f) * smoothed_idf(df[term], doc_count)

    ranked = [ScoredTerm(term=surfaces.canonical(t), tfidf=s) for t, s in scores.items()]
    ranked.sort(key=lambda x: x.tfidf, reverse=True)
    return ranked[:top_k]


def global_idf(docs: list[TermDocument], min_doc_freq: int = 2) -> dict[str, float]:
    """Corpus IDF for every normalized term meeting ``min_doc_freq``."""
    df = document_frequencies(docs)
    return {t: smoothed_idf(n, len(docs)) for t, n in df.items() if n >= min_doc_freq}


def rank_keywords(
    terms: list[str],
    idf: dict[str, float],
    canonical: dict[str, str],
    limit: int = 12,
) -> list[ScoredTerm]:
    """Score one document's terms against the corpus IDF."""
    tf = Counter(n for n in (normalize_term(t) for t in terms) if n)
    scored = [
        ScoredTerm(term=canonical.get(t, t), tfidf=sublinear_tf(f) * idf[t])
        for t, f in tf.items()
        if t in idf
    ]
    scored.sort(key=lambda x: x.tfidf, reverse=True)
    return scored[:limit]
