"""Tests for the TF-IDF engine."""

import pytest

from seoaudit.analysis.tfidf import (
    TermDocument,
    canonicalize_corpus,
    compute_tfidf,
    global_idf,
    rank_keywords,
)
from seoaudit.text.lexical import normalize_term


def _docs(*term_lists):
    return [TermDocument(f"d{i}", terms) for i, terms in enumerate(term_lists, 1)]


def test_ranks_terms_concentrated_in_fewer_docs():
    docs = _docs(
        ["apple", "apple", "banana"],
        ["apple", "cherry", "cherry"],
        ["banana", "banana", "banana"],
    )
    top = compute_tfidf(docs, 5, min_doc_freq=1)
    assert top
    assert "banana" in [t.term for t in top]


def test_concentrated_document_scores_higher_for_term():
    docs = _docs(
        ["widget", "widget", "widget", "gadget"],
        ["widget", "gadget", "gadget", "gadget", "gadget"],
        ["gizmo", "gizmo"],
    )
    idf = global_idf(docs, min_doc_freq=1)
    canonical = canonicalize_corpus(docs)

    first = rank_keywords(docs[0].terms, idf, canonical)
    second = rank_keywords(docs[1].terms, idf, canonical)
    score_in = lambda ranked: next(k.tfidf for k in ranked if k.term == "widget")

    assert first[0].term == "widget"
    assert score_in(first) > score_in(second)


def test_min_doc_freq_filters_single_document_terms():
    docs = _docs(["shared", "unique"], ["shared"])
    strict = [t.term for t in compute_tfidf(docs, 10, min_doc_freq=2)]
    loose = [t.term for t in compute_tfidf(docs, 10, min_doc_freq=1)]
    assert "unique" not in strict
    assert "shared" in strict
    assert "unique" in loose


def test_score_formula():
    docs = _docs(["apple", "apple"], ["apple"], ["pear"])
    top = compute_tfidf(docs, 10, min_doc_freq=1)
    scores = {t.term: t.tfidf for t in top}
    import math
    idf = math.log(4 / 3) + 1
    assert scores["apple"] == pytest.approx((1 + math.log(2)) * idf + idf)
    assert scores["pear"] == pytest.approx(math.log(4 / 2) + 1)


def test_top_k_truncates():
    docs = _docs(["alpha", "beta", "gamma"], ["alpha", "beta", "gamma"])
    assert len(compute_tfidf(docs, 2)) == 2


def test_empty_corpus():
    assert compute_tfidf([], 10) == []
    assert global_idf([]) == {}


def test_canonical_surface_form():
    docs = _docs(["outcome", "outcome", "outcom"], ["outcoming", "outcome"])
    canonical = canonicalize_corpus(docs)
    norm = normalize_term("outcome")
    assert canonical[norm] == "outcome"
    assert norm in canonical[norm]


def test_canonical_tie_prefers_shorter_form():
    canonical = canonicalize_corpus(_docs(["running", "runs"]))
    assert canonical["run"] == "runs"


def test_ranked_terms_use_surface_forms():
    docs = _docs(["tests", "tests", "testing"], ["tests"])
    top = compute_tfidf(docs, 5)
    assert [t.term for t in top] == ["tests"]


def test_rank_keywords_skips_terms_without_idf():
    assert rank_keywords(["unknown"], {}, {}) == []


def test_rank_keywords_limit():
    terms = [f"term{c}" for c in "abcdefghijklmnop"]
    idf = {normalize_term(t): 1.0 for t in terms}
    assert len(rank_keywords(terms, idf, {}, limit=12)) == 12
