"""Corpus aggregation and the end-to-end audit run."""

import logging
import os
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from pathlib import Path

from ..ingest.loader import walk_files
from ..models import AuditSettings, CorpusSummary, DocumentMetrics, DuplicateTitle, Report
from ..text.lexical import build_ngrams
from .document import analyze_file
from .tfidf import TermDocument, canonicalize_corpus, compute_tfidf, global_idf, rank_keywords

logger = logging.getLogger(__name__)


def is_data_only(file_path: str, root_dir: str | Path, data_dirs: tuple[str, ...]) -> bool:
    """JSON records under a data-only directory are cards, not standalone pages."""
    rel = Path(os.path.relpath(file_path, root_dir)).as_posix()
    if not rel.endswith(".json"):
        return False
    return any(rel.startswith(f"{d}/") for d in data_dirs)


def duplicate_titles(documents: list[DocumentMetrics]) -> list[DuplicateTitle]:
    groups: dict[str, list[str]] = defaultdict(list)
    for d in documents:
        if d.title:
            groups[d.title].append(d.file_path)
    return [
        DuplicateTitle(title=title, files=files)
        for title, files in groups.items()
        if len(set(files)) > 1
    ]


def unigram_corpus(documents: list[DocumentMetrics]) -> list[TermDocument]:
    return [TermDocument(d.file_path, d.tfidf_terms) for d in documents]


def ngram_corpus(documents: list[DocumentMetrics], n: int) -> list[TermDocument]:
    return [TermDocument(d.file_path, build_ngrams(d.tfidf_terms, n)) for d in documents]


def summarize(documents: list[DocumentMetrics], root_dir: str | Path, settings: AuditSettings) -> CorpusSummary:
    """Build corpus-wide statistics from analyzed documents."""

    def missing(check) -> list[str]:
        return [
            d.file_path
            for d in documents
            if check(d) and not is_data_only(d.file_path, root_dir, settings.data_only_dirs)
        ]

    vocabulary = {t for d in documents for t in d.tokens}
    mdf = settings.min_doc_freq
    return CorpusSummary(
        total_documents=len(documents),
        vocabulary_size=len(vocabulary),
        top_unigrams=compute_tfidf(unigram_corpus(documents), settings.top_unigrams, mdf),
        top_bigrams=compute_tfidf(ngram_corpus(documents, 2), settings.top_bigrams, mdf),
        top_trigrams=compute_tfidf(ngram_corpus(documents, 3), settings.top_trigrams, mdf),
        pages_missing_title=missing(lambda d: not d.title),
        pages_missing_description=missing(lambda d: not d.description),
        pages_missing_h1=missing(lambda d: not d.headings.h1),
        duplicate_titles=duplicate_titles(documents),
    )


def assign_keywords(documents: list[DocumentMetrics], settings: AuditSettings) -> None:
    """Second pass: rank each document's terms against the corpus IDF."""
    corpus = unigram_corpus(documents)
    idf = global_idf(corpus, settings.min_doc_freq)
    canonical = canonicalize_corpus(corpus)
    for d in documents:
        d.top_keywords = rank_keywords(d.tfidf_terms, idf, canonical, settings.keywords_per_doc)


def analyze_all(files: list[str], root_dir: str | Path, settings: AuditSettings) -> list[DocumentMetrics]:
    """Analyze files on a bounded thread pool; failures are logged and dropped."""
    documents: list[DocumentMetrics] = []
    if not files:
        return documents

    with ThreadPoolExecutor(max_workers=min(settings.workers, len(files))) as ex:
        future_map = {ex.submit(analyze_file, f, root_dir, settings): f for f in files}
        for fut in as_completed(future_map):
            f = future_map[fut]
            try:
                documents.append(fut.result())
            except Exception as e:
                logger.warning(f"Failed to analyze {f}: {e}")

    documents.sort(key=lambda d: d.file_path)
    return documents


def generate_report(root_dir: str | Path, settings: AuditSettings | None = None) -> Report:
    """Run the whole audit over ``root_dir``."""
    settings = settings or AuditSettings()
    root = str(Path(root_dir).resolve())

    files = walk_files(root, settings.extensions)
    logger.info(f"Analyzing {len(files)} file(s) under {root}")
    documents = analyze_all(files, root, settings)

    summary = summarize(documents, root, settings)
    assign_keywords(documents, settings)

    return Report(
        generated_at=datetime.now(timezone.utc).isoformat(),
        root_dir=root,
        documents=documents,
        summary=summary,
    )
