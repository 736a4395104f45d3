"""Data models used throughout the audit."""

from dataclasses import dataclass, field
from typing import Any

from .text.stopwords import build_stopwords


@dataclass(frozen=True)
class AuditSettings:
    """Immutable tuning parameters for one audit run."""
    site_url: str = "https://keyrxng.xyz"
    extensions: frozenset[str] = frozenset({".md", ".mdx", ".astro", ".json", ".html"})
    pages_dir: str = "pages"
    data_only_dirs: tuple[str, ...] = ("competencies", "technologies")
    title_weight: int = 5
    description_weight: int = 4
    h1_weight: int = 4
    h2_weight: int = 3
    h3_weight: int = 2
    min_doc_freq: int = 2
    top_unigrams: int = 40
    top_bigrams: int = 30
    top_trigrams: int = 20
    keywords_per_doc: int = 12
    description_length: tuple[int, int] = (50, 160)
    title_length: tuple[int, int] = (15, 65)
    workers: int = 8
    stopwords: frozenset[str] = field(default_factory=build_stopwords)


@dataclass
class Headings:
    """Heading texts grouped by level, in document order."""
    h1: list[str] = field(default_factory=list)
    h2: list[str] = field(default_factory=list)
    h3: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {"h1": list(self.h1), "h2": list(self.h2), "h3": list(self.h3)}


@dataclass
class PageMeta:
    """Metadata resolved from a single source file."""
    title: str | None = None
    description: str | None = None
    headings: Headings = field(default_factory=Headings)


@dataclass
class LoadedFile:
    """The two text views of a file: original source and stripped body."""
    path: str
    ext: str
    raw: str
    body: str


@dataclass
class ScoredTerm:
    term: str
    tfidf: float

    def to_dict(self) -> dict[str, Any]:
        return {"term": self.term, "tfidf": self.tfidf}


@dataclass
class DocumentMetrics:
    """Everything computed for one analyzable document."""
    file_path: str
    route_hint: str
    title: str | None
    description: str | None
    headings: Headings
    word_count: int
    sentence_count: int
    flesch_reading_ease: float
    flesch_kincaid_grade: float
    internal_links: list[str]
    external_links: list[str]
    images_without_alt: int
    warnings: list[str]
    tokens: list[str]
    bigrams: list[str]
    trigrams: list[str]
    tfidf_terms: list[str]
    top_keywords: list[ScoredTerm] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "filePath": self.file_path,
            "routeHint": self.route_hint,
            "title": self.title,
            "description": self.description,
            "headings": self.headings.to_dict(),
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "fleschReadingEase": self.flesch_reading_ease,
            "fleschKincaidGrade": self.flesch_kincaid_grade,
            "internalLinks": self.internal_links,
            "externalLinks": self.external_links,
            "imagesWithoutAlt": self.images_without_alt,
            "warnings": self.warnings,
            "tokens": self.tokens,
            "bigrams": self.bigrams,
            "trigrams": self.trigrams,
            "tfidfTerms": self.tfidf_terms,
            "topKeywords": [k.to_dict() for k in self.top_keywords],
        }


@dataclass
class DuplicateTitle:
    title: str
    files: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "files": self.files}


@dataclass
class CorpusSummary:
    """Corpus-wide aggregates, always derived from the document set."""
    total_documents: int
    vocabulary_size: int
    top_unigrams: list[ScoredTerm]
    top_bigrams: list[ScoredTerm]
    top_trigrams: list[ScoredTerm]
    pages_missing_title: list[str]
    pages_missing_description: list[str]
    pages_missing_h1: list[str]
    duplicate_titles: list[DuplicateTitle]

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalDocuments": self.total_documents,
            "vocabularySize": self.vocabulary_size,
            "topUnigrams": [t.to_dict() for t in self.top_unigrams],
            "topBigrams": [t.to_dict() for t in self.top_bigrams],
            "topTrigrams": [t.to_dict() for t in self.top_trigrams],
            "pagesMissingTitle": self.pages_missing_title,
            "pagesMissingDescription": self.pages_missing_description,
            "pagesMissingH1": self.pages_missing_h1,
            "duplicateTitles": [d.to_dict() for d in self.duplicate_titles],
        }


@dataclass
class Report:
    generated_at: str
    root_dir: str
    documents: list[DocumentMetrics]
    summary: CorpusSummary

    def to_dict(self) -> dict[str, Any]:
        return {
            "generatedAt": self.generated_at,
            "rootDir": self.root_dir,
            "documents": [d.to_dict() for d in self.documents],
            "summary": self.summary.to_dict(),
        }
