"""Human-readable markdown rendering of a report."""

import os
from datetime import datetime

from ..models import DocumentMetrics, Report, ScoredTerm


def _rel(path: str) -> str:
    return os.path.relpath(path, os.getcwd())


def sample_documents(report: Report, min_words: int = 150) -> list[DocumentMetrics]:
    """Content-heavy documents, longest first."""
    docs = [d for d in report.documents if d.word_count > min_words]
    return sorted(docs, key=lambda d: d.word_count, reverse=True)


def _term_table(title: str, items: list[ScoredTerm], limit: int) -> list[str]:
    lines = [f"\n## {title}\n", "| Rank | Term | Score |", "|---:|---|---:|"]
    for i, item in enumerate(items[:limit], 1):
        lines.append(f"| {i} | {item.term} | {item.tfidf:.3f} |")
    lines.append("")
    return lines


def _path_block(label: str, paths: list[str], max_listed: int) -> list[str]:
    lines = [f"\n## {label} ({len(paths)})\n"]
    if not paths:
        lines.append("None\n")
        return lines
    lines.extend(f"- {_rel(p)}" for p in paths[:max_listed])
    if len(paths) > max_listed:
        lines.append(f"- ...and {len(paths) - max_listed} more")
    return lines


def render_markdown(report: Report, options: dict | None = None) -> str:
    """Render ranked terms, a per-page keyword sample and warning sections."""
    opts = options or {}
    uni, bi, tri = opts.get("markdown_terms", (15, 12, 10))
    min_words = opts.get("sample_min_words", 150)
    max_pages = opts.get("sample_max_pages", 40)
    per_page = opts.get("keywords_per_page", 8)
    max_listed = opts.get("max_listed_paths", 200)

    summary = report.summary
    generated = datetime.fromisoformat(report.generated_at).astimezone()
    root = report.root_dir.replace(os.getcwd() + os.sep, "./")

    lines = [
        f"# SEO Audit - {generated.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Generated for: `{root}`",
        f"\n## Snapshot\n\n- Documents: {summary.total_documents}\n- Vocabulary size: {summary.vocabulary_size}\n",
    ]
    lines += _term_table("Top Unigrams", summary.top_unigrams, uni)
    lines += _term_table("Top Bigrams", summary.top_bigrams, bi)
    lines += _term_table("Top Trigrams", summary.top_trigrams, tri)

    lines.append("\n## Per-page top keywords (sample)\n")
    for d in sample_documents(report, min_words)[:max_pages]:
        lines.append(f"- **{d.route_hint or _rel(d.file_path)}** - {d.word_count} words")
        keywords = [k.term for k in d.top_keywords[:per_page]]
        if keywords:
            lines.append(f"  - Keywords: {', '.join(keywords)}")

    lines += _path_block("Pages missing <title>", summary.pages_missing_title, max_listed)
    lines += _path_block("Pages missing meta description", summary.pages_missing_description, max_listed)
    lines += _path_block("Pages missing H1", summary.pages_missing_h1, max_listed)

    if summary.duplicate_titles:
        lines.append(f"\n## Duplicate titles ({len(summary.duplicate_titles)})\n")
        for dup in summary.duplicate_titles:
            lines.append(f"- **{dup.title}**")
            lines.extend(f"  - {_rel(f)}" for f in dup.files)

    lines.append("\n---\n*Generated by seoaudit*")
    return "\n".join(lines)
