"""Terminal summary of a report."""

import os

from rich.console import Console
from rich.table import Table

from ..models import Report, ScoredTerm
from .markdown import sample_documents


def _term_table(title: str, items: list[ScoredTerm], limit: int) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("Term", style="cyan")
    table.add_column("Score", justify="right", style="green")
    for i, item in enumerate(items[:limit], 1):
        table.add_row(str(i), item.term, f"{item.tfidf:.3f}")
    return table


def print_summary(report: Report, console: Console, options: dict | None = None) -> None:
    opts = options or {}
    uni, bi, tri = opts.get("console_terms", (20, 15, 10))
    per_page = opts.get("keywords_per_page", 8)
    summary = report.summary

    console.print("\n[bold]SEO Audit Summary[/]")
    console.print(f"  Documents: {summary.total_documents}")
    console.print(f"  Vocabulary size: {summary.vocabulary_size}\n")

    console.print(_term_table("Top Unigrams", summary.top_unigrams, uni))
    console.print(_term_table("Top Bigrams", summary.top_bigrams, bi))
    console.print(_term_table("Top Trigrams", summary.top_trigrams, tri))

    docs = sample_documents(report, opts.get("sample_min_words", 150))
    if docs:
        console.print("\n[bold]Per-page top keywords (sample):[/]")
        for d in docs:
            console.print(f"  - {d.route_hint or d.file_path}", markup=False)
            keywords = [k.term for k in d.top_keywords[:per_page]]
            if keywords:
                console.print(f"      [dim]{', '.join(keywords)}[/]")

    for label, paths in (
        ("Pages missing <title>", summary.pages_missing_title),
        ("Pages missing meta description", summary.pages_missing_description),
        ("Pages missing H1", summary.pages_missing_h1),
    ):
        if paths:
            console.print(f"\n[yellow]{label} ({len(paths)}):[/]")
            for p in paths:
                console.print(f"  - {os.path.relpath(p)}", markup=False)

    if summary.duplicate_titles:
        console.print(f"\n[yellow]Duplicate titles ({len(summary.duplicate_titles)}):[/]")
        for dup in summary.duplicate_titles:
            console.print(f"  • {dup.title}", markup=False)
            for f in dup.files:
                console.print(f"      - {os.path.relpath(f)}", markup=False)
