"""Write reports to disk or stdout."""

import json
import logging
import sys
from pathlib import Path

from ..models import Report
from .markdown import render_markdown

logger = logging.getLogger(__name__)

DEFAULT_MARKDOWN_NAME = "seo-report.md"


def report_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def markdown_path_for(out_file: Path | None) -> Path:
    """``X.json`` pairs with ``X.md``; stdout mode writes next to the CWD."""
    if out_file is None:
        return Path.cwd() / DEFAULT_MARKDOWN_NAME
    if out_file.suffix.lower() == ".json":
        return out_file.with_suffix(".md")
    return out_file.with_name(out_file.name + ".md")


def write_markdown(report: Report, path: Path, options: dict | None = None) -> Path | None:
    """Write the markdown summary; failures are logged, never raised."""
    try:
        path.write_text(render_markdown(report, options), encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write markdown summary to {path}: {e}")
        return None
    return path


def write_report(report: Report, out_file: Path | None, options: dict | None = None) -> tuple[Path | None, Path | None]:
    """Write the JSON report (or stream it to stdout) plus the markdown summary.

    Returns (json_path, markdown_path); either is None when not written to a file.
    """
    if out_file is None:
        sys.stdout.write(report_json(report))
        sys.stdout.write("\n")
        json_path = None
    else:
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(report_json(report), encoding="utf-8")
        json_path = out_file

    return json_path, write_markdown(report, markdown_path_for(out_file), options)
