"""Tests for report writing."""

import json
import logging

from seoaudit.analysis.corpus import generate_report
from seoaudit.report.writer import markdown_path_for, write_report


def _report(root):
    (root / "pages").mkdir(parents=True)
    (root / "pages" / "index.md").write_text("---\ntitle: Home Page For Everyone\n---\n# Home\nWelcome here.\n")
    return generate_report(root)


def test_markdown_path_pairs_with_json(tmp_path):
    assert markdown_path_for(tmp_path / "seo.json") == tmp_path / "seo.md"
    assert markdown_path_for(tmp_path / "seo.out") == tmp_path / "seo.out.md"


def test_markdown_failure_keeps_json(tmp_path, caplog):
    report = _report(tmp_path / "site")
    out = tmp_path / "out" / "report.json"
    # a directory where the summary should go makes the write fail
    (tmp_path / "out" / "report.md").mkdir(parents=True)

    with caplog.at_level(logging.ERROR, logger="seoaudit.report.writer"):
        json_path, md_path = write_report(report, out)

    assert json_path == out
    assert md_path is None
    assert json.loads(out.read_text())["summary"]["totalDocuments"] == 1
    assert "Failed to write markdown summary" in caplog.text
