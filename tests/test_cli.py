"""Tests for the command line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from seoaudit.cli import cli


def _site(root: Path) -> None:
    (root / "content").mkdir(parents=True)
    for i, title in enumerate(["Caching Strategies For Sites", "Caching Layers In Practice"]):
        (root / "content" / f"post{i}.md").write_text(
            f"---\ntitle: {title}\ndescription: Short\n---\nCaching content makes pages fast.\n"
        )


def test_audit_writes_json_and_markdown(tmp_path):
    _site(tmp_path / "src")
    out = tmp_path / "out" / "report.json"
    result = CliRunner().invoke(cli, ["-c", str(tmp_path / "none.yaml"), "audit", "--root", str(tmp_path / "src"), "--out", str(out)])
    assert result.exit_code == 0, result.output

    data = json.loads(out.read_text())
    assert data["summary"]["totalDocuments"] == 2
    md = (tmp_path / "out" / "report.md").read_text()
    assert "## Top Unigrams" in md
    assert "| Rank | Term | Score |" in md


def test_audit_stdout_mode():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _site(Path("src"))
        result = runner.invoke(cli, ["-c", "none.yaml", "audit", "--stdout"])
        assert result.exit_code == 0, result.output
        assert '"generatedAt"' in result.stdout
        assert Path("seo-report.md").exists()
        assert not Path("seo-report.json").exists()


def test_audit_missing_root_is_empty(tmp_path):
    out = tmp_path / "r.json"
    result = CliRunner().invoke(cli, ["-c", str(tmp_path / "none.yaml"), "audit", "--root", str(tmp_path / "nope"), "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text())["documents"] == []


def test_init_writes_config(tmp_path):
    result = CliRunner().invoke(cli, ["init", "--path", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "weights:" in (tmp_path / "seoaudit.yaml").read_text()


def test_audit_failure_exits_nonzero(tmp_path, monkeypatch):
    import seoaudit.analysis.corpus as corpus

    def broken(root_dir, settings=None):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(corpus, "generate_report", broken)
    result = CliRunner().invoke(cli, ["-c", str(tmp_path / "none.yaml"), "audit", "--root", str(tmp_path), "--out", str(tmp_path / "r.json")])
    assert result.exit_code == 1
    assert "disk on fire" in result.output
    assert not (tmp_path / "r.json").exists()
