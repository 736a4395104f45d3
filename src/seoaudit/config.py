"""Configuration management for the SEO audit."""

import os
from pathlib import Path
from typing import Any

import yaml

from .models import AuditSettings
from .text.stopwords import build_stopwords


DEFAULT_CONFIG = {
    "root_dir": "./src",
    "out_file": "./seo-report.json",
    "site_url": "https://keyrxng.xyz",
    "extensions": [".md", ".mdx", ".astro", ".json", ".html"],
    "pages_dir": "pages",
    "data_only_dirs": ["competencies", "technologies"],
    "weights": {"title": 5, "description": 4, "h1": 4, "h2": 3, "h3": 2},
    "tfidf": {"min_doc_freq": 2, "top_unigrams": 40, "top_bigrams": 30, "top_trigrams": 20, "keywords_per_doc": 12},
    "checks": {"description_length": [50, 160], "title_length": [15, 65]},
    "workers": 8,
    "extra_stopwords": [],
    "report": {
        "sample_min_words": 150,
        "sample_max_pages": 40,
        "keywords_per_page": 8,
        "max_listed_paths": 200,
        "console_terms": [20, 15, 10],
        "markdown_terms": [15, 12, 10],
    },
}


def _find_config_file() -> Path | None:
    """Look for seoaudit.yaml in standard locations."""
    candidates = [
        Path.cwd() / "seoaudit.yaml",
        Path.cwd() / "config" / "seoaudit.yaml",
        Path.home() / ".seoaudit" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = _copy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            file_cfg = yaml.safe_load(f) or {}
        _deep_merge(cfg, file_cfg)

    if site_url := os.environ.get("SEOAUDIT_SITE_URL"):
        cfg["site_url"] = site_url

    return cfg


def build_settings(cfg: dict[str, Any]) -> AuditSettings:
    """Freeze a loaded config dict into the settings passed through the pipeline."""
    weights = cfg.get("weights", {})
    tfidf = cfg.get("tfidf", {})
    checks = cfg.get("checks", {})
    return AuditSettings(
        site_url=cfg["site_url"],
        extensions=frozenset(e.lower() for e in cfg["extensions"]),
        pages_dir=cfg["pages_dir"],
        data_only_dirs=tuple(cfg["data_only_dirs"]),
        title_weight=int(weights.get("title", 5)),
        description_weight=int(weights.get("description", 4)),
        h1_weight=int(weights.get("h1", 4)),
        h2_weight=int(weights.get("h2", 3)),
        h3_weight=int(weights.get("h3", 2)),
        min_doc_freq=int(tfidf.get("min_doc_freq", 2)),
        top_unigrams=int(tfidf.get("top_unigrams", 40)),
        top_bigrams=int(tfidf.get("top_bigrams", 30)),
        top_trigrams=int(tfidf.get("top_trigrams", 20)),
        keywords_per_doc=int(tfidf.get("keywords_per_doc", 12)),
        description_length=tuple(checks.get("description_length", (50, 160))),
        title_length=tuple(checks.get("title_length", (15, 65))),
        workers=int(cfg.get("workers", 8)),
        stopwords=build_stopwords(cfg.get("extra_stopwords") or ()),
    )


def _copy(cfg: dict) -> dict:
    """Copy nested dicts so merging never mutates DEFAULT_CONFIG."""
    return {k: _copy(v) if isinstance(v, dict) else v for k, v in cfg.items()}


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
