"""Tests for configuration loading."""

from seoaudit.config import DEFAULT_CONFIG, build_settings, load_config


def test_defaults_freeze_into_settings():
    settings = build_settings(load_config_from_defaults())
    assert settings.title_weight == 5
    assert settings.h3_weight == 2
    assert settings.min_doc_freq == 2
    assert settings.keywords_per_doc == 12
    assert settings.data_only_dirs == ("competencies", "technologies")
    assert ".mdx" in settings.extensions
    assert "the" in settings.stopwords


def load_config_from_defaults():
    return load_config("/nonexistent/seoaudit.yaml")


def test_file_values_deep_merge(tmp_path):
    cfg_file = tmp_path / "seoaudit.yaml"
    cfg_file.write_text("weights:\n  title: 7\ntfidf:\n  min_doc_freq: 1\nextra_stopwords: [Widget]\n")
    cfg = load_config(cfg_file)
    assert cfg["weights"]["title"] == 7
    assert cfg["weights"]["description"] == 4
    settings = build_settings(cfg)
    assert settings.title_weight == 7
    assert settings.min_doc_freq == 1
    assert "widget" in settings.stopwords


def test_merge_does_not_touch_defaults(tmp_path):
    cfg_file = tmp_path / "seoaudit.yaml"
    cfg_file.write_text("weights:\n  title: 9\n")
    load_config(cfg_file)
    assert DEFAULT_CONFIG["weights"]["title"] == 5


def test_env_overrides_site(monkeypatch):
    monkeypatch.setenv("SEOAUDIT_SITE_URL", "https://example.org")
    assert load_config("/nonexistent/seoaudit.yaml")["site_url"] == "https://example.org"
