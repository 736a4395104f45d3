"""Stopword lists used by the lexical pipeline."""

from collections.abc import Iterable

STOPWORDS_EN = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and", "any", "are", "as", "at", "be",
    "because", "been", "before", "being", "below", "between", "both", "but", "by", "could", "did", "do", "does",
    "doing", "down", "during", "each", "few", "for", "from", "further", "had", "has", "have", "having", "he", "her",
    "here", "hers", "herself", "him", "himself", "his", "how", "i", "if", "in", "into", "is", "it", "its", "itself",
    "just", "me", "more", "most", "my", "myself", "no", "nor", "not", "now", "of", "off", "on", "once", "only", "or",
    "other", "our", "ours", "ourselves", "out", "over", "own", "same", "she", "should", "so", "some", "such", "than",
    "that", "the", "their", "theirs", "them", "themselves", "then", "there", "these", "they", "this", "those",
    "through", "to", "too", "under", "until", "up", "very", "was", "we", "were", "what", "when", "where", "which",
    "while", "who", "whom", "why", "with", "you", "your", "yours", "yourself", "yourselves",
})

# Domains, file formats, code keywords and tooling names that show up in site sources
STOPWORDS_SITE = frozenset({
    "https", "http", "www", "com", "net", "org", "io", "dev",
    "github", "docs", "doc", "api", "readme", "license", "faq",
    "png", "jpg", "jpeg", "gif", "webp", "svg", "pdf", "xml", "rss",
    "js", "ts", "tsx", "jsx", "css", "html", "md", "mdx", "astro", "json",
    "import", "export", "const", "var", "let", "function", "return", "class", "interface",
    "npm", "yarn", "pnpm", "node", "bun", "sitemap", "og", "meta", "link", "href", "src", "alt",
    "title", "description", "pr", "ci", "cd",
})


def build_stopwords(extra: Iterable[str] = ()) -> frozenset[str]:
    """Combine the fixed lists with any configured extras."""
    return STOPWORDS_EN | STOPWORDS_SITE | frozenset(w.strip().lower() for w in extra if w and w.strip())
