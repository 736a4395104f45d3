"""Front-matter fences and the flat key:value reader."""

import re

_KEY_VALUE = re.compile(r"^([A-Za-z0-9_\-]+)\s*:\s*(.*)$")


def _fence_end(text: str) -> int:
    if not text.startswith("---"):
        return -1
    return text.find("\n---", 3)


def strip_frontmatter(text: str) -> str:
    """Drop a leading ``---`` fenced block, if the fence is closed."""
    end = _fence_end(text)
    if end == -1:
        return text
    return text[end + 4:]


def read_frontmatter_block(text: str) -> str | None:
    """Return the inside of a leading ``---`` block, or None."""
    end = _fence_end(text)
    if end == -1:
        return None
    return text[3:end].strip()


def parse_simple_frontmatter(block: str) -> dict[str, str]:
    """Read flat ``key: value`` lines; matching outer quotes are removed.

    Nested structures and lists are not interpreted: a ``tags:`` line followed
    by indented items just yields ``tags -> ""``.
    """
    out: dict[str, str] = {}
    for line in block.splitlines():
        m = _KEY_VALUE.match(line)
        if not m:
            continue
        value = m.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        out[m.group(1)] = value
    return out
