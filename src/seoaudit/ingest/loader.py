"""Discover and read the files that make up the audited corpus."""

import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from ..models import LoadedFile
from .parsers import parser_for

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = frozenset({".md", ".mdx", ".astro", ".json", ".html"})


def walk_files(root_dir: str | Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[str]:
    """All files under ``root_dir`` with an allowed extension, sorted.

    A missing root yields an empty list; unreadable subdirectories are skipped.
    """
    root = Path(root_dir)
    if not root.is_dir():
        return []

    allowed = {e.lower() for e in extensions}

    def _skip(err: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {err.filename}: {err.strerror}")

    results = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_skip):
        for name in filenames:
            if os.path.splitext(name)[1].lower() in allowed:
                results.append(os.path.join(dirpath, name))
    return sorted(results)


def load_file(file_path: str | Path) -> LoadedFile:
    """Read a file and produce its raw and body-stripped views."""
    path = Path(file_path)
    ext = path.suffix.lower()
    raw = path.read_text(encoding="utf-8", errors="replace")
    return LoadedFile(path=str(path), ext=ext, raw=raw, body=parser_for(ext).body(raw))


def guess_route_hint(file_path: str | Path, root_dir: str | Path, pages_dir: str = "pages") -> str:
    """Logical route for a file.

    Under a ``pages`` directory the path maps to its URL (``index`` files
    collapse to their directory); anything else maps to its content path.
    """
    rel = Path(os.path.relpath(file_path, root_dir)).as_posix()
    parts = rel.split("/")
    if pages_dir in parts:
        after = "/".join(parts[parts.index(pages_dir) + 1:])
        if not after:
            return "/"
        no_ext = re.sub(r"(index)?\.[^.]+$", "", after)
        return "/" + re.sub(r"/index$", "", no_ext)
    return "/" + re.sub(r"\.[^.]+$", "", rel)
