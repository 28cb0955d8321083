"""Mapping of user-supplied page references onto paths under the static root"""

import posixpath
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from vibeforge.config import DEFAULT_PAGE
from vibeforge.errors import InvalidPathError


def resolve_page(value: Optional[str], default: str = DEFAULT_PAGE) -> str:
    """Turn a URL, path or nothing into a normalized path relative to the root.

    Full URLs are reduced to their path, query strings and fragments are
    dropped, and leading slashes are removed before normalizing. Raises
    InvalidPathError when the result would climb out of the root.
    """
    if value is None or value.strip() == "":
        return default

    candidate = value.strip()

    # Only absolute URLs (scheme plus host or rooted path) are parsed;
    # a relative reference is taken as a path
    try:
        parsed = urlsplit(candidate)
    except ValueError:
        parsed = None
    if parsed is not None and parsed.scheme and (
        parsed.netloc or parsed.path.startswith("/")
    ):
        candidate = parsed.path

    candidate = candidate.split("?")[0].split("#")[0]
    candidate = candidate.replace("\\", "/").lstrip("/")

    normalized = posixpath.normpath(candidate) if candidate else ""

    if normalized.split("/")[0] == ".." or posixpath.isabs(normalized):
        raise InvalidPathError()

    if normalized in ("", "."):
        return default
    return normalized


def page_location(root: Path, relative: str) -> Optional[Path]:
    """Absolute location of a resolved page, or None if it leaves the root"""
    try:
        base = root.resolve()
        target = (base / relative).resolve()
    except (OSError, RuntimeError, ValueError):
        # embedded NUL bytes, symlink loops
        return None
    if target != base and base not in target.parents:
        return None
    return target
