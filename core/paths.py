"""Path normalization for user-entered repository paths."""

from __future__ import annotations

import posixpath
import re
from pathlib import Path


_HOME_SHORTHAND = re.compile(r"^~(?=$|/|\\)")


def expand_home(raw: str) -> str:
    """Replace a leading ``~`` (alone or followed by a separator) with the home directory."""
    if not _HOME_SHORTHAND.match(raw):
        return raw
    return _HOME_SHORTHAND.sub(lambda _m: str(Path.home()), raw, count=1)


def normalize_path(raw: str) -> str:
    """Resolve user input to a canonical absolute path rooted at ``/``.

    Pure string manipulation: the filesystem is never consulted, symlinks are
    not followed, and malformed input is resolved as best-effort.
    ``normalize_path(normalize_path(x)) == normalize_path(x)``.
    """
    expanded = expand_home(raw or "")
    resolved = posixpath.normpath(posixpath.join("/", expanded))
    # POSIX keeps a leading "//"; fold it so the result has a single root.
    if resolved.startswith("//"):
        resolved = "/" + resolved.lstrip("/")
    return resolved
