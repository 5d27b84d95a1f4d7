"""Filename-based file classification for listing colors.

A file counts as source when Pygments has a lexer registered for its name.
Pygments is imported on first use to keep startup light.
"""

from __future__ import annotations

import os
from functools import lru_cache

KIND_SOURCE = "source"
KIND_OTHER = "other"


@lru_cache(maxsize=4096)
def _kind_for_basename(basename: str) -> str:
    from pygments.lexers import find_lexer_class_for_filename
    from pygments.util import ClassNotFound

    try:
        lexer_class = find_lexer_class_for_filename(basename)
    except ClassNotFound:
        lexer_class = None
    return KIND_SOURCE if lexer_class is not None else KIND_OTHER


def file_kind(path: str) -> str:
    """Return ``"source"`` or ``"other"`` for the file at ``path``."""
    basename = os.path.basename(path)
    if not basename:
        return KIND_OTHER
    return _kind_for_basename(basename)


__all__ = ["KIND_SOURCE", "KIND_OTHER", "file_kind"]
