"""Public package surface for duopane.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``duopane``.
"""

from __future__ import annotations

import logging

# The UI owns the terminal; records only go somewhere when ``--log-file`` is set.
logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
