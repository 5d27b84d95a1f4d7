"""Input-layer public API for key decoding and mode handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
modal key handlers the runtime loop feeds every decoded key to.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .keys import (
    handle_browse_key,
    handle_edit_key,
    handle_key,
    is_printable_key,
)

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "handle_browse_key",
    "handle_edit_key",
    "handle_key",
    "is_printable_key",
]
