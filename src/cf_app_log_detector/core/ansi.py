"""ANSI escape sequence removal for raw log bytes."""

from __future__ import annotations

import re

_ANSI_RE = re.compile(
    rb"\x1b\[[0-?]*[ -/]*[@-~]"  # CSI: colors, cursor movement
    rb"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC: titles, hyperlinks
    rb"|\x1b[PX^_].*?\x1b\\"  # DCS, SOS, PM, APC strings
    rb"|\x1b[ -/]*[0-~]",  # other escapes, e.g. ESC ( B charset reset
    re.DOTALL,
)


def strip_ansi(raw: bytes) -> bytes:
    """Remove terminal escape sequences (e.g. `cf logs` coloring) from a raw line."""
    if b"\x1b" not in raw:
        return raw
    return _ANSI_RE.sub(b"", raw)
