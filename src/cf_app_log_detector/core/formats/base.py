"""Parser interfaces and grammar primitives.

Every field parser takes the unconsumed text and returns ``(value, rest)`` on
success or ``None`` when the text does not match. ``None`` is an ordinary
outcome, never an error.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Protocol, TypeVar

from ..models import CfAppLogEntry

T = TypeVar("T")

Parsed = tuple[T, str]
FieldParser = Callable[[str], Parsed[T] | None]

_DIGITS_RE = re.compile(r"[0-9]+")


class LineParser(Protocol):
    """Parser interface: return (entry, rest) if the line matches, else None."""

    def parse(self, line: str) -> Parsed[CfAppLogEntry] | None:
        """Parse a single decoded line."""
        ...


def tag(literal: str, text: str) -> str | None:
    """Consume ``literal`` from the front of ``text`` and return the rest."""
    if text.startswith(literal):
        return text[len(literal):]
    return None


def take_until(delimiter: str, text: str) -> Parsed[str] | None:
    """Split ``text`` before the first ``delimiter``; the delimiter stays in rest."""
    idx = text.find(delimiter)
    if idx < 0:
        return None
    return text[:idx], text[idx:]


def take_until_and_consume(delimiter: str, text: str) -> Parsed[str] | None:
    """Like take_until, but the delimiter is dropped from rest."""
    found = take_until(delimiter, text)
    if found is None:
        return None
    head, rest = found
    return head, rest[len(delimiter):]


def digits(text: str) -> Parsed[int] | None:
    """Parse a leading run of ASCII digits as a non-negative integer."""
    m = _DIGITS_RE.match(text)
    if not m:
        return None
    return int(m.group()), text[m.end():]
