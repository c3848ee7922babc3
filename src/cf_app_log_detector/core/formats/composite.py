"""Parser composition utilities."""

from __future__ import annotations

from .base import FieldParser, Parsed, T, tag


def alt(*parsers: FieldParser[T]) -> FieldParser[T]:
    """Try parsers in order and return the first successful parse."""

    def _parse(text: str) -> Parsed[T] | None:
        for p in parsers:
            out = p(text)
            if out is not None:
                return out
        return None

    return _parse


def all_consuming(parser: FieldParser[T]) -> FieldParser[T]:
    """Succeed only when ``parser`` consumes the whole input."""

    def _parse(text: str) -> Parsed[T] | None:
        out = parser(text)
        if out is None or out[1]:
            return None
        return out

    return _parse


def literal(token: str, value: T) -> FieldParser[T]:
    """Map a fixed token to ``value``."""

    def _parse(text: str) -> Parsed[T] | None:
        rest = tag(token, text)
        if rest is None:
            return None
        return value, rest

    return _parse


def delimited(open_: str, close: str, inner: FieldParser[T]) -> FieldParser[T]:
    """Parse ``open_ <interior> close`` where the interior ends at the first ``close``.

    ``inner`` must consume the interior completely.
    """

    def _parse(text: str) -> Parsed[T] | None:
        rest = tag(open_, text)
        if rest is None:
            return None
        idx = rest.find(close)
        if idx < 0:
            return None
        out = inner(rest[:idx])
        if out is None or out[1]:
            return None
        return out[0], rest[idx + len(close):]

    return _parse
