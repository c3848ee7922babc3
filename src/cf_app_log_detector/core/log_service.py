"""Log file reading and classification.

This module is the main integration point that reads log files and feeds
their lines to the classifier.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator
from contextlib import aclosing, asynccontextmanager
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .ansi import strip_ansi
from .classifier import Classifier, ClassifierConfig, Verdict, verdict
from .formats import LineParser
from .models import ClassificationTally

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _open_binary(path: Path):
    """Open a log file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rb")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


def _chomp(raw: bytes) -> bytes:
    """Drop one trailing LF and the CR before it, if any."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


async def iter_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    strip_escapes: bool = True,
) -> AsyncIterator[str]:
    """Yield decoded lines in file order.

    Lines that cannot be decoded are logged and skipped.
    """
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    line_no = 0
    async with _open_binary(path) as f:
        async for raw in f:
            line_no += 1
            raw = _chomp(raw)
            if strip_escapes:
                raw = strip_ansi(raw)
            try:
                line = raw.decode(encoding)
            except UnicodeDecodeError as e:
                logger.warning("Read failed: %s line %d: %s", path, line_no, e)
                continue
            yield line


async def classify_file(
    log_path: str | Path,
    config: ClassifierConfig | None = None,
    *,
    parser: LineParser | None = None,
    encoding: str = "utf-8",
    strip_escapes: bool = True,
) -> ClassificationTally:
    """Scan a file and return its line tally."""
    classifier = Classifier(config, parser=parser)
    logger.debug("Classifying %s (%s)", log_path, classifier.config)

    async with aclosing(iter_lines(log_path, encoding=encoding, strip_escapes=strip_escapes)) as lines:
        async for line in lines:
            if not classifier.feed(line):
                break

    return classifier.tally


async def detect_file(
    log_path: str | Path,
    config: ClassifierConfig | None = None,
    **classify_kwargs,
) -> Verdict:
    """Scan a file and return its verdict."""
    config = config or ClassifierConfig()
    tally = await classify_file(log_path, config, **classify_kwargs)
    return verdict(tally, config)
