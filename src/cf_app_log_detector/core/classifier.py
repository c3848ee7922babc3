"""Reduce a sequence of lines into a CF application log verdict."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .formats import CfAppLogParser, LineParser
from .models import ClassificationTally

logger = logging.getLogger(__name__)

DEFAULT_TRIGGER_PERCENTAGE = 90


@dataclass(frozen=True, slots=True)
class ClassifierConfig:
    """Verdict thresholds.

    trigger_percentage is not range checked: values above 100 can never be
    reached, values at or below 0 are always satisfied.
    """

    trigger_percentage: int = DEFAULT_TRIGGER_PERCENTAGE
    stop_on_first_match: bool = False


@dataclass(frozen=True, slots=True)
class Verdict:
    """Final classification of one file."""

    total_lines: int
    matching_lines: int
    percentage: int
    matches: bool


class Classifier:
    """Feed lines one at a time into a running tally.

    Lines must be fed in file order; feed() returns False once the scan
    should stop (stop_on_first_match after the first matching line).
    """

    def __init__(self, config: ClassifierConfig | None = None, parser: LineParser | None = None) -> None:
        self.config = config or ClassifierConfig()
        self.parser = parser or CfAppLogParser()
        self.tally = ClassificationTally()

    def feed(self, line: str) -> bool:
        matched = self.parser.parse(line) is not None
        self.tally.record(matched)
        if matched and self.config.stop_on_first_match:
            logger.debug("First matching line found at line %d, stopping scan", self.tally.total_lines)
            return False
        return True


def classify(
    lines: Iterable[str],
    stop_on_first_match: bool = False,
    *,
    parser: LineParser | None = None,
) -> ClassificationTally:
    """Count total and matching lines, optionally stopping at the first match."""
    classifier = Classifier(ClassifierConfig(stop_on_first_match=stop_on_first_match), parser=parser)
    for line in lines:
        if not classifier.feed(line):
            break
    return classifier.tally


def matching_percentage(tally: ClassificationTally) -> int:
    """Floor of the matching share in percent; 0 for an empty scan."""
    if tally.total_lines <= 0:
        return 0
    return tally.matching_lines * 100 // tally.total_lines


def verdict(tally: ClassificationTally, config: ClassifierConfig | None = None) -> Verdict:
    """Decide whether a finished scan looks like CF application log output.

    In one-line-match mode a single matching line is enough, whatever the
    percentage says.
    """
    config = config or ClassifierConfig()
    percentage = matching_percentage(tally)
    matches = percentage >= config.trigger_percentage or (
        tally.matching_lines > 0 and config.stop_on_first_match
    )
    logger.debug(
        "total=%d matching=%d percentage=%d trigger=%d -> %s",
        tally.total_lines,
        tally.matching_lines,
        percentage,
        config.trigger_percentage,
        matches,
    )
    return Verdict(
        total_lines=tally.total_lines,
        matching_lines=tally.matching_lines,
        percentage=percentage,
        matches=matches,
    )
