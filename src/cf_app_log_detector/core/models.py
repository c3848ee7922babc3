"""Core data models for CF application log detection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Component(str, Enum):
    """Cloud Foundry subsystems that emit application log lines."""

    API = "API"
    STAGING = "STAGING"
    ROUTER = "ROUTER"
    LOGGREGATOR = "LOGGREGATOR"
    APPLICATION = "APPLICATION"
    SSH = "SSH"
    CELL = "CELL"


class Channel(str, Enum):
    """Output stream a log line was written to."""

    STDOUT = "STDOUT"
    STDERR = "STDERR"


@dataclass(frozen=True, slots=True)
class ComponentInfo:
    """Recognized component tag, e.g. [APP/PROC/WEB/0]."""

    name: Component
    index: int


@dataclass(frozen=True, slots=True)
class UnrecognizedComponent:
    """Bracketed tag that did not match a known component layout."""

    raw: str  # verbatim bracket interior, for diagnostics


ComponentTag = ComponentInfo | UnrecognizedComponent


@dataclass(frozen=True, slots=True)
class CfAppLogEntry:
    """One parsed line of `cf logs` output."""

    timestamp: datetime
    component: ComponentTag
    channel: Channel
    message: str | None = None  # None when nothing follows the channel


@dataclass(slots=True)
class ClassificationTally:
    """Running line counts for a single file scan."""

    total_lines: int = 0
    matching_lines: int = 0

    def record(self, matched: bool) -> None:
        self.total_lines += 1
        if matched:
            self.matching_lines += 1
