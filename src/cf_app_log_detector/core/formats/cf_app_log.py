"""Cloud Foundry application log line grammar.

Lines look like::

    2021-09-28T17:00:09.36+0900 [APP/PROC/WEB/0] OUT <message>

See https://docs.cloudfoundry.org/devguide/deploy-apps/streaming-logs.html#format
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from ..models import CfAppLogEntry, Channel, Component, ComponentInfo, ComponentTag, UnrecognizedComponent
from .base import Parsed, digits, tag, take_until, take_until_and_consume
from .composite import all_consuming, alt, delimited, literal

_TIMESTAMP_RE = re.compile(
    r"(?P<base>[0-9]{4}-[0-9]{1,2}-[0-9]{1,2}T[0-9]{1,2}:[0-9]{1,2}:[0-9]{1,2})"
    r"(?:\.(?P<frac>[0-9]+))?"
    r"(?P<tz>[+-][0-9]{4})"
)

# Skipped path segments between the component name and the index.
_MAX_SKIPPED_SEGMENTS = 2


def parse_timestamp(text: str) -> Parsed[datetime] | None:
    """Parse the timestamp field, which ends at the next space.

    The fraction may have any number of digits and is truncated to
    milliseconds. The UTC offset is mandatory.
    """
    found = take_until(" ", text)
    if found is None:
        return None
    raw, rest = found

    m = _TIMESTAMP_RE.fullmatch(raw)
    if not m:
        return None

    millis = (m.group("frac") or "")[:3].ljust(3, "0")
    try:
        ts = datetime.strptime(f"{m.group('base')}.{millis}000{m.group('tz')}", "%Y-%m-%dT%H:%M:%S.%f%z")
    except ValueError:
        return None
    return ts, rest


parse_component_name = alt(
    literal("APP", Component.APPLICATION),
    literal("API", Component.API),
    literal("STG", Component.STAGING),
    literal("RTR", Component.ROUTER),
    literal("LGR", Component.LOGGREGATOR),
    literal("SSH", Component.SSH),
    literal("CELL", Component.CELL),
)


def _component_with_index(text: str) -> Parsed[ComponentTag] | None:
    """NAME/INDEX"""
    head = parse_component_name(text)
    if head is None:
        return None
    name, rest = head
    rest = tag("/", rest)
    if rest is None:
        return None
    index = digits(rest)
    if index is None:
        return None
    return ComponentInfo(name=name, index=index[0]), index[1]


def _component_with_path(text: str) -> Parsed[ComponentTag] | None:
    """NAME/[SEG/][SEG/]INDEX, e.g. APP/PROC/WEB/0."""
    head = parse_component_name(text)
    if head is None:
        return None
    name, rest = head
    rest = tag("/", rest)
    if rest is None:
        return None

    for _ in range(_MAX_SKIPPED_SEGMENTS):
        segment = take_until_and_consume("/", rest)
        if segment is None:
            break
        rest = segment[1]

    index = digits(rest)
    if index is None:
        return None
    return ComponentInfo(name=name, index=index[0]), index[1]


def _unrecognized_component(text: str) -> Parsed[ComponentTag]:
    """Fallback: keep the whole bracket interior as diagnostic text."""
    return UnrecognizedComponent(raw=text), ""


parse_component = delimited(
    "[",
    "]",
    alt(
        all_consuming(_component_with_index),
        all_consuming(_component_with_path),
        _unrecognized_component,
    ),
)

parse_channel = alt(
    literal("OUT", Channel.STDOUT),
    literal("ERR", Channel.STDERR),
)


def parse_message(text: str) -> Parsed[str | None] | None:
    """Parse the optional message that follows the channel token.

    Returns None when a message is present but not separated by a space.
    """
    if not text:
        return None, ""
    rest = tag(" ", text)
    if rest is None:
        return None
    return (rest or None), ""


def parse_cf_app_log(line: str) -> Parsed[CfAppLogEntry] | None:
    """Parse a full CF application log line.

    Returns ``(entry, rest)`` or None when any field fails to match.
    """
    text = line.lstrip(" ")

    ts = parse_timestamp(text)
    if ts is None:
        return None
    timestamp, text = ts

    text = tag(" ", text)
    if text is None:
        return None

    comp = parse_component(text)
    if comp is None:
        return None
    component, text = comp

    text = tag(" ", text)
    if text is None:
        return None

    chan = parse_channel(text)
    if chan is None:
        return None
    channel, text = chan

    msg = parse_message(text)
    if msg is None:
        return None
    message, text = msg

    entry = CfAppLogEntry(timestamp=timestamp, component=component, channel=channel, message=message)
    return entry, text


@dataclass(frozen=True, slots=True)
class CfAppLogParser:
    """LineParser for `cf logs` output."""

    def parse(self, line: str) -> Parsed[CfAppLogEntry] | None:
        return parse_cf_app_log(line)
