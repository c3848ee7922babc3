"""Log line grammars.

Contains the Cloud Foundry application log parser and the combinators it is
built from.
"""

from __future__ import annotations

from .base import FieldParser, LineParser, Parsed
from .cf_app_log import (
    CfAppLogParser,
    parse_cf_app_log,
    parse_channel,
    parse_component,
    parse_component_name,
    parse_message,
    parse_timestamp,
)
from .composite import all_consuming, alt, delimited, literal

__all__ = [
    "CfAppLogParser",
    "FieldParser",
    "LineParser",
    "Parsed",
    "all_consuming",
    "alt",
    "delimited",
    "literal",
    "parse_cf_app_log",
    "parse_channel",
    "parse_component",
    "parse_component_name",
    "parse_message",
    "parse_timestamp",
]
