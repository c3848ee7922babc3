from __future__ import annotations

import argparse
import asyncio
import codecs
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from cf_app_log_detector.core.classifier import DEFAULT_TRIGGER_PERCENTAGE, ClassifierConfig
from cf_app_log_detector.core.log_service import detect_file
from cf_app_log_detector.core.report import ClassificationReport

LOGGER = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def _configure_logging(debug: bool) -> None:
    """Send logs to stderr; stdout is reserved for debug counts and JSON."""
    if debug:
        level = logging.DEBUG
    else:
        level_name = os.getenv("CF_LOG_DETECTOR_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_trigger_percentage() -> int:
    env = os.getenv("CF_LOG_DETECTOR_PERCENTAGE")
    if not env:
        return DEFAULT_TRIGGER_PERCENTAGE
    try:
        return int(env)
    except ValueError as exc:
        raise ValueError("CF_LOG_DETECTOR_PERCENTAGE must be an integer") from exc


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cf-app-log-detector",
        description="Try to detect log outputted by CF cli.",
    )
    p.add_argument("log_path", metavar="LOG", help="Log file")
    p.add_argument(
        "-p",
        "--percentage-matching",
        dest="percentage_matching",
        type=int,
        default=None,
        help=(
            "Percentage of line matching expected format for the file to be considered "
            f"an application log (default: $CF_LOG_DETECTOR_PERCENTAGE or {DEFAULT_TRIGGER_PERCENTAGE})"
        ),
    )
    p.add_argument(
        "--one-line-match",
        action="store_true",
        help="Consider the file to be CF app log if a single line matches expected format",
    )
    p.add_argument("-d", "--debug", action="store_true", help="Enable debugging")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print a JSON report on stdout")
    p.add_argument("--encoding", default="utf-8", help="Text encoding of the log file (default: utf-8)")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.debug)

    try:
        trigger_percentage = args.percentage_matching
        if trigger_percentage is None:
            trigger_percentage = _resolve_trigger_percentage()
        codecs.lookup(args.encoding)
    except (ValueError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(EXIT_ERROR)

    path = Path(args.log_path)
    config = ClassifierConfig(
        trigger_percentage=trigger_percentage,
        stop_on_first_match=args.one_line_match,
    )
    LOGGER.debug("Starting detection (path=%s, config=%s)", path, config)

    try:
        result = asyncio.run(detect_file(path, config, encoding=args.encoding))
    except (OSError, EOFError) as e:
        print(f"Failed parsing file: {path}, message: {e}", file=sys.stderr)
        raise SystemExit(EXIT_ERROR)
    except LookupError as e:  # binary codecs such as rot13 pass codecs.lookup
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(EXIT_ERROR)

    if args.debug:
        print(f"[DEBUG] total number of lines: {result.total_lines}")
        print(f"[DEBUG] log lines matching: {result.matching_lines}")
        print(f"[DEBUG] percentage matching: {result.percentage}")

    if args.as_json:
        print(ClassificationReport.from_verdict(str(path), result, config).model_dump_json(indent=2))

    if result.matches:
        print(f"{path} is a CF application log [{result.percentage}% line matching]", file=sys.stderr)
        raise SystemExit(EXIT_MATCH)

    print(f"{path} is NOT CF application log [{result.percentage}% line matching]", file=sys.stderr)
    raise SystemExit(EXIT_NO_MATCH)


if __name__ == "__main__":
    main()
