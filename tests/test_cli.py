from __future__ import annotations

import json
from pathlib import Path

import pytest

from cf_app_log_detector.cli import EXIT_ERROR, EXIT_MATCH, EXIT_NO_MATCH, main


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_cli_match(tmp_path: Path, write_log, cf_lines, capsys) -> None:
    path = tmp_path / "cf.log"
    write_log(path, cf_lines)

    assert _run([str(path)]) == EXIT_MATCH

    err = capsys.readouterr().err
    assert f"{path} is a CF application log [100% line matching]" in err


def test_cli_no_match(tmp_path: Path, write_log, cf_lines, noise_lines, capsys) -> None:
    path = tmp_path / "mixed.log"
    write_log(path, cf_lines + noise_lines)

    assert _run([str(path)]) == EXIT_NO_MATCH

    err = capsys.readouterr().err
    assert f"{path} is NOT CF application log [62% line matching]" in err


def test_cli_percentage_option(tmp_path: Path, write_log, cf_lines, noise_lines) -> None:
    path = tmp_path / "mixed.log"
    write_log(path, cf_lines + noise_lines)

    assert _run(["-p", "60", str(path)]) == EXIT_MATCH
    assert _run(["--percentage-matching", "70", str(path)]) == EXIT_NO_MATCH


def test_cli_percentage_from_env(tmp_path: Path, write_log, cf_lines, noise_lines, monkeypatch) -> None:
    path = tmp_path / "mixed.log"
    write_log(path, cf_lines + noise_lines)

    monkeypatch.setenv("CF_LOG_DETECTOR_PERCENTAGE", "50")
    assert _run([str(path)]) == EXIT_MATCH

    monkeypatch.setenv("CF_LOG_DETECTOR_PERCENTAGE", "many")
    assert _run([str(path)]) == EXIT_ERROR


def test_cli_one_line_match(tmp_path: Path, write_log, cf_lines, noise_lines, capsys) -> None:
    path = tmp_path / "mostly_noise.log"
    write_log(path, noise_lines * 20 + cf_lines[:1])

    assert _run([str(path)]) == EXIT_NO_MATCH
    assert _run(["--one-line-match", str(path)]) == EXIT_MATCH


def test_cli_debug_counts(tmp_path: Path, write_log, cf_lines, noise_lines, capsys) -> None:
    path = tmp_path / "mixed.log"
    write_log(path, cf_lines + noise_lines)

    _run(["--debug", str(path)])

    out = capsys.readouterr().out
    assert "[DEBUG] total number of lines: 8" in out
    assert "[DEBUG] log lines matching: 5" in out
    assert "[DEBUG] percentage matching: 62" in out


def test_cli_json_report(tmp_path: Path, write_log, cf_lines, capsys) -> None:
    path = tmp_path / "cf.log"
    write_log(path, cf_lines)

    assert _run(["--json", str(path)]) == EXIT_MATCH

    report = json.loads(capsys.readouterr().out)
    assert report == {
        "path": str(path),
        "total_lines": 5,
        "matching_lines": 5,
        "percentage": 100,
        "trigger_percentage": 90,
        "one_line_match": False,
        "matches": True,
    }


def test_cli_missing_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "missing.log"

    assert _run([str(path)]) == EXIT_ERROR
    assert "Failed parsing file" in capsys.readouterr().err


def test_cli_unknown_encoding(tmp_path: Path, write_log, cf_lines) -> None:
    path = tmp_path / "cf.log"
    write_log(path, cf_lines)

    assert _run(["--encoding", "no-such-codec", str(path)]) == EXIT_ERROR


def test_cli_explicit_percentage_ignores_bad_env(tmp_path: Path, write_log, cf_lines, monkeypatch) -> None:
    path = tmp_path / "cf.log"
    write_log(path, cf_lines)
    monkeypatch.setenv("CF_LOG_DETECTOR_PERCENTAGE", "many")

    assert _run(["-p", "90", str(path)]) == EXIT_MATCH


def test_cli_corrupt_gzip(tmp_path: Path, write_log, cf_lines, capsys) -> None:
    path = tmp_path / "cf.log.gz"
    write_log(path, cf_lines)  # plain text behind a .gz suffix

    assert _run([str(path)]) == EXIT_ERROR
    assert f"Failed parsing file: {path}" in capsys.readouterr().err


def test_cli_unknown_encoding_on_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.log"
    path.write_bytes(b"")

    assert _run(["--encoding", "no-such-codec", str(path)]) == EXIT_ERROR
