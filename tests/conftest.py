from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

CF_LINES = [
    "2021-09-28T17:00:09.36+0900 [API/0] OUT Updated app with guid 5d0c (name=reminder)",
    "2021-09-28T17:00:10.12+0900 [CELL/0] OUT Cell 7f1a creating container for instance 2b3e",
    "2021-09-28T17:00:12.50+0900 [APP/PROC/WEB/0] OUT Starting ReminderApplication on 2b3e",
    "2021-09-28T17:00:13.01+0900 [APP/PROC/WEB/0] ERR WARNING: An illegal reflective access operation",
    "2021-09-28T17:00:14.77+0900 [RTR/0] OUT reminder.example.com - [2021-09-28T08:00:14Z] \"GET / HTTP/1.1\" 200",
]

NOISE_LINES = [
    "2021-09-28 08:00:09.361 DEBUG 15 --- [scheduling-1] i.s.l.r.s.ReminderEmailSchedulerImpl : done",
    '127.0.0.1 - - [10/Oct/2000:13:55:36 -0700] "GET / HTTP/1.0" 404 2326',
    "",
]


@pytest.fixture
def cf_lines() -> list[str]:
    return list(CF_LINES)


@pytest.fixture
def noise_lines() -> list[str]:
    return list(NOISE_LINES)


@pytest.fixture
def write_log() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
