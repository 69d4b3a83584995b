"""Shared test fixtures for all test modules."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Iterable

import pytest

T0 = datetime(2012, 12, 31, 23, 0, 0, tzinfo=timezone.utc)
MONTH_ABBREVS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def apache_line(when: datetime, path: str = "/") -> str:
    """Format a request the way apache's combined log does."""
    month = MONTH_ABBREVS[when.month - 1]
    stamp = when.strftime(f"%d/{month}/%Y:%H:%M:%S %z")
    return f'127.0.0.1 - - [{stamp}] "GET {path} HTTP/1.0" 200 232 "-" "curl/7.68.0"'


def lines_at(offsets: Iterable[int], start: datetime = T0) -> list[str]:
    """Log lines for requests at the given seconds after start."""
    return [apache_line(start + timedelta(seconds=s)) for s in offsets]


@pytest.fixture
def t0() -> datetime:
    return T0


@pytest.fixture
def write_log(tmp_path: Path) -> Callable[..., str]:
    """Factory writing log lines to a file under tmp_path, returns its path."""

    def _write(name: str, lines: Iterable[str]) -> str:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)

    return _write
