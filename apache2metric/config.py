"""apache2metric - Run configuration"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from .errors import UsageError
from .patterns import (
    DEFAULT_METRIC_NAME,
    DEFAULT_SAMPLING_INTERVAL,
    DURATION_PATTERN,
    DURATION_UNITS,
)


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as ``10s``, ``1m30s`` or ``1.5h``.

    A bare ``0`` is accepted. Negative durations are not.
    """
    if text == '0':
        return timedelta(0)
    if not text:
        raise ValueError("invalid duration ''")

    seconds = 0.0
    rest = text
    while rest:
        match = DURATION_PATTERN.match(rest)
        if not match:
            raise ValueError(f"invalid duration {text!r}")
        term = match.group(0)
        number = term.rstrip('nuµmsh')
        unit = term[len(number):]
        seconds += float(number) * DURATION_UNITS[unit]
        rest = rest[match.end():]
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise ValueError(f"invalid duration {text!r}: out of range") from e


@dataclass
class RunConfig:
    metric_name: str = DEFAULT_METRIC_NAME
    sampling_interval: timedelta = field(
        default_factory=lambda: parse_duration(DEFAULT_SAMPLING_INTERVAL)
    )
    files: List[str] = field(default_factory=list)
    output: Optional[str] = None
    summary: bool = False

    def validate(self):
        if not self.files:
            raise UsageError("no apache log files given")
        if not self.metric_name:
            raise UsageError("metric name must not be empty")
        if int(self.sampling_interval.total_seconds()) < 1:
            raise UsageError(
                f"sampling interval must be at least 1s, got {self.sampling_interval}"
            )
