"""apache2metric - Data models"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class LogEvent:
    """One parsed request"""
    timestamp: datetime
    source: str
    line_number: int


@dataclass(frozen=True)
class SampleRecord:
    """Cumulative request count at a sampling point"""
    sample_time: datetime
    metric_name: str
    value: int


@dataclass
class AccumulatorState:
    request_count: int = 0
    last_sample_time: Optional[datetime] = None


@dataclass(frozen=True)
class LineFailure:
    """Line that stopped the run"""
    line_number: int
    source: str
    source_line_number: int
    line: str
    cause: Exception

    def describe(self) -> str:
        return f"line {self.line_number}: failed to extract timestamp: {self.cause}"


@dataclass
class RunResult:
    events: int = 0
    samples: int = 0
    files: List[str] = field(default_factory=list)
    failure: Optional[LineFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None
