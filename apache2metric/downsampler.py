"""apache2metric - Downsampling of request times into cumulative counts"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional, Tuple

from .errors import MalformedLineError, TimestampParseError
from .extractor import extract_request_time
from .models import AccumulatorState, LineFailure, LogEvent, RunResult, SampleRecord
from .patterns import DEFAULT_METRIC_NAME

logger = logging.getLogger(__name__)


class Downsampler:
    """Counts requests and emits the running total every sampling interval.

    The first request anchors the sampling points. A sample is emitted when a
    request arrives more than one interval after the last sampling point; it
    is stamped one interval after that point and carries the count of requests
    seen before the arriving one. A single request moves the sampling point by
    at most one interval, so long gaps in the log are not backfilled.
    Requests after the last sampling point are never reported.
    """

    def __init__(self, metric_name: str = DEFAULT_METRIC_NAME,
                 sampling_interval: timedelta = timedelta(seconds=10)):
        # log timestamps have second precision
        seconds = int(sampling_interval.total_seconds())
        if seconds < 1:
            raise ValueError(f"sampling interval must be at least 1s, got {sampling_interval}")
        self.metric_name = metric_name
        self.interval = timedelta(seconds=seconds)
        self.state = AccumulatorState()

    @property
    def started(self) -> bool:
        return self.state.last_sample_time is not None

    @property
    def request_count(self) -> int:
        return self.state.request_count

    def observe(self, timestamp: datetime) -> Optional[SampleRecord]:
        state = self.state
        if state.last_sample_time is None:
            state.last_sample_time = timestamp

        record = None
        if timestamp - state.last_sample_time > self.interval:
            sample_time = state.last_sample_time + self.interval
            record = SampleRecord(
                sample_time=sample_time,
                metric_name=self.metric_name,
                value=state.request_count,
            )
            state.last_sample_time = sample_time

        state.request_count += 1
        return record


def downsample(lines: Iterable[Tuple[str, int, int, str]],
               downsampler: Downsampler, sink) -> RunResult:
    """Feed log lines through the downsampler, writing samples to sink.

    Stops at the first line without a valid request time and reports it in
    the returned result. Samples written before that line are kept.
    """
    result = RunResult()
    for source, source_line_number, line_number, text in lines:
        line = text.strip()
        try:
            timestamp = extract_request_time(line)
        except (MalformedLineError, TimestampParseError) as e:
            logger.debug("%s:%d: %s", source, source_line_number, e)
            result.failure = LineFailure(
                line_number=line_number,
                source=source,
                source_line_number=source_line_number,
                line=line,
                cause=e,
            )
            return result

        event = LogEvent(timestamp=timestamp, source=source, line_number=line_number)
        record = downsampler.observe(event.timestamp)
        result.events += 1
        if record is not None:
            sink.write(record)
            result.samples += 1
            logger.debug("sample at %s: %d (line %d)", record.sample_time, record.value,
                         event.line_number)

    logger.debug("processed %d requests, wrote %d samples", result.events, result.samples)
    return result
