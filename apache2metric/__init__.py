"""apache2metric package"""

from .patterns import VERSION, DESCRIPTION, DEFAULT_METRIC_NAME, DEFAULT_SAMPLING_INTERVAL
from .errors import (
    Apache2MetricError,
    UsageError,
    FileOpenError,
    MalformedLineError,
    TimestampParseError,
)
from .models import LogEvent, SampleRecord, AccumulatorState, LineFailure, RunResult
from .extractor import extract_request_time, parse_request_time
from .downsampler import Downsampler, downsample
from .reader import open_log_files, iter_lines
from .config import RunConfig, parse_duration
from .output import RecordWriter, format_record, print_summary

__all__ = [
    'VERSION', 'DESCRIPTION', 'DEFAULT_METRIC_NAME', 'DEFAULT_SAMPLING_INTERVAL',
    'Apache2MetricError', 'UsageError', 'FileOpenError', 'MalformedLineError',
    'TimestampParseError', 'LogEvent', 'SampleRecord', 'AccumulatorState',
    'LineFailure', 'RunResult', 'extract_request_time', 'parse_request_time',
    'Downsampler', 'downsample', 'open_log_files', 'iter_lines', 'RunConfig',
    'parse_duration', 'RecordWriter', 'format_record', 'print_summary',
]
