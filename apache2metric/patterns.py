"""apache2metric - Constants and patterns"""

import re

VERSION = "1.0.0"

DEFAULT_METRIC_NAME = "reqcount"
DEFAULT_SAMPLING_INTERVAL = "10s"

DESCRIPTION = """\
The script takes a sequence of apache request log files (in increasing order
of time) and downsamples them. The output, which is written to stdout,
represents an increasing request count that follows the LINE FORMAT described
below. Requests in the apache log are counted over the specified
sampling-interval and reported as an accumulated sum of requests at every
sampling point. The metric file can be used to ingest the metrics into a
time-series database such as InfluxDB.

The LINE FORMAT looks as follows:

  # time (ISO8601)      metric    value
  2012-12-31T23:00:00Z  reqcount  100
  2012-12-31T23:00:10Z  reqcount  150
  2012-12-31T23:00:20Z  reqcount  210
"""

# Request time as written by apache, e.g. 10/Oct/2000:13:55:36 -0700
REQUEST_TIME_PATTERN = re.compile(
    r'^(?P<day>\d{2})/(?P<month>[A-Z][a-z]{2})/(?P<year>\d{4})'
    r':(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})'
    r' (?P<sign>[+-])(?P<tz_hour>\d{2})(?P<tz_minute>\d{2})$',
    re.ASCII,
)

MONTHS = {
    'Jan': 1, 'Feb': 2, 'Mar': 3, 'Apr': 4, 'May': 5, 'Jun': 6,
    'Jul': 7, 'Aug': 8, 'Sep': 9, 'Oct': 10, 'Nov': 11, 'Dec': 12,
}

# Go-style duration, e.g. 10s, 1m30s, 1.5h, 500ms
DURATION_PATTERN = re.compile(r'^(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|ms|s|m|h)', re.ASCII)
DURATION_UNITS = {
    'ns': 1e-9,
    'us': 1e-6,
    'µs': 1e-6,
    'ms': 1e-3,
    's': 1,
    'm': 60,
    'h': 3600,
}

OUTPUT_TIME_FORMAT = '{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}Z'
