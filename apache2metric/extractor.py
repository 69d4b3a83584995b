"""apache2metric - Request time extraction"""

from datetime import datetime, timedelta, timezone

from .errors import MalformedLineError, TimestampParseError
from .patterns import MONTHS, REQUEST_TIME_PATTERN


def parse_request_time(text: str) -> datetime:
    """Parse an apache request time such as ``10/Oct/2000:13:55:36 -0700``.

    Only the exact layout is accepted. Raises ``ValueError`` otherwise.
    """
    match = REQUEST_TIME_PATTERN.fullmatch(text)
    if not match:
        raise ValueError("does not match DD/Mon/YYYY:HH:MM:SS +HHMM")

    groups = match.groupdict()
    month = MONTHS.get(groups['month'])
    if month is None:
        raise ValueError(f"unknown month {groups['month']!r}")
    if int(groups['tz_minute']) > 59:
        raise ValueError(f"invalid zone offset {groups['sign']}{groups['tz_hour']}{groups['tz_minute']}")

    offset = timedelta(hours=int(groups['tz_hour']), minutes=int(groups['tz_minute']))
    if groups['sign'] == '-':
        offset = -offset
    # timezone() rejects offsets of a day or more
    tz = timezone(offset)

    return datetime(
        int(groups['year']),
        month,
        int(groups['day']),
        int(groups['hour']),
        int(groups['minute']),
        int(groups['second']),
        tzinfo=tz,
    )


def extract_request_time(line: str) -> datetime:
    """Extract the request time from an apache log entry, typically of form:

        127.0.0.1 - - [10/Oct/2000:13:55:36 -0700] "GET / HTTP/1.0" 200 232
    """
    time_start = line.find('[')
    time_end = line.find(']')
    if time_start < 0 or time_end < 0 or time_start > time_end:
        raise MalformedLineError(line)

    text = line[time_start + 1:time_end]
    try:
        return parse_request_time(text)
    except ValueError as e:
        raise TimestampParseError(text, e) from e
