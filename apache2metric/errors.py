"""apache2metric - Error taxonomy"""


class Apache2MetricError(Exception):
    """Base class for all errors that abort a run"""


class UsageError(Apache2MetricError):
    """Invalid command line, e.g. no log files given"""


class FileOpenError(Apache2MetricError):
    """A named input file could not be opened"""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"open {path}: {reason}")


class MalformedLineError(Apache2MetricError):
    """Line has no bracket-enclosed timestamp"""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"line does not contain a brace-enclosed timestamp: {line}")


class TimestampParseError(Apache2MetricError):
    """Bracket-enclosed text is not a valid apache request time"""

    def __init__(self, text: str, cause: Exception):
        self.text = text
        self.cause = cause
        super().__init__(f"cannot parse {text!r} as request time: {cause}")
