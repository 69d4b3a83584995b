"""apache2metric - Log file input"""

import logging
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import IO, Iterator, List, Sequence, Tuple

from .errors import FileOpenError

logger = logging.getLogger(__name__)


@contextmanager
def open_log_files(paths: Sequence[str]) -> Iterator[List[Tuple[str, IO[str]]]]:
    """Open every log file up front and close them all on exit.

    Raises FileOpenError for the first path that cannot be opened, before any
    line has been read.
    """
    with ExitStack() as stack:
        files = []
        for path in paths:
            try:
                f = stack.enter_context(
                    open(Path(path), 'r', encoding='utf-8', errors='replace', newline='\n')
                )
            except OSError as e:
                raise FileOpenError(path, e) from e
            logger.debug("opened %s", path)
            files.append((path, f))
        yield files


def iter_lines(files: Sequence[Tuple[str, IO[str]]]) -> Iterator[Tuple[str, int, int, str]]:
    """Yield (source, source_line_number, line_number, text) over all files
    as one stream.

    line_number counts from 1 across the whole stream, source_line_number
    restarts at 1 for every file.
    """
    line_number = 0
    for source, f in files:
        for source_line_number, line in enumerate(f, 1):
            line_number += 1
            yield source, source_line_number, line_number, line.rstrip('\r\n')
