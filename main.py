#!/usr/bin/env python3
"""apache2metric - Entry point"""

import argparse
import logging
import sys
from contextlib import ExitStack

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from apache2metric import (
    DEFAULT_METRIC_NAME,
    DEFAULT_SAMPLING_INTERVAL,
    DESCRIPTION,
    VERSION,
    Apache2MetricError,
    Downsampler,
    FileOpenError,
    RecordWriter,
    RunConfig,
    downsample,
    iter_lines,
    open_log_files,
    parse_duration,
    print_summary,
)

logger = logging.getLogger("apache2metric")


def duration(text):
    try:
        return parse_duration(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="apache2metric",
        usage="%(prog)s [OPTIONS] FILE ...",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="Apache log files, in increasing order of time")
    parser.add_argument("--metric-name", default=DEFAULT_METRIC_NAME,
                        help="The metric name to use in the output. (default: %(default)s)")
    parser.add_argument("--sampling-interval", type=duration,
                        default=parse_duration(DEFAULT_SAMPLING_INTERVAL),
                        help="The sampling interval to use between reported request count "
                             f"metric values in the output file. (default: {DEFAULT_SAMPLING_INTERVAL})")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--summary", action="store_true", help="Print a run summary to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    parser.add_argument("--version", action="version", version=f"apache2metric v{VERSION}")
    return parser


def configure_logging(console, verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def run(config, console):
    """Downsample config.files into config.output. Returns the exit code."""
    downsampler = Downsampler(config.metric_name, config.sampling_interval)

    with ExitStack() as stack:
        files = stack.enter_context(open_log_files(config.files))
        if config.output:
            try:
                stream = stack.enter_context(open(config.output, 'w', encoding='utf-8'))
            except OSError as e:
                raise FileOpenError(config.output, e) from e
        else:
            stream = sys.stdout

        writer = RecordWriter(stream)
        try:
            result = downsample(iter_lines(files), downsampler, writer)
        finally:
            writer.flush()

    result.files = list(config.files)
    logger.debug("%d requests in %d files, %d samples", result.events, len(result.files),
                 result.samples)

    if config.summary:
        print_summary(result, console)

    if not result.ok:
        console.print(f"[red]error:[/] {escape(result.failure.describe())}", soft_wrap=True)
        return 1
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console(stderr=True)
    configure_logging(console, args.verbose)

    config = RunConfig(
        metric_name=args.metric_name,
        sampling_interval=args.sampling_interval,
        files=args.files,
        output=args.output,
        summary=args.summary,
    )

    try:
        config.validate()
        return run(config, console)
    except Apache2MetricError as e:
        console.print(f"[red]error:[/] {escape(str(e))}\n", soft_wrap=True)
        parser.print_help(sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
