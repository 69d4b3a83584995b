"""apache2metric - Sample output and run summary"""

from datetime import timezone
from typing import TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import RunResult, SampleRecord
from .patterns import OUTPUT_TIME_FORMAT


def format_record(record: SampleRecord) -> str:
    t = record.sample_time.astimezone(timezone.utc)
    # strftime does not zero-pad years below 1000 on every platform
    stamp = OUTPUT_TIME_FORMAT.format(year=t.year, month=t.month, day=t.day,
                                      hour=t.hour, minute=t.minute, second=t.second)
    return f"{stamp}  {record.metric_name}  {record.value}\n"


class RecordWriter:
    """Writes sample records to a text stream, one line per record"""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, record: SampleRecord):
        self.stream.write(format_record(record))

    def flush(self):
        self.stream.flush()


def print_summary(result: RunResult, console: Console):
    status = "[green]ok[/]" if result.ok else "[red]failed[/]"
    console.print(Panel.fit(
        f"Requests: [cyan]{result.events:,}[/]\n"
        f"Samples written: [cyan]{result.samples:,}[/]\n"
        f"Status: {status}",
        title="apache2metric",
        border_style="cyan"
    ))

    if result.files:
        table = Table(box=box.ROUNDED)
        table.add_column("#", style="cyan")
        table.add_column("Log file", style="white")
        for i, path in enumerate(result.files, 1):
            table.add_row(str(i), escape(path))
        console.print(table)

    if result.failure:
        failure = result.failure
        console.print(
            f"[red]Stopped at[/] {escape(failure.source)}:{failure.source_line_number}: {escape(str(failure.cause))}"
        )
