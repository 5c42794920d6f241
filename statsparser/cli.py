# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
statsparser CLI entry point.

Summarizes CPU, duration and I/O of the JDBC driver's "declare" batches
recorded in a SQL Server Profiler XML trace.
"""

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click
from statsparser.formatters import format_summary_text
from statsparser.summary import build_summary
from statsparser.trace import (
    filter_events,
    read_events,
    StatsParserError,
    TraceReader,
)


def _get_package_version() -> str:
    """Get package version from metadata."""
    try:
        return version("statsparser")
    except PackageNotFoundError:
        return "0+unknown"


EXAMPLES = """
Examples:
  statsparser profiler_trace.xml
  statsparser profiler_trace.xml.zst
"""


@click.command(name="statsparser", epilog=EXAMPLES)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.version_option(version=_get_package_version(), prog_name="statsparser")
def main(file: Path) -> None:
    """Summarize JDBC "declare" batches in a profiler trace.

    FILE is the path to the XML trace export (optionally Zstd-compressed).
    """
    try:
        reader = TraceReader(file)
        events = filter_events(read_events(reader))
        summary = build_summary(events)
    except (OSError, StatsParserError) as e:
        raise click.ClickException(str(e))

    click.echo(format_summary_text(summary))


if __name__ == "__main__":
    sys.exit(main())
