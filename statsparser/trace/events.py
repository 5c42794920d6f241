# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Performance event records and the filters applied to them.

Candidate elements pass through two independent predicates:
- relevance: the event was issued by the JDBC driver (application identity)
- post filter: the statement text is a batch with "declare" and cost CPU
"""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from statsparser.trace.errors import TraceSchemaError
from statsparser.trace.reader import qualify, TraceReader

APPLICATION_NAME_FILTER = "Microsoft JDBC Driver for SQL Server"
TEXT_DATA_FILTER = "declare"

COLUMN_TAG = "Column"
COLUMN_NAME_ATTR = "name"
APPLICATION_NAME_COLUMN = "ApplicationName"

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Column name -> PerformanceEvent field, split by conversion
INT_COLUMNS = {
    "Duration": "duration",
    "CPU": "cpu",
    "Reads": "reads",
    "Writes": "writes",
}
TEXT_COLUMNS = {
    "TextData": "text_data",
    "ApplicationName": "application_name",
    "LoginName": "login_name",
}


@dataclass(frozen=True)
class PerformanceEvent:
    """One traced statement. Absent columns keep their defaults."""

    application_name: str = ""
    text_data: str = ""
    login_name: str = ""
    duration: int = 0
    cpu: int = 0
    reads: int = 0
    writes: int = 0


def column_text(column: ET.Element) -> str:
    """Return the full text content of a column element."""
    return "".join(column.itertext())


def iter_columns(element: ET.Element, namespace: str) -> Iterator[ET.Element]:
    """Iterate over the direct Column children of an event element."""
    return iter(element.findall(qualify(namespace, COLUMN_TAG)))


def is_relevant_event(element: ET.Element, namespace: str) -> bool:
    """
    Check whether a candidate event comes from the filtered application.

    The event is relevant only when it carries exactly one ApplicationName
    column and that column's text equals APPLICATION_NAME_FILTER.

    Args:
        element: Candidate event element
        namespace: Default namespace of the document

    Returns:
        True if the event should be parsed
    """
    app_columns = [
        column
        for column in iter_columns(element, namespace)
        if column.get(COLUMN_NAME_ATTR) == APPLICATION_NAME_COLUMN
    ]
    return (
        len(app_columns) == 1
        and column_text(app_columns[0]) == APPLICATION_NAME_FILTER
    )


def _parse_int(column_name: str, text: str) -> int:
    # ASCII digits only; int() alone also accepts underscores and Unicode digits
    stripped = text.strip()
    if not INTEGER_PATTERN.fullmatch(stripped):
        raise TraceSchemaError(
            f"Column '{column_name}' expects an integer, got {text!r}"
        )
    return int(stripped)


def parse_event(element: ET.Element, namespace: str) -> PerformanceEvent:
    """
    Decode an event element into a PerformanceEvent.

    Args:
        element: Relevant event element
        namespace: Default namespace of the document

    Returns:
        PerformanceEvent populated from the element's Column children

    Raises:
        TraceSchemaError: If a Column has no name attribute or a numeric
            column does not hold an integer
    """
    fields: dict[str, Any] = {}

    for column in iter_columns(element, namespace):
        column_name = column.get(COLUMN_NAME_ATTR)
        if column_name is None:
            raise TraceSchemaError(
                f"<{COLUMN_TAG}> element in <{element.tag}> "
                f"has no '{COLUMN_NAME_ATTR}' attribute"
            )

        if column_name in INT_COLUMNS:
            fields[INT_COLUMNS[column_name]] = _parse_int(
                column_name, column_text(column)
            )
        elif column_name in TEXT_COLUMNS:
            fields[TEXT_COLUMNS[column_name]] = column_text(column)

    return PerformanceEvent(**fields)


def read_events(reader: TraceReader) -> list[PerformanceEvent]:
    """
    Extract every relevant event from a loaded trace.

    Non-relevant candidates are skipped before parsing, so malformed
    records from other applications never raise.

    Args:
        reader: Loaded trace document

    Returns:
        Parsed events in document order
    """
    return [
        parse_event(element, reader.namespace)
        for element in reader.iter_candidates()
        if is_relevant_event(element, reader.namespace)
    ]


def is_sampled_event(event: PerformanceEvent) -> bool:
    """Check whether a parsed event belongs in the summary sample."""
    return TEXT_DATA_FILTER in event.text_data and event.cpu > 0


def filter_events(events: Iterable[PerformanceEvent]) -> list[PerformanceEvent]:
    """Keep only events that pass is_sampled_event."""
    return [event for event in events if is_sampled_event(event)]
