# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Summary formatting utilities.

Renders a PerformanceSummary as fixed-width "label:value" lines.
All functions are pure (no side effects) and return strings.
"""

from typing import Union

from statsparser.summary import PerformanceSummary

COLUMN_WIDTH = 20

# Report order: (label, PerformanceSummary attribute)
SUMMARY_LINES = [
    ("Sample Size", "sample_size"),
    ("Min CPU", "min_cpu"),
    ("Max CPU", "max_cpu"),
    ("Average CPU", "average_cpu"),
    ("Min Duration", "min_duration"),
    ("Max Duration", "max_duration"),
    ("Average Duration", "average_duration"),
    ("Average Reads", "average_reads"),
    ("Average Writes", "average_writes"),
]


def format_value(value: Union[int, float]) -> str:
    """
    Format a numeric value for display.

    Integers and integral floats print without a fractional part;
    other floats use the shortest representation that round-trips.

    Args:
        value: Number to format

    Returns:
        String representation suitable for display

    Examples:
        >>> format_value(15.0)
        '15'
        >>> format_value(2.5)
        '2.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_line(label: str, value: str, width: int = COLUMN_WIDTH) -> str:
    """Right-align label and value to width, joined by a colon."""
    return f"{label:>{width}}:{value:>{width}}"


def format_summary_text(summary: PerformanceSummary) -> str:
    """
    Format a summary as one line per metric.

    Args:
        summary: Summary to render

    Returns:
        Newline-joined report lines, in report order
    """
    return "\n".join(
        format_line(label, format_value(getattr(summary, attr)))
        for label, attr in SUMMARY_LINES
    )
