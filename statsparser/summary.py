# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Descriptive statistics over a filtered set of performance events.
"""

from dataclasses import dataclass
from typing import Sequence

from statsparser.trace.errors import EmptySampleError
from statsparser.trace.events import PerformanceEvent


@dataclass(frozen=True)
class PerformanceSummary:
    """Summary statistics for a sample of events."""

    sample_size: int
    min_cpu: int
    max_cpu: int
    min_duration: int
    max_duration: int
    average_cpu: float
    average_duration: float
    average_reads: float
    average_writes: float


def _average(values: list[int]) -> float:
    return sum(values) / len(values)


def build_summary(events: Sequence[PerformanceEvent]) -> PerformanceSummary:
    """
    Compute min/max/average statistics for a sample of events.

    Args:
        events: Filtered events to summarize

    Returns:
        PerformanceSummary for the sample

    Raises:
        EmptySampleError: If events is empty, since min, max and average
            are undefined for an empty sample
    """
    if not events:
        raise EmptySampleError("No events matched the filters; nothing to summarize.")

    cpu = [e.cpu for e in events]
    duration = [e.duration for e in events]

    return PerformanceSummary(
        sample_size=len(events),
        min_cpu=min(cpu),
        max_cpu=max(cpu),
        min_duration=min(duration),
        max_duration=max(duration),
        average_cpu=_average(cpu),
        average_duration=_average(duration),
        average_reads=_average([e.reads for e in events]),
        average_writes=_average([e.writes for e in events]),
    )
