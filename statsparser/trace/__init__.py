# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
statsparser trace module.

This module provides loading and filtering of profiler trace files:
- TraceReader: Load an XML trace (plain or Zstd) and iterate candidates
- read_events: Parse the events issued by the JDBC driver
- filter_events: Keep the "declare" batches that consumed CPU
"""

from .errors import (
    EmptySampleError,
    StatsParserError,
    TraceFormatError,
    TraceSchemaError,
)
from .events import (
    APPLICATION_NAME_FILTER,
    filter_events,
    is_relevant_event,
    is_sampled_event,
    parse_event,
    PerformanceEvent,
    read_events,
    TEXT_DATA_FILTER,
)
from .reader import qualify, TraceReader

__all__ = [
    # Errors
    "StatsParserError",
    "TraceFormatError",
    "TraceSchemaError",
    "EmptySampleError",
    # Reader
    "qualify",
    "TraceReader",
    # Events
    "APPLICATION_NAME_FILTER",
    "TEXT_DATA_FILTER",
    "PerformanceEvent",
    "is_relevant_event",
    "parse_event",
    "read_events",
    "is_sampled_event",
    "filter_events",
]
