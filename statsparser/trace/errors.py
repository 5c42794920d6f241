# Copyright (c) Meta Platforms, Inc. and affiliates.

"""Exceptions raised while reading and summarizing trace files."""


class StatsParserError(Exception):
    """Base class for trace processing errors."""
    pass


class TraceFormatError(StatsParserError):
    """The document is not well-formed XML or lacks the Events container."""
    pass


class TraceSchemaError(StatsParserError):
    """An event column is missing its name or holds an unparseable value."""
    pass


class EmptySampleError(StatsParserError):
    """No events survived filtering, so there is nothing to summarize."""
    pass
