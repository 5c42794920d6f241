# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
statsparser: descriptive statistics for SQL Server Profiler XML traces.
"""

from .formatters import format_summary_text
from .summary import build_summary, PerformanceSummary

__all__ = [
    "build_summary",
    "format_summary_text",
    "PerformanceSummary",
]
