# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Pytest configuration and shared fixtures for statsparser tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest
import zstandard as zstd

from tests.test_base import PROFILER_TRACE_XML


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def zstd_trace_file(temp_dir: Path) -> Path:
    """Compress the sample trace with Zstd."""
    filepath = temp_dir / "profiler_trace_sample.xml.zst"
    cctx = zstd.ZstdCompressor(level=19)
    filepath.write_bytes(cctx.compress(PROFILER_TRACE_XML.read_bytes()))
    return filepath


@pytest.fixture
def multi_frame_zstd_trace_file(temp_dir: Path) -> Path:
    """Compress the sample trace as two independent Zstd frames."""
    filepath = temp_dir / "profiler_trace_frames.xml.zst"
    data = PROFILER_TRACE_XML.read_bytes()
    middle = len(data) // 2
    cctx = zstd.ZstdCompressor()
    filepath.write_bytes(cctx.compress(data[:middle]) + cctx.compress(data[middle:]))
    return filepath


@pytest.fixture
def unnamed_zstd_trace_file(temp_dir: Path) -> Path:
    """Zstd-compressed sample trace without a compression extension."""
    filepath = temp_dir / "profiler_trace_sample.xml"
    filepath.write_bytes(zstd.ZstdCompressor().compress(PROFILER_TRACE_XML.read_bytes()))
    return filepath
