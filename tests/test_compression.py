# Copyright (c) Meta Platforms, Inc. and affiliates.

"""Tests for compression module."""

from pathlib import Path

import pytest

from statsparser.trace.compression import detect_compression, open_trace_file
from tests.test_base import EXAMPLE_INPUTS_DIR, PROFILER_TRACE_XML


class TestDetectCompression:
    """Tests for detect_compression function."""

    def test_detect_compression_none(self) -> None:
        """Test detection of uncompressed file."""
        assert detect_compression(PROFILER_TRACE_XML) == "none"

    def test_detect_compression_zstd(self, zstd_trace_file: Path) -> None:
        """Test detection of Zstd compressed file."""
        assert detect_compression(zstd_trace_file) == "zstd"

    def test_detect_compression_ignores_extension(
        self, unnamed_zstd_trace_file: Path
    ) -> None:
        """Test detection uses the magic number, not the extension."""
        assert detect_compression(unnamed_zstd_trace_file) == "zstd"

    def test_detect_compression_empty_file(self, temp_dir: Path) -> None:
        """Test an empty file is reported as uncompressed."""
        filepath = temp_dir / "empty.xml"
        filepath.touch()
        assert detect_compression(filepath) == "none"

    def test_detect_compression_nonexistent(self) -> None:
        """Test detection raises error for non-existent file."""
        with pytest.raises(FileNotFoundError):
            detect_compression(EXAMPLE_INPUTS_DIR / "nonexistent.xml")


class TestOpenTraceFile:
    """Tests for open_trace_file context manager."""

    def test_open_plain(self) -> None:
        """Test plain files are read unchanged."""
        with open_trace_file(PROFILER_TRACE_XML) as f:
            assert f.read() == PROFILER_TRACE_XML.read_bytes()

    def test_open_zstd(self, zstd_trace_file: Path) -> None:
        """Test Zstd files are decompressed transparently."""
        with open_trace_file(zstd_trace_file) as f:
            assert f.read() == PROFILER_TRACE_XML.read_bytes()

    def test_open_zstd_multiple_frames(
        self, multi_frame_zstd_trace_file: Path
    ) -> None:
        """Test all concatenated frames are read."""
        with open_trace_file(multi_frame_zstd_trace_file) as f:
            assert f.read() == PROFILER_TRACE_XML.read_bytes()

    def test_open_nonexistent(self) -> None:
        """Test opening a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            with open_trace_file(EXAMPLE_INPUTS_DIR / "nonexistent.xml"):
                pass

    def test_open_with_known_compression(self, zstd_trace_file: Path) -> None:
        """Test a compression passed by the caller is used without re-detection."""
        with open_trace_file(zstd_trace_file, "zstd") as f:
            assert f.read() == PROFILER_TRACE_XML.read_bytes()
        with open_trace_file(zstd_trace_file, "none") as f:
            assert f.read() == zstd_trace_file.read_bytes()
