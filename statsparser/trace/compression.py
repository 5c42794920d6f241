# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Compression utilities for trace files.

Profiler XML exports compress very well, so traces are often archived
with Zstd. This module lets the loader accept both forms transparently.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

import zstandard as zstd

# Zstd magic number (little-endian): 0xFD2FB528
ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"


def detect_compression(filepath: Union[str, Path]) -> str:
    """
    Detect compression format of a file.

    Uses magic number detection, so it works regardless of extension.

    Args:
        filepath: Path to the file to check

    Returns:
        Compression type: "zstd" or "none"

    Raises:
        FileNotFoundError: If file does not exist
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "rb") as f:
        magic = f.read(4)
        if magic == ZSTD_MAGIC:
            return "zstd"

    return "none"


@contextmanager
def open_trace_file(
    filepath: Union[str, Path], compression: Optional[str] = None
) -> Iterator[BinaryIO]:
    """
    Open a trace file for reading, automatically handling compression.

    The stream is binary so the XML parser can honour the document's
    own encoding declaration.

    Args:
        filepath: Path to the trace file
        compression: Result of detect_compression, if already known

    Yields:
        Binary stream of the (decompressed) file contents

    Raises:
        FileNotFoundError: If file does not exist

    Example:
        >>> with open_trace_file("trace.xml.zst") as f:
        ...     root = ElementTree.parse(f).getroot()
    """
    filepath = Path(filepath)
    if compression is None:
        compression = detect_compression(filepath)

    if compression == "zstd":
        # stream_reader handles multiple concatenated frames
        dctx = zstd.ZstdDecompressor()
        with open(filepath, "rb") as binary_file:
            with dctx.stream_reader(binary_file, read_across_frames=True) as reader:
                yield reader
    else:
        with open(filepath, "rb") as f:
            yield f
