# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Trace reader for SQL Server Profiler XML exports.

This module provides the TraceReader class, which loads a trace document
(plain or Zstd-compressed) into memory and hands out the candidate event
elements found under its Events container.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Union

import zstandard as zstd

from statsparser.trace.compression import detect_compression, open_trace_file
from statsparser.trace.errors import TraceFormatError

EVENTS_TAG = "Events"


def qualify(namespace: str, local_name: str) -> str:
    """
    Build an ElementTree tag name within a namespace.

    Args:
        namespace: Namespace URI, or "" for no namespace
        local_name: Local element name

    Returns:
        Tag in "{namespace}local" notation, or the bare local name

    Examples:
        >>> qualify("http://tempuri.org/", "Events")
        '{http://tempuri.org/}Events'
        >>> qualify("", "Events")
        'Events'
    """
    if not namespace:
        return local_name
    return f"{{{namespace}}}{local_name}"


class TraceReader:
    """
    Reader for profiler trace files.

    The whole document is parsed on construction; the default namespace
    declared on the root element is recorded so later lookups can resolve
    unprefixed names.

    Example:
        >>> reader = TraceReader("trace.xml")
        >>> for element in reader.iter_candidates():
        ...     print(element.tag)
    """

    def __init__(self, file_path: Union[str, Path]) -> None:
        """
        Load and parse the trace document.

        Args:
            file_path: Path to the trace file (.xml or .xml.zst)

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            TraceFormatError: If the file is not well-formed XML, declares an
                unknown encoding, or holds corrupt Zstd data
        """
        self.file_path = Path(file_path)
        # Raises FileNotFoundError for a missing file
        self.compression = detect_compression(self.file_path)
        self.root, self.namespace = self._load()

    def _load(self) -> tuple[ET.Element, str]:
        root = None
        namespace = ""

        with open_trace_file(self.file_path, self.compression) as f:
            try:
                for event, item in ET.iterparse(f, events=("start-ns", "start")):
                    if event == "start-ns":
                        prefix, uri = item
                        # Only declarations made on the root element count
                        if root is None and prefix == "":
                            namespace = uri
                    elif root is None:
                        root = item
            except ET.ParseError as e:
                raise TraceFormatError(
                    f"Malformed XML in {self.file_path}: {e}"
                ) from e
            except LookupError as e:
                raise TraceFormatError(
                    f"Unsupported encoding in {self.file_path}: {e}"
                ) from e
            except zstd.ZstdError as e:
                raise TraceFormatError(
                    f"Corrupt Zstd data in {self.file_path}: {e}"
                ) from e

        if root is None:
            raise TraceFormatError(f"No root element in {self.file_path}")

        return root, namespace

    def tag(self, local_name: str) -> str:
        """Qualify a local name with the document's default namespace."""
        return qualify(self.namespace, local_name)

    def events_container(self) -> ET.Element:
        """
        Find the Events container under the root element.

        Returns:
            The first direct child of the root named Events

        Raises:
            TraceFormatError: If the root has no Events child
        """
        container = self.root.find(self.tag(EVENTS_TAG))
        if container is None:
            raise TraceFormatError(
                f"No '{EVENTS_TAG}' element found under the root of {self.file_path}"
            )
        return container

    def iter_candidates(self) -> Iterator[ET.Element]:
        """
        Iterate over the candidate event elements in document order.

        Every direct child of the Events container is a candidate,
        whatever its tag name.

        Yields:
            ET.Element: Each candidate event element

        Raises:
            TraceFormatError: If the Events container is missing
        """
        yield from self.events_container()
