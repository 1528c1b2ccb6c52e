"""Values-file comment extraction.

Documentation comments precede the key they describe:

    # image.tag -- The image tag to use
    # which may continue on following comment lines
    # @default -- "latest"
    image:
      tag: stable

The scanner is a two-state machine. While SEARCHING it looks for a
`# <key> -- <text>` line. While ACCUMULATING it closes the record on a
`# @default -- <text>` line, extends the description on any other comment
line, and closes the record without a default on a non-comment line.
A record still accumulating at end of input is dropped.
"""

from __future__ import annotations

import io
import re
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from .files import read_chart_file
from .models import DEFAULT_VALUES_FILE, ScanMode, ValueDescription

log = logger.bind(stage="comments")

VALUES_DESCRIPTION_RE = re.compile(r"^\s*# (.*?) -- (.*)$", re.ASCII)
DEFAULT_VALUE_RE = re.compile(r"^\s*# @default -- (.*)$", re.ASCII)
COMMENT_CONTINUATION_RE = re.compile(r"^\s*# (.*)$", re.ASCII)


class CommentScanner:
    """Single-pass scanner over the lines of one values file."""

    def __init__(self) -> None:
        self.mode = ScanMode.SEARCHING
        self.pending_key = ""
        self.pending_description = ""
        self.descriptions: dict[str, ValueDescription] = {}

    def feed(self, line: str) -> None:
        """Apply one line to the state machine."""
        if self.mode == ScanMode.SEARCHING:
            match = VALUES_DESCRIPTION_RE.match(line)
            if match is None:
                return
            self.pending_key, self.pending_description = match.group(1, 2)
            self.mode = ScanMode.ACCUMULATING
            return

        match = DEFAULT_VALUE_RE.match(line)
        if match is not None:
            self._close(default=match.group(1))
            return

        match = COMMENT_CONTINUATION_RE.match(line)
        if match is not None:
            self.pending_description += " " + match.group(1)
            return

        self._close(default=None)

    def _close(self, default: str | None) -> None:
        # Later records for the same key replace earlier ones
        self.descriptions[self.pending_key] = ValueDescription(
            description=self.pending_description,
            default=default,
        )
        self.mode = ScanMode.SEARCHING
        self.pending_key = ""
        self.pending_description = ""


def extract_value_descriptions(lines: Iterable[str]) -> dict[str, ValueDescription]:
    """Map each documented key to its ValueDescription.

    Lines may carry a trailing newline. A key whose comment block runs to
    end of input without a terminating line produces no record.
    """
    scanner = CommentScanner()
    for line in lines:
        scanner.feed(line.rstrip("\r\n"))

    if scanner.mode == ScanMode.ACCUMULATING:
        log.debug(f"Dropping trailing description for '{scanner.pending_key}' (no terminating line)")

    return scanner.descriptions


def parse_values_file_comments(
    chart_directory: Path,
    values_file: str = DEFAULT_VALUES_FILE,
) -> dict[str, ValueDescription]:
    """Extract value descriptions from a chart's values file.

    Raises ChartFileError if the file cannot be read; no partial result.
    """
    values_path = chart_directory / values_file
    log.debug(f"parse_values_file_comments(values_path={values_path})")

    contents = read_chart_file(values_path)
    descriptions = extract_value_descriptions(io.StringIO(contents))

    log.debug(f"Found {len(descriptions)} documented keys in {values_path}")
    return descriptions
