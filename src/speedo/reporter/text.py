"""Text reporter for Speedo measurements.

Renders a fixed-width table with a banner, a column header and two rows
per measurement: where it started, then where it ended and what was
measured.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from ..models import MultiMeasurement
from .layout import LINE_WIDTH, Align, crop_path, insert_separators, pad, rule

logger = logging.getLogger(__name__)


class Reporter:
    """Collects measurements and prints their statistics.

    Measurements are reported in the order they were added.

    Example:
        ```python
        reporter = Reporter()
        reporter.add(measurement)
        reporter.print()
        ```
    """

    TITLE = " PROFILING WITH SPEEDO "

    FILE_COL_WIDTH = 30
    LINE_COL_WIDTH = 6
    COUNT_COL_WIDTH = 10
    AVERAGE_COL_WIDTH = 15
    OVERALL_COL_WIDTH = 15

    SEPARATOR = "|"

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._measurements: list[MultiMeasurement] = []

    def __len__(self) -> int:
        return len(self._measurements)

    @property
    def measurements(self) -> tuple[MultiMeasurement, ...]:
        """Measurements added so far, in report order."""
        return tuple(self._measurements)

    def add(self, measurement: MultiMeasurement) -> None:
        """Add a measurement to be printed by print()."""
        self._measurements.append(measurement)

    def format(self) -> str:
        """Render the full report.

        Returns:
            The report text, every row terminated by a newline.
        """
        lines = self._banner() + self._header()

        last = len(self._measurements) - 1
        for i, measurement in enumerate(self._measurements):
            lines.extend(self._rows(measurement))
            lines.append(rule("-" if i < last else "#"))

        return "".join(f"{line}\n" for line in lines)

    def print(self) -> None:
        """Write the report to the output stream (stderr by default)."""
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(self.format())
        stream.flush()
        logger.debug(f"Printed report with {len(self._measurements)} measurement(s)")

    def _banner(self) -> list[str]:
        return [
            rule("#"),
            pad(self.TITLE, LINE_WIDTH, Align.CENTER, "#"),
            rule("#"),
        ]

    def _header(self) -> list[str]:
        return [
            self._row("File", "Line ", "Count ", "Average [µs] ", "Overall [µs]"),
            rule("="),
        ]

    def _rows(self, measurement: MultiMeasurement) -> list[str]:
        start_file = crop_path(measurement.start.file)

        # Name the end file only if it differs from the start file.
        end_file = crop_path(measurement.end.file)
        if end_file == start_file:
            end_file = ""

        return [
            self._row(start_file, str(measurement.start.line), "", "", ""),
            self._row(
                end_file,
                str(measurement.end.line),
                str(measurement.count),
                insert_separators(measurement.average_duration),
                insert_separators(measurement.overall_duration),
            ),
        ]

    def _row(self, file: str, line: str, count: str, average: str, overall: str) -> str:
        return self.SEPARATOR.join(
            [
                pad(file, self.FILE_COL_WIDTH, Align.LEFT),
                pad(line, self.LINE_COL_WIDTH, Align.RIGHT),
                pad(count, self.COUNT_COL_WIDTH, Align.RIGHT),
                pad(average, self.AVERAGE_COL_WIDTH, Align.RIGHT),
                pad(overall, self.OVERALL_COL_WIDTH, Align.RIGHT),
            ]
        )


def print_report(
    measurements: Iterable[MultiMeasurement],
    stream: TextIO | None = None,
) -> None:
    """Convenience function to print a report for the given measurements.

    Args:
        measurements: Measurements in report order.
        stream: Output stream (defaults to stderr).

    Example:
        ```python
        from speedo import print_report

        print_report(measurements)
        ```
    """
    reporter = Reporter(stream)
    for measurement in measurements:
        reporter.add(measurement)
    reporter.print()
