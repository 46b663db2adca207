"""Output routing: a reporter forwards formatted messages to the reports that accept them."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import IO, Optional

from farsa.enums import ReportLevel, ReportType


class Report(ABC):
    """A named output destination that accepts messages of a given type and level."""

    def __init__(self, name: str, report_type: ReportType, level: ReportLevel) -> None:
        self.name = name
        self.report_type = report_type
        self.level = level

    def set_type_and_level(self, report_type: ReportType, level: ReportLevel) -> None:
        """Change which messages this report accepts."""
        self.report_type = report_type
        self.level = level

    def is_accepted(self, report_type: ReportType, level: ReportLevel) -> bool:
        """Solver reports take every level up to their own; others take only their level."""
        if report_type != self.report_type:
            return False
        if self.report_type == ReportType.SOLVER:
            return level <= self.level
        return level == self.level

    @abstractmethod
    def write(self, report_type: ReportType, level: ReportLevel, text: str) -> None:
        """Write already formatted text."""

    @abstractmethod
    def flush_buffer(self) -> None:
        """Flush any buffered output."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying destination."""


class FileReport(Report):
    """Report writing to a file, or to standard output or standard error."""

    def __init__(self, name: str, report_type: ReportType, level: ReportLevel) -> None:
        super().__init__(name, report_type, level)
        self._file: Optional[IO[str]] = None
        self._owns_file = False

    def open(self, name: str) -> None:
        """Open ``name`` for writing; "stdout" and "stderr" select those streams.

        Raises OSError if the file cannot be opened.
        """
        self.close()
        if name == "stdout":
            self._file = sys.stdout
        elif name == "stderr":
            self._file = sys.stderr
        else:
            self._file = open(name, "w+", encoding="utf-8")
            self._owns_file = True

    def write(self, report_type: ReportType, level: ReportLevel, text: str) -> None:
        if self._file is not None:
            self._file.write(text)

    def flush_buffer(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None and self._owns_file:
            self._file.close()
        self._file = None
        self._owns_file = False


class StreamReport(Report):
    """Report writing to any text stream."""

    def __init__(self, name: str, report_type: ReportType, level: ReportLevel) -> None:
        super().__init__(name, report_type, level)
        self._stream: Optional[IO[str]] = None

    def set_stream(self, stream: Optional[IO[str]]) -> None:
        """Direct output to ``stream``; None silences the report."""
        self._stream = stream

    def write(self, report_type: ReportType, level: ReportLevel, text: str) -> None:
        if self._stream is not None:
            self._stream.write(text)

    def flush_buffer(self) -> None:
        if self._stream is not None:
            self._stream.flush()

    def close(self) -> None:
        """The stream belongs to the caller, so nothing is closed."""


class Reporter:
    """Collection of reports; messages go to every report that accepts them."""

    def __init__(self) -> None:
        self._reports: list[Report] = []

    def __enter__(self) -> Reporter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.delete_reports()

    def printf(self, report_type: ReportType, level: ReportLevel, fmt: str, *args: object) -> None:
        """Format with printf-style ``%`` directives and send to accepting reports."""
        accepting = [r for r in self._reports if r.is_accepted(report_type, level)]
        if not accepting:
            return
        text = fmt % args
        for report in accepting:
            report.write(report_type, level, text)

    def add_report(self, report: Report) -> None:
        """Add a report."""
        self._reports.append(report)

    def add_file_report(
        self,
        report_name: str,
        file_name: str,
        report_type: ReportType,
        level: ReportLevel,
    ) -> FileReport:
        """Open a file report on ``file_name``, add it and return it.

        Raises OSError if the file cannot be opened.
        """
        report = FileReport(report_name, report_type, level)
        report.open(file_name)
        self.add_report(report)
        return report

    def report(self, name: str) -> Optional[Report]:
        """Return the first report with the given name, or None."""
        return next((r for r in self._reports if r.name == name), None)

    def flush_buffer(self) -> None:
        """Flush every report."""
        for report in self._reports:
            report.flush_buffer()

    def delete_reports(self) -> None:
        """Close and remove every report."""
        for report in self._reports:
            report.close()
        self._reports.clear()