"""Error types shared by the ingest and analyzer packages."""

from __future__ import annotations


class FmReportError(Exception):
    """Base class for every fatal input error of a report run."""


class LogParseError(FmReportError):
    """A line of the event log could not be turned into an event."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class InventoryParseError(FmReportError):
    """The hardware-inventory document is not a usable JSON object."""


class TimestampRangeError(FmReportError):
    """An event time cannot be represented as a calendar date."""


class ConfigError(FmReportError):
    """The YAML settings file is unreadable as a mapping."""
