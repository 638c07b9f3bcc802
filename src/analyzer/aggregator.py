"""Aggregation engine — admission filter + per-device folding.

Each log line goes through a two-pass parse:
  1. a cheap ``FmEvent`` view (class name only) decides admission,
  2. only admitted classes are parsed into a full ``Ereport``.

Classes under ``ereport.fm.`` and ``ereport.fs.`` carry no detector
payload, so they are rejected before step 2 ever sees them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from src.analyzer.accumulator import DeviceAccumulator, DeviceMap
from src.analyzer.bucketer import day_bucket
from src.contracts.enums import Admission
from src.contracts.errors import ConfigError, LogParseError, TimestampRangeError
from src.contracts.event import Ereport, FmEvent

log = logging.getLogger(__name__)

DEFAULT_PREFIX = "ereport."
DEFAULT_EXCLUDE_PREFIXES: tuple[str, ...] = ("ereport.fm.", "ereport.fs.")


@dataclass(slots=True, frozen=True)
class AdmissionPolicy:
    """Class-name prefixes that decide which events are aggregated."""

    prefix: str = DEFAULT_PREFIX
    exclude_prefixes: tuple[str, ...] = DEFAULT_EXCLUDE_PREFIXES

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> AdmissionPolicy:
        """Build from the ``admission`` section of the YAML config.

        Raises:
            ConfigError: if ``prefix`` is not a string or
                ``exclude_prefixes`` is not a list of strings.
        """
        section = cfg.get("admission") or {}
        if not isinstance(section, dict):
            raise ConfigError("admission: expected a mapping")

        prefix = section.get("prefix", DEFAULT_PREFIX)
        if not isinstance(prefix, str):
            raise ConfigError(f"admission.prefix: expected a string, got {type(prefix).__name__}")

        excludes = section.get("exclude_prefixes", list(DEFAULT_EXCLUDE_PREFIXES))
        # a bare string would otherwise be split into one-character prefixes
        if not isinstance(excludes, list) or not all(isinstance(p, str) for p in excludes):
            raise ConfigError("admission.exclude_prefixes: expected a list of strings")

        return cls(prefix=prefix, exclude_prefixes=tuple(excludes))


@dataclass
class AggregationStats:
    """Counters for one pass over the event log."""

    lines_read: int = 0
    admitted: int = 0
    skipped: dict[str, int] = field(default_factory=dict)

    def skip(self, reason: Admission) -> None:
        self.skipped[reason.value] = self.skipped.get(reason.value, 0) + 1

    @property
    def skipped_total(self) -> int:
        return sum(self.skipped.values())


def classify(event: FmEvent, policy: AdmissionPolicy | None = None) -> Admission:
    """Decide from the class name alone whether to parse the full ereport."""
    pol = policy or AdmissionPolicy()
    if not event.event_class.startswith(pol.prefix):
        return Admission.NOT_EREPORT
    if event.event_class.startswith(pol.exclude_prefixes):
        return Admission.EXCLUDED_CLASS
    return Admission.AGGREGATE


def admit(device_map: DeviceMap, ereport: Ereport) -> None:
    """Fold one ereport into the accumulator for its device path.

    The caller guarantees ``ereport.device_path`` is set. A timestamp
    outside the representable range propagates as TimestampRangeError.
    """
    device_path = ereport.device_path
    if device_path is None:
        raise ValueError(f"ereport {ereport.event_class} has no device path")

    day = day_bucket(ereport.epoch_seconds)

    entry = device_map.get(device_path)
    if entry is None:
        device_map[device_path] = DeviceAccumulator.seeded(ereport, day)
    else:
        entry.record(ereport, day)


def aggregate_lines(
    lines: Iterable[str],
    policy: AdmissionPolicy | None = None,
) -> tuple[DeviceMap, AggregationStats]:
    """Consume the whole event log and return the populated device map.

    Raises:
        LogParseError: on invalid JSON or a malformed admitted ereport.
        TimestampRangeError: on an event time that is not a valid date.
    """
    pol = policy or AdmissionPolicy()
    device_map: DeviceMap = {}
    stats = AggregationStats()

    for line_no, raw_line in enumerate(lines, 1):
        stats.lines_read += 1
        line = raw_line.strip()
        if not line:
            raise LogParseError("blank line is not a JSON object", line_no)

        try:
            obj = json.loads(line)
        except json.JSONDecodeError as exc:
            raise LogParseError(f"invalid JSON: {exc.msg}", line_no) from exc

        try:
            event = FmEvent.from_dict(obj)
            verdict = classify(event, pol)
            if verdict is not Admission.AGGREGATE:
                stats.skip(verdict)
                continue
            ereport = Ereport.from_dict(obj)
        except LogParseError as exc:
            raise LogParseError(str(exc), line_no) from exc

        if ereport.device_path is None:
            log.warning("No device path - skipping (%s)", ereport.event_class)
            stats.skip(Admission.NO_DEVICE_PATH)
            continue

        try:
            admit(device_map, ereport)
        except TimestampRangeError as exc:
            raise TimestampRangeError(f"line {line_no}: {exc}") from exc
        stats.admitted += 1

    log.info(
        "Aggregated %d ereports across %d devices (%d lines, %d skipped)",
        stats.admitted,
        len(device_map),
        stats.lines_read,
        stats.skipped_total,
    )
    if stats.skipped:
        log.debug("Skipped by reason: %s", stats.skipped)
    return device_map, stats
