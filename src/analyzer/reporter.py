"""Text report: one bordered section per device path."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.analyzer.accumulator import DeviceAccumulator, DeviceMap
from src.analyzer.crossref import enrich
from src.contracts.errors import ConfigError
from src.contracts.inventory import HardwareInventory

log = logging.getLogger(__name__)


def _width(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool):
        raise ConfigError(f"report.{key}: expected a positive integer, got {value!r}")
    try:
        width = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"report.{key}: expected a positive integer, got {value!r}") from exc
    if width <= 0:
        raise ConfigError(f"report.{key}: expected a positive integer, got {value!r}")
    return width


@dataclass(slots=True, frozen=True)
class ReportLayout:
    label_width: int = 40
    rule_width: int = 75

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> ReportLayout:
        section = cfg.get("report") or {}
        if not isinstance(section, dict):
            raise ConfigError("report: expected a mapping")
        return cls(
            label_width=_width(section, "label_width", 40),
            rule_width=_width(section, "rule_width", 75),
        )


def _row(label: object, value: object, layout: ReportLayout) -> str:
    return f"{label!s:<{layout.label_width}} {value}"


def _device_section(
    device_path: str,
    acc: DeviceAccumulator,
    inventory: HardwareInventory | None,
    layout: ReportLayout,
) -> list[str]:
    lines = ["=" * layout.rule_width, _row("Device Path:", device_path, layout)]

    enrichment = enrich(device_path, inventory)
    if enrichment is not None:
        lines.extend(_row(label, value, layout) for label, value in enrichment.fields())

    lines.append(_row("Total ereports:", acc.total, layout))
    lines.append("")
    lines.append(_row("class", "# occurences", layout))
    lines.append(_row("-----", "------------", layout))
    lines.extend(_row(cls, count, layout) for cls, count in acc.class_counts.items())

    lines.append("")
    lines.append("Event Occurrence Distribution")
    lines.append("-----------------------------")
    # day_order, not day_counts: days stay in first-seen order
    lines.extend(_row(day, count, layout) for day, count in acc.day_distribution())
    lines.append("")
    return lines


def render_report(
    device_map: DeviceMap,
    inventory: HardwareInventory | None = None,
    layout: ReportLayout | None = None,
) -> list[str]:
    """Render the report as a list of lines (no trailing newlines).

    Accumulators are only read, never changed.
    """
    lay = layout or ReportLayout()
    lines: list[str] = [""]
    for device_path, acc in device_map.items():
        lines.extend(_device_section(device_path, acc, inventory, lay))
    return lines


def format_report(
    device_map: DeviceMap,
    inventory: HardwareInventory | None = None,
    layout: ReportLayout | None = None,
) -> str:
    return "\n".join(render_report(device_map, inventory, layout)) + "\n"


def write_report(text: str, path: str) -> None:
    """Write the rendered report to *path* in one step.

    The text goes to a temporary file beside the target, which then
    replaces it, so readers never see a half-written report.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=target.parent,
        prefix=f".{target.name}.",
        suffix=".tmp",
        delete=False,
    ) as fh:
        tmp = Path(fh.name)
        try:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        except BaseException:
            fh.close()
            tmp.unlink(missing_ok=True)
            raise
    try:
        tmp.replace(target)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    log.info("Wrote report (%d bytes) to %s", len(text.encode("utf-8")), target)
