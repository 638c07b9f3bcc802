"""Pipeline — orchestrator: load inventory -> aggregate event log -> render.

The whole log is aggregated before rendering starts, so a fatal error
on any line leaves nothing rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.analyzer.aggregator import AdmissionPolicy, aggregate_lines
from src.analyzer.reporter import ReportLayout, format_report
from src.ingest.loader import iter_log_lines, load_inventory
from src.shared.config_loader import load_yaml

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RunConfig:
    """Inputs of one report run."""

    fmlog_path: str
    hwgrok_path: str | None = None
    config_path: str | None = None


def load_settings(config_path: str | None) -> dict[str, Any]:
    """Return the YAML settings, or an empty dict (built-in defaults)."""
    if config_path is None:
        return {}
    return load_yaml(config_path)


def run_report(config: RunConfig) -> dict[str, Any]:
    """Execute one full run and return its products.

    Returns
    -------
    dict with keys: devices (device map), stats (AggregationStats),
    inventory (HardwareInventory), report (rendered text).
    """
    settings = load_settings(config.config_path)
    policy = AdmissionPolicy.from_config(settings)
    layout = ReportLayout.from_config(settings)

    inventory = load_inventory(config.hwgrok_path)
    device_map, stats = aggregate_lines(iter_log_lines(config.fmlog_path), policy)

    if not device_map:
        log.warning("No ereports with a device path in %s", config.fmlog_path)

    report = format_report(device_map, inventory, layout)
    return {
        "devices": device_map,
        "stats": stats,
        "inventory": inventory,
        "report": report,
    }
