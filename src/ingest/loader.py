"""File readers for the two run inputs.

Both readers let ``OSError`` (missing file, permission denied) propagate;
the CLI treats it as a fatal I/O error. Content that is not UTF-8 is a
parse error of the file it came from.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

from src.contracts.errors import InventoryParseError, LogParseError
from src.contracts.inventory import HardwareInventory

log = logging.getLogger(__name__)


def iter_log_lines(path: str | Path) -> Iterator[str]:
    """Yield decoded lines of the event log, closing the file when exhausted.

    Raises:
        LogParseError: if a line is not valid UTF-8 (with its line number).
    """
    p = Path(path)
    log.info("Reading event log %s", p)
    with p.open("rb") as fh:
        for line_no, raw in enumerate(fh, 1):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise LogParseError(
                    f"not valid UTF-8 (byte 0x{raw[exc.start]:02x} at column {exc.start + 1})",
                    line_no,
                ) from exc


def load_inventory(path: str | Path | None) -> HardwareInventory:
    """Load the hardware-inventory JSON document.

    Returns an empty inventory when *path* is None.

    Raises:
        OSError: if the file cannot be read.
        InventoryParseError: if the content is not UTF-8 or not a JSON object.
    """
    if path is None:
        log.debug("No hardware inventory supplied")
        return HardwareInventory()

    p = Path(path)
    with p.open("r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except UnicodeDecodeError as exc:
            raise InventoryParseError(f"{p}: not valid UTF-8: {exc.reason}") from exc
        except json.JSONDecodeError as exc:
            raise InventoryParseError(f"{p}: invalid JSON: {exc.msg} (line {exc.lineno})") from exc

    inventory = HardwareInventory.from_dict(data)
    log.info(
        "Loaded hardware inventory %s (%d PCI devices, %d drive bays)",
        p.name,
        len(inventory.pci_devices),
        len(inventory.drive_bays),
    )
    return inventory
