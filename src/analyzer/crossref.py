"""Cross-reference ereport device paths with the hardware inventory.

Join strategy depends on the shape of the device path:

  /pci...disk...   — drive bays whose disk has the same device path
  /pci...          — PCI devices with the same device path
  anything else    — no lookup

Both lookups are linear scans and the first match wins. Later entries
with the same device path are only counted for the debug log.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.contracts.enums import DeviceCategory
from src.contracts.inventory import DriveBay, HardwareInventory, PciDevice

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DiskEnrichment:
    location: str
    manufacturer: str
    model: str
    serial_number: str
    firmware_revision: str

    def fields(self) -> list[tuple[str, str]]:
        return [
            ("Disk Location:", self.location),
            ("Disk Manufacturer:", self.manufacturer),
            ("Disk Model:", self.model),
            ("Disk Serial:", self.serial_number),
            ("Firmware Rev:", self.firmware_revision),
        ]


@dataclass(slots=True, frozen=True)
class PciEnrichment:
    vendor_name: str
    device_name: str
    subsystem_name: str

    def fields(self) -> list[tuple[str, str]]:
        return [
            ("Vendor Name:", self.vendor_name),
            ("Device Name:", self.device_name),
            ("Subsystem Name:", self.subsystem_name),
        ]


Enrichment = DiskEnrichment | PciEnrichment


def device_category(device_path: str) -> DeviceCategory:
    if not device_path.startswith("/pci"):
        return DeviceCategory.OTHER
    if "disk" in device_path:
        return DeviceCategory.DISK
    return DeviceCategory.PCI


def _find_drive_bay(device_path: str, bays: tuple[DriveBay, ...]) -> DriveBay | None:
    matches = [b for b in bays if b.disk is not None and b.disk.device_path == device_path]
    if len(matches) > 1:
        log.debug("%d drive bays share device path %s; using '%s'",
                  len(matches), device_path, matches[0].label)
    return matches[0] if matches else None


def _find_pci_device(device_path: str, devices: tuple[PciDevice, ...]) -> PciDevice | None:
    matches = [d for d in devices if d.device_path == device_path]
    if len(matches) > 1:
        log.debug("%d PCI devices share device path %s; using '%s'",
                  len(matches), device_path, matches[0].label)
    return matches[0] if matches else None


def enrich(device_path: str, inventory: HardwareInventory | None) -> Enrichment | None:
    """Return inventory details for *device_path*, or None.

    A missing inventory and an inventory without a matching entry give
    the same result.
    """
    category = device_category(device_path)
    if category is DeviceCategory.OTHER or inventory is None:
        return None

    if category is DeviceCategory.DISK:
        bay = _find_drive_bay(device_path, inventory.drive_bays)
        if bay is None or bay.disk is None:
            log.debug("No drive bay for %s", device_path)
            return None
        disk = bay.disk
        return DiskEnrichment(
            location=bay.label,
            manufacturer=disk.manufacturer,
            model=disk.model,
            serial_number=disk.serial_number,
            firmware_revision=disk.firmware_revision,
        )

    pci = _find_pci_device(device_path, inventory.pci_devices)
    if pci is None:
        log.debug("No PCI device for %s", device_path)
        return None
    return PciEnrichment(
        vendor_name=pci.vendor_name,
        device_name=pci.device_name,
        subsystem_name=pci.subsystem_name,
    )
