"""Hardware-inventory snapshot — PCI devices and drive bays.

Only the members needed to cross-reference ereport device paths are
kept. Absent sequences and absent string members default to empty so a
partial snapshot still loads; nothing else is validated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.contracts.errors import InventoryParseError


def _text(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    return "" if value is None else str(value)


def _objects(obj: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = obj.get(key) or []
    if not isinstance(items, list):
        raise InventoryParseError(f"'{key}' is not a list")
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise InventoryParseError(f"'{key}'[{idx}] is not an object")
    return items


@dataclass(slots=True, frozen=True)
class PciDevice:
    label: str
    fmri: str
    vendor_name: str
    device_name: str
    subsystem_name: str
    device_path: str

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> PciDevice:
        return cls(
            label=_text(obj, "label"),
            fmri=_text(obj, "hc-fmri"),
            vendor_name=_text(obj, "pci-vendor-name"),
            device_name=_text(obj, "pci-device-name"),
            subsystem_name=_text(obj, "pci-subsystem-name"),
            device_path=_text(obj, "device-path"),
        )


@dataclass(slots=True, frozen=True)
class Disk:
    fmri: str
    manufacturer: str
    model: str
    serial_number: str
    firmware_revision: str
    device_path: str

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> Disk:
        return cls(
            fmri=_text(obj, "hc-fmri"),
            manufacturer=_text(obj, "manufacturer"),
            model=_text(obj, "model"),
            serial_number=_text(obj, "serial-number"),
            firmware_revision=_text(obj, "firmware-revision"),
            device_path=_text(obj, "device-path"),
        )


@dataclass(slots=True, frozen=True)
class DriveBay:
    label: str
    fmri: str
    disk: Disk | None = None  # empty bay

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> DriveBay:
        disk_obj = obj.get("disk")
        if disk_obj is not None and not isinstance(disk_obj, dict):
            raise InventoryParseError("drive bay 'disk' is not an object")
        return cls(
            label=_text(obj, "label"),
            fmri=_text(obj, "hc-fmri"),
            disk=Disk.from_dict(disk_obj) if disk_obj is not None else None,
        )


@dataclass(slots=True, frozen=True)
class HardwareInventory:
    """Read-only snapshot shared by the report renderer."""

    pci_devices: tuple[PciDevice, ...] = field(default_factory=tuple)
    drive_bays: tuple[DriveBay, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.pci_devices and not self.drive_bays

    @classmethod
    def from_dict(cls, obj: Any) -> HardwareInventory:
        if not isinstance(obj, dict):
            raise InventoryParseError(
                f"inventory is not a JSON object ({type(obj).__name__})"
            )
        return cls(
            pci_devices=tuple(PciDevice.from_dict(o) for o in _objects(obj, "pci-devices")),
            drive_bays=tuple(DriveBay.from_dict(o) for o in _objects(obj, "drive-bays")),
        )
