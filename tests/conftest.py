"""Shared fixtures for the FMA ereport report tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from src.contracts.event import Detector, Ereport
from src.contracts.inventory import Disk, DriveBay, HardwareInventory, PciDevice

# 2019-01-01T00:00:00Z
DAY1 = 1546300800
DAY2 = DAY1 + 86400
DAY3 = DAY2 + 86400

DISK_PATH = "/pci@0,0/pci8086,2030@0/pci15d9,808@0/disk@1"
NIC_PATH = "/pci@0,0/pci8086,6f08@3/pci15d9,1528@0"


# ── Builders ─────────────────────────────────────────────────────────────


def make_ereport(
    *,
    event_class: str = "ereport.io.scsi.cmd.disk.dev.rqs.derr",
    device_path: str | None = DISK_PATH,
    tod: tuple[int, ...] = (DAY1, 0),
    scheme: str = "dev",
) -> Ereport:
    return Ereport(
        event_class=event_class,
        detector=Detector(scheme=scheme, device_path=device_path),
        time_of_day=tod,
    )


def ereport_dict(
    *,
    event_class: str = "ereport.io.scsi.cmd.disk.dev.rqs.derr",
    device_path: str | None = DISK_PATH,
    tod: list[Any] | None = None,
    scheme: str = "dev",
) -> dict[str, Any]:
    """Decoded JSON object as the diagnosis subsystem emits it."""
    detector: dict[str, Any] = {"version": 0, "scheme": scheme}
    if device_path is not None:
        detector["device-path"] = device_path
    return {
        "class": event_class,
        "ena": "0x5e1c3d1b2f100001",
        "detector": detector,
        "__tod": [DAY1, 123456789] if tod is None else tod,
    }


def ereport_line(**kwargs: Any) -> str:
    return json.dumps(ereport_dict(**kwargs)) + "\n"


def event_line(event_class: str, **payload: Any) -> str:
    return json.dumps({"class": event_class, **payload}) + "\n"


def inventory_dict() -> dict[str, Any]:
    return {
        "pci-devices": [
            {
                "label": "NET0",
                "hc-fmri": "hc:///chassis=0/motherboard=0/hostbridge=1/pciexrc=1/pciexbus=2",
                "pci-vendor-name": "Intel Corporation",
                "pci-device-name": "I350 Gigabit Network Connection",
                "pci-subsystem-name": "I350-T2",
                "device-path": NIC_PATH,
            }
        ],
        "drive-bays": [
            {"label": "Front Disk 0", "hc-fmri": "hc:///chassis=0/bay=0"},
            {
                "label": "Front Disk 1",
                "hc-fmri": "hc:///chassis=0/bay=1",
                "disk": {
                    "hc-fmri": "hc:///chassis=0/bay=1/disk=0",
                    "manufacturer": "Acme",
                    "model": "AC4000",
                    "serial-number": "SN0001",
                    "firmware-revision": "A042",
                    "device-path": DISK_PATH,
                },
            },
        ],
    }


# ── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
def inventory() -> HardwareInventory:
    return HardwareInventory.from_dict(inventory_dict())


@pytest.fixture
def acme_inventory() -> HardwareInventory:
    """Single drive bay holding an Acme disk at /pci@0/disk@1."""
    return HardwareInventory(
        drive_bays=(
            DriveBay(
                label="Bay 1",
                fmri="hc:///bay=1",
                disk=Disk(
                    fmri="hc:///bay=1/disk=0",
                    manufacturer="Acme",
                    model="M1",
                    serial_number="S1",
                    firmware_revision="F1",
                    device_path="/pci@0/disk@1",
                ),
            ),
        ),
        pci_devices=(
            PciDevice(
                label="SLOT2",
                fmri="hc:///slot=2",
                vendor_name="Broadcom",
                device_name="BCM57416",
                subsystem_name="NetXtreme-E",
                device_path="/pci@0/pci@2",
            ),
        ),
    )


@pytest.fixture
def fmlog(tmp_path):
    """Write lines to an event-log file and return its path."""

    def _write(lines: list[str], name: str = "fmlog.jsonl") -> str:
        path = tmp_path / name
        path.write_text("".join(lines), encoding="utf-8")
        return str(path)

    return _write
