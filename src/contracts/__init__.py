"""Ereport contract — data structures shared by all modules."""

from src.contracts.enums import Admission, DeviceCategory
from src.contracts.errors import (
    ConfigError,
    FmReportError,
    InventoryParseError,
    LogParseError,
    TimestampRangeError,
)
from src.contracts.event import Detector, Ereport, FmEvent
from src.contracts.inventory import Disk, DriveBay, HardwareInventory, PciDevice

__all__ = [
    "Admission",
    "ConfigError",
    "Detector",
    "DeviceCategory",
    "Disk",
    "DriveBay",
    "Ereport",
    "FmEvent",
    "FmReportError",
    "HardwareInventory",
    "InventoryParseError",
    "LogParseError",
    "PciDevice",
    "TimestampRangeError",
]
