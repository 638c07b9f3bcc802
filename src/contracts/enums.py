"""Canonical enumerations for the ereport contract."""

from __future__ import annotations

from enum import Enum


class Admission(str, Enum):
    """Outcome of the admission filter for one log event."""

    AGGREGATE = "aggregate"
    NOT_EREPORT = "not_ereport"
    EXCLUDED_CLASS = "excluded_class"
    NO_DEVICE_PATH = "no_device_path"


class DeviceCategory(str, Enum):
    """Device-path shape used to pick the inventory join strategy."""

    DISK = "disk"
    PCI = "pci"
    OTHER = "other"
