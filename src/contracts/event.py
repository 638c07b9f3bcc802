"""Fault-management event data-classes — generic event and ereport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.contracts.errors import LogParseError

# Wire names used by the diagnosis subsystem's JSON output
CLASS_KEY = "class"
DETECTOR_KEY = "detector"
SCHEME_KEY = "scheme"
DEVICE_PATH_KEY = "device-path"
TOD_KEY = "__tod"


def _require_str(obj: dict[str, Any], key: str, where: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise LogParseError(f"{where}: missing or non-string '{key}'")
    return value


@dataclass(slots=True, frozen=True)
class FmEvent:
    """Cheap view of a log record: only its class name."""

    event_class: str

    @classmethod
    def from_dict(cls, obj: Any) -> FmEvent:
        if not isinstance(obj, dict):
            raise LogParseError(f"event is not a JSON object ({type(obj).__name__})")
        return cls(event_class=_require_str(obj, CLASS_KEY, "event"))


@dataclass(slots=True, frozen=True)
class Detector:
    """The component that detected the fault."""

    scheme: str
    device_path: str | None = None  # only hardware-capable detectors carry one

    @classmethod
    def from_dict(cls, obj: Any) -> Detector:
        if not isinstance(obj, dict):
            raise LogParseError("ereport: missing or non-object 'detector'")
        device_path = obj.get(DEVICE_PATH_KEY)
        if device_path is not None and not isinstance(device_path, str):
            raise LogParseError(f"detector: non-string '{DEVICE_PATH_KEY}'")
        return cls(
            scheme=_require_str(obj, SCHEME_KEY, "detector"),
            device_path=device_path,
        )


@dataclass(slots=True, frozen=True)
class Ereport:
    """One fully parsed ereport.

    ``time_of_day[0]`` is the event time in Unix epoch seconds and is
    the only element the aggregation uses.
    """

    event_class: str
    detector: Detector
    time_of_day: tuple[int, ...]

    @property
    def device_path(self) -> str | None:
        return self.detector.device_path

    @property
    def epoch_seconds(self) -> int:
        return self.time_of_day[0]

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> Ereport:
        """Build an Ereport from a decoded JSON object.

        Raises:
            LogParseError: if the detector or the time-of-day payload is
                missing or malformed. An empty ``__tod`` is an error.
        """
        event_class = _require_str(obj, CLASS_KEY, "ereport")
        detector = Detector.from_dict(obj.get(DETECTOR_KEY))

        tod = obj.get(TOD_KEY)
        if not isinstance(tod, list):
            raise LogParseError(f"ereport {event_class}: missing or non-list '{TOD_KEY}'")
        # checked for every admitted class, with or without a device path
        if not tod:
            raise LogParseError(f"ereport {event_class}: empty '{TOD_KEY}'")
        # bool is an int subclass; JSON true/false is not a timestamp
        if any(isinstance(v, bool) or not isinstance(v, int) for v in tod):
            raise LogParseError(f"ereport {event_class}: non-integer '{TOD_KEY}' element")

        return cls(event_class=event_class, detector=detector, time_of_day=tuple(tod))
