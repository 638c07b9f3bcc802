"""Per-device aggregate of admitted ereports."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.contracts.event import Ereport


@dataclass
class DeviceAccumulator:
    """Counts by class and by day plus the ordered ereport history.

    ``day_order`` keeps the distinct day keys in first-seen order; the
    report walks it instead of ``day_counts``.
    """

    class_counts: dict[str, int] = field(default_factory=dict)
    day_counts: dict[str, int] = field(default_factory=dict)
    history: list[Ereport] = field(default_factory=list)
    day_order: list[str] = field(default_factory=list)

    @classmethod
    def seeded(cls, ereport: Ereport, day: str) -> DeviceAccumulator:
        """Accumulator for a device seen for the first time."""
        return cls(
            class_counts={ereport.event_class: 1},
            day_counts={day: 1},
            history=[ereport],
            day_order=[day],
        )

    def record(self, ereport: Ereport, day: str) -> None:
        self.class_counts[ereport.event_class] = self.class_counts.get(ereport.event_class, 0) + 1
        if day in self.day_counts:
            self.day_counts[day] += 1
        else:
            self.day_counts[day] = 1
            self.day_order.append(day)
        self.history.append(ereport)

    @property
    def total(self) -> int:
        return len(self.history)

    def day_distribution(self) -> list[tuple[str, int]]:
        """(day, count) pairs in first-seen order."""
        return [(day, self.day_counts[day]) for day in self.day_order]


DeviceMap = dict[str, DeviceAccumulator]
