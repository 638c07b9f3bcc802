"""Tests for src.analyzer.accumulator — per-device aggregate."""

from __future__ import annotations

from src.analyzer.accumulator import DeviceAccumulator
from tests.conftest import make_ereport


def _assert_consistent(acc: DeviceAccumulator) -> None:
    assert sum(acc.class_counts.values()) == sum(acc.day_counts.values()) == len(acc.history)
    assert len(acc.day_order) == len(set(acc.day_order))
    assert set(acc.day_order) == set(acc.day_counts)


class TestSeeded:
    def test_single_ereport(self):
        er = make_ereport(event_class="ereport.io.pci.fabric")
        acc = DeviceAccumulator.seeded(er, "2019-01-01")
        assert acc.class_counts == {"ereport.io.pci.fabric": 1}
        assert acc.day_counts == {"2019-01-01": 1}
        assert acc.history == [er]
        assert acc.day_order == ["2019-01-01"]
        assert acc.total == 1
        _assert_consistent(acc)


class TestRecord:
    def test_same_class_same_day_increments(self):
        er = make_ereport()
        acc = DeviceAccumulator.seeded(er, "2019-01-01")
        acc.record(er, "2019-01-01")
        assert acc.class_counts == {er.event_class: 2}
        assert acc.day_counts == {"2019-01-01": 2}
        assert acc.day_order == ["2019-01-01"]
        assert acc.total == 2
        _assert_consistent(acc)

    def test_new_day_appended_in_first_seen_order(self):
        er = make_ereport()
        acc = DeviceAccumulator.seeded(er, "2019-01-03")
        acc.record(er, "2019-01-01")
        acc.record(er, "2019-01-03")
        acc.record(er, "2019-01-02")
        assert acc.day_order == ["2019-01-03", "2019-01-01", "2019-01-02"]
        assert acc.day_distribution() == [
            ("2019-01-03", 2),
            ("2019-01-01", 1),
            ("2019-01-02", 1),
        ]
        _assert_consistent(acc)

    def test_history_keeps_insertion_order(self):
        first = make_ereport(event_class="ereport.io.a")
        second = make_ereport(event_class="ereport.io.b")
        third = make_ereport(event_class="ereport.io.a")
        acc = DeviceAccumulator.seeded(first, "2019-01-01")
        acc.record(second, "2019-01-01")
        acc.record(third, "2019-01-02")
        assert acc.history == [first, second, third]
        assert acc.class_counts == {"ereport.io.a": 2, "ereport.io.b": 1}
        _assert_consistent(acc)
