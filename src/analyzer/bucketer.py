"""Day bucketing — epoch seconds → UTC calendar day ``YYYY-MM-DD``."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from src.contracts.errors import TimestampRangeError

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def day_bucket(epoch_seconds: int) -> str:
    """Return the UTC day an event time falls into.

    Negative values (before 1970) are valid. Raises TimestampRangeError
    when the result falls outside the years 1..9999.
    """
    try:
        dt = _EPOCH + timedelta(seconds=epoch_seconds)
    except OverflowError as exc:
        raise TimestampRangeError(
            f"event time {epoch_seconds} is outside the representable date range"
        ) from exc
    # date.isoformat() always pads the year to four digits
    return dt.date().isoformat()
