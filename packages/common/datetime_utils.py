from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class UtcFields:
    year: int
    month: int  # 1..12
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


def utc_fields(ts_ms: int) -> UtcFields:
    """
    Epoch ms -> proleptic Gregorian UTC calendar fields.

    Integer timedelta arithmetic, valid for pre-epoch values as well.
    """
    dt = _EPOCH + timedelta(milliseconds=ts_ms)
    return UtcFields(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
        millisecond=dt.microsecond // 1000,
    )


def now_ms() -> int:
    return int(datetime.now(tz=timezone.utc).timestamp() * 1000)
