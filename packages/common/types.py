from __future__ import annotations

from dataclasses import dataclass

from packages.common.constants import MAX_TS_MS, MIN_TS_MS
from packages.common.datetime_utils import now_ms


@dataclass(frozen=True, order=True)
class Timestamp:
    """
    Milliseconds since 1970-01-01T00:00:00.000Z (negative = pre-epoch).

    Identity is the numeric value only; the offset a timestamp was parsed
    with is not kept.
    """

    ts_ms: int

    def __post_init__(self) -> None:
        if isinstance(self.ts_ms, bool) or not isinstance(self.ts_ms, int):
            raise TypeError(f"Timestamp requires an int ms value (got {type(self.ts_ms).__name__})")
        if not MIN_TS_MS <= self.ts_ms <= MAX_TS_MS:
            raise ValueError(
                f"Timestamp out of range: {self.ts_ms} (expected {MIN_TS_MS}..{MAX_TS_MS})"
            )

    def __int__(self) -> int:
        return self.ts_ms

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(now_ms())


@dataclass(frozen=True)
class DateTriple:
    year: int
    month: int  # 1..12
    day: int  # 1..31

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
