from __future__ import annotations

# Unix epoch. All timestamps are signed ms offsets from 1970-01-01T00:00:00.000Z.
EPOCH_YEAR: int = 1970

MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60_000
MS_PER_HOUR: int = 3_600_000
MS_PER_DAY: int = 86_400_000
MS_PER_YEAR: int = 31_536_000_000  # 365-day year

# Bounds inside which leap years are counted in closed form.
FAST_LEAP_MIN_YEAR: int = 1800
FAST_LEAP_MAX_YEAR: int = 9999

# Representable span: 0001-01-01T00:00:00.000Z .. 9999-12-31T23:59:59.999Z
MIN_TS_MS: int = -62_135_596_800_000
MAX_TS_MS: int = 253_402_300_799_999
