from __future__ import annotations

from typing import Dict

from packages.common.calendar_math import MONTHS
from packages.common.config import EncoderConfig
from packages.common.datetime_utils import utc_fields
from packages.common.types import Timestamp

# "January" -> "01" .. "December" -> "12"
MONTH_CODES: Dict[str, str] = {m.name: f"{m.number:02d}" for m in MONTHS}
_MONTH_NAMES: Dict[int, str] = {m.number: m.name for m in MONTHS}

_DEFAULT_CONFIG = EncoderConfig()


def encode(timestamp: Timestamp, config: EncoderConfig | None = None) -> str:
    """
    Timestamp -> "YYYY-MM-DDTHH:mm:ss.sssZ". Always UTC, never fails.

    With EncoderConfig.legacy() the millisecond field is written as ":ms"
    padded to 2 digits instead.
    """
    cfg = config or _DEFAULT_CONFIG
    f = utc_fields(timestamp.ts_ms)

    month = MONTH_CODES[_MONTH_NAMES[f.month]]
    millis = str(f.millisecond).zfill(cfg.millis_digits)

    return (
        f"{f.year:04d}-{month}-{f.day:02d}"
        f"T{f.hour:02d}:{f.minute:02d}:{f.second:02d}"
        f"{cfg.millis_separator}{millis}Z"
    )
