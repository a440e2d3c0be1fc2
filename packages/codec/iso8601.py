from __future__ import annotations

from packages.codec.decoder import decode_or_raise
from packages.codec.encoder import encode
from packages.common.config import EncoderConfig
from packages.common.types import Timestamp


def parse_iso8601_to_ms(s: str) -> int:
    """
    Accepts strict ISO8601 strings like:
      - 2017-08-17T00:00:00.000Z
      - 2017-08-17T02:00:00.000+02:00
    Returns epoch ms. Raises ParseError (a ValueError) on bad input.
    """
    return decode_or_raise(s).ts_ms


def ms_to_iso8601_z(ts_ms: int, config: EncoderConfig | None = None) -> str:
    """
    Epoch ms -> ISO8601 Zulu string, e.g. 1700000000000 -> "2023-11-14T22:13:20.000Z"
    """
    return encode(Timestamp(ts_ms), config)
