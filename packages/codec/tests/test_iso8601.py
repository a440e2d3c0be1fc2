# packages/codec/tests/test_iso8601.py

from __future__ import annotations

import pytest

from packages.codec.iso8601 import ms_to_iso8601_z, parse_iso8601_to_ms
from packages.common.config import EncoderConfig
from packages.common.errors import InvalidDayError, ParseError


def test_parse_iso8601_to_ms():
    assert parse_iso8601_to_ms("2017-08-17T00:00:00.000Z") == 1_502_928_000_000
    assert parse_iso8601_to_ms("2017-08-17T02:00:00.000+02:00") == 1_502_928_000_000


def test_parse_iso8601_to_ms_raises_value_error():
    with pytest.raises(InvalidDayError):
        parse_iso8601_to_ms("2015-02-29T00:00:00.000Z")

    # lenient forms are not accepted
    for s in ("2017-08-17T00:00:00Z", "2017-08-17T00:00:00", "2017-08-17"):
        with pytest.raises(ParseError):
            parse_iso8601_to_ms(s)
        with pytest.raises(ValueError):
            parse_iso8601_to_ms(s)


def test_ms_to_iso8601_z():
    assert ms_to_iso8601_z(1_700_000_000_000) == "2023-11-14T22:13:20.000Z"
    assert ms_to_iso8601_z(1_700_000_000_042, EncoderConfig.legacy()) == "2023-11-14T22:13:20:42Z"


def test_ms_to_iso8601_z_rejects_unrepresentable_values():
    with pytest.raises(ValueError):
        ms_to_iso8601_z(10**15)
