# packages/common/tests/test_datetime_utils.py

from __future__ import annotations

import time

import pytest

from packages.common.constants import MAX_TS_MS, MIN_TS_MS
from packages.common.datetime_utils import UtcFields, now_ms, utc_fields
from packages.common.types import DateTriple, Timestamp


def test_utc_fields_epoch():
    assert utc_fields(0) == UtcFields(1970, 1, 1, 0, 0, 0, 0)


def test_utc_fields_pre_epoch():
    assert utc_fields(-1) == UtcFields(1969, 12, 31, 23, 59, 59, 999)
    assert utc_fields(-2_208_988_800_000) == UtcFields(1900, 1, 1, 0, 0, 0, 0)


def test_utc_fields_leap_day_with_millis():
    assert utc_fields(1_456_704_000_123) == UtcFields(2016, 2, 29, 0, 0, 0, 123)


def test_utc_fields_range_edges():
    assert utc_fields(MIN_TS_MS) == UtcFields(1, 1, 1, 0, 0, 0, 0)
    assert utc_fields(MAX_TS_MS) == UtcFields(9999, 12, 31, 23, 59, 59, 999)


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    got = now_ms()
    after = int(time.time() * 1000)
    assert before - 5 <= got <= after + 5


def test_timestamp_is_a_value_type():
    assert Timestamp(5) == Timestamp(5)
    assert hash(Timestamp(5)) == hash(Timestamp(5))
    assert Timestamp(-1) < Timestamp(0) < Timestamp(1)
    assert int(Timestamp(42)) == 42
    assert isinstance(Timestamp.now(), Timestamp)


def test_timestamp_rejects_out_of_range_and_non_int():
    with pytest.raises(ValueError):
        Timestamp(MIN_TS_MS - 1)
    with pytest.raises(ValueError):
        Timestamp(MAX_TS_MS + 1)
    with pytest.raises(TypeError):
        Timestamp(1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Timestamp(True)  # type: ignore[arg-type]


def test_date_triple_str():
    assert str(DateTriple(2016, 2, 9)) == "2016-02-09"
