from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from loguru import logger

from packages.codec.cursor import Cursor
from packages.common.calendar_math import validate_and_convert_date
from packages.common.constants import MAX_TS_MS, MIN_TS_MS, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from packages.common.errors import (
    InvalidDayError,
    InvalidMonthError,
    InvalidTimeError,
    ParseError,
    TimestampRangeError,
)
from packages.common.types import DateTriple, Timestamp

_LOG_INPUT_CHARS = 64


class DecodeState(str, Enum):
    YEAR = "YEAR"
    MONTH = "MONTH"
    DAY = "DAY"
    HOUR = "HOUR"
    MINUTE = "MINUTE"
    SECOND = "SECOND"
    MILLIS = "MILLIS"
    OFFSET = "OFFSET"
    DONE = "DONE"


@dataclass(frozen=True)
class DecodeResult:
    """Either a Timestamp or the first ParseError hit while scanning."""

    value: Timestamp | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Timestamp:
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("DecodeResult holds neither a value nor an error")
        return self.value


class Iso8601Decoder:
    """
    Strict single-pass decoder for

        YYYY-MM-DDTHH:mm:ss.sss(Z|(+|-)H+:M+)

    Each state consumes its field plus the delimiter that follows it and
    returns the next state. The date is validated as soon as DAY is read,
    so a bad calendar date fails before any time-of-day token is looked at.
    """

    def __init__(self, text: str):
        self._cur = Cursor(text)
        self._state = DecodeState.YEAR

        self._year = 0
        self._month = 0
        self._day = 0
        self._month_pos = 0
        self._day_pos = 0
        self._date: DateTriple | None = None
        self._date_ms = 0

        self._hour = 0
        self._minute = 0
        self._second = 0
        self._millis = 0
        self._offset_minutes = 0

        self._steps: Dict[DecodeState, Callable[[], DecodeState]] = {
            DecodeState.YEAR: self._read_year,
            DecodeState.MONTH: self._read_month,
            DecodeState.DAY: self._read_day,
            DecodeState.HOUR: self._read_hour,
            DecodeState.MINUTE: self._read_minute,
            DecodeState.SECOND: self._read_second,
            DecodeState.MILLIS: self._read_millis,
            DecodeState.OFFSET: self._read_offset,
        }

    @property
    def state(self) -> DecodeState:
        return self._state

    @property
    def date(self) -> DateTriple | None:
        """The date triple once DAY has been read (validated or not)."""
        return self._date

    @property
    def position(self) -> int:
        return self._cur.pos

    def run(self) -> Timestamp:
        while self._state is not DecodeState.DONE:
            self._state = self._steps[self._state]()
        return self._finish()

    # ---- date

    def _read_year(self) -> DecodeState:
        self._year = self._cur.read_fixed_digits(4, "year")
        self._cur.expect("-")
        return DecodeState.MONTH

    def _read_month(self) -> DecodeState:
        self._month_pos = self._cur.pos
        self._month = self._cur.read_fixed_digits(2, "month")
        self._cur.expect("-")
        return DecodeState.DAY

    def _read_day(self) -> DecodeState:
        self._day_pos = self._cur.pos
        self._day = self._cur.read_fixed_digits(2, "day")

        self._date = DateTriple(self._year, self._month, self._day)
        try:
            self._date_ms = validate_and_convert_date(self._date.year, self._date.month, self._date.day)
        except InvalidMonthError as exc:
            raise exc.at(self._month_pos)
        except InvalidDayError as exc:
            raise exc.at(self._day_pos)

        self._cur.expect("T")
        return DecodeState.HOUR

    # ---- time of day

    def _read_bounded(self, width: int, field: str, limit: int) -> int:
        start = self._cur.pos
        value = self._cur.read_fixed_digits(width, field)
        if value > limit:
            raise InvalidTimeError(field, value, limit, position=start)
        return value

    def _read_hour(self) -> DecodeState:
        self._hour = self._read_bounded(2, "hour", 23)
        self._cur.expect(":")
        return DecodeState.MINUTE

    def _read_minute(self) -> DecodeState:
        self._minute = self._read_bounded(2, "minute", 59)
        self._cur.expect(":")
        return DecodeState.SECOND

    def _read_second(self) -> DecodeState:
        self._second = self._read_bounded(2, "second", 59)
        self._cur.expect(".")
        return DecodeState.MILLIS

    def _read_millis(self) -> DecodeState:
        self._millis = self._cur.read_fixed_digits(3, "millisecond")
        return DecodeState.OFFSET

    # ---- offset

    def _read_offset(self) -> DecodeState:
        ch = self._cur.peek()
        if ch == "Z":
            self._cur.pos += 1
            self._offset_minutes = 0
        elif ch in ("+", "-"):
            self._cur.pos += 1
            sign = -1 if ch == "-" else 1

            start = self._cur.pos
            hours = self._cur.read_unsigned("offset hours")
            if hours > 23:
                raise InvalidTimeError("offset hours", hours, 23, position=start)

            self._cur.expect(":")

            start = self._cur.pos
            minutes = self._cur.read_unsigned("offset minutes")
            if minutes > 59:
                raise InvalidTimeError("offset minutes", minutes, 59, position=start)

            self._offset_minutes = sign * (hours * 60 + minutes)
        else:
            raise self._cur.fail("'Z' or UTC offset ('+HH:MM' / '-HH:MM')")

        self._cur.expect_end()
        return DecodeState.DONE

    def _finish(self) -> Timestamp:
        # Local time -> UTC: undo the stated offset.
        ts_ms = (
            self._date_ms
            + self._hour * MS_PER_HOUR
            + (self._minute - self._offset_minutes) * MS_PER_MINUTE
            + self._second * MS_PER_SECOND
            + self._millis
        )
        if not MIN_TS_MS <= ts_ms <= MAX_TS_MS:
            raise TimestampRangeError(ts_ms, position=0)
        return Timestamp(ts_ms)


def decode(text: str) -> DecodeResult:
    """
    ISO-8601 text -> Timestamp. Never raises for bad input; the failure is
    returned in DecodeResult.error.
    """
    if not isinstance(text, str):
        err = ParseError(f"Expected str input, got {type(text).__name__}", position=0, expected="str")
        logger.debug("decode rejected code={} position={} input_type={}", err.code, 0, type(text).__name__)
        return DecodeResult(error=err)

    try:
        ts = Iso8601Decoder(text).run()
    except ParseError as exc:
        logger.debug("decode rejected code={} position={} input={!r}", exc.code, exc.position, text[:_LOG_INPUT_CHARS])
        return DecodeResult(error=exc)

    return DecodeResult(value=ts)


def decode_or_raise(text: str) -> Timestamp:
    return decode(text).unwrap()
