from __future__ import annotations


class ParseError(ValueError):
    """
    Decode failure. The base class doubles as the generic syntax error;
    subclasses mark field-level rejections.

    position is the index in the input where the failing token starts
    (None when raised outside a decode, e.g. calling the calendar directly).
    """

    code: str = "syntax"

    def __init__(self, message: str, *, position: int | None = None, expected: str | None = None):
        self.message = message
        self.position = position
        self.expected = expected
        super().__init__(self._render())

    def _render(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"

    def at(self, position: int) -> "ParseError":
        """Attach a cursor position if none is set yet. Returns self."""
        if self.position is None:
            self.position = position
            self.args = (self._render(),)
        return self


class InvalidDayError(ParseError):
    code = "invalid_day"

    def __init__(self, day: int, *, year: int | None = None, month: int | None = None, position: int | None = None):
        self.day = day
        self.year = year
        self.month = month
        if year is not None and month is not None:
            msg = f"Invalid day: {day} (month {month:02d} of {year:04d})"
        else:
            msg = f"Invalid day: {day}"
        super().__init__(msg, position=position)


class InvalidMonthError(ParseError):
    code = "invalid_month"

    def __init__(self, month: int, *, position: int | None = None):
        self.month = month
        super().__init__(f"Invalid month: {month} (expected 1..12)", position=position)


class InvalidTimeError(ParseError):
    code = "invalid_time"

    def __init__(self, field: str, value: int, limit: int, *, position: int | None = None):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value} (expected 0..{limit})", position=position)


class TimestampRangeError(ParseError):
    code = "out_of_range"

    def __init__(self, ts_ms: int, *, position: int | None = None):
        self.ts_ms = ts_ms
        super().__init__(f"Timestamp out of representable range: {ts_ms}", position=position)
