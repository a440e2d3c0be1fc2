from __future__ import annotations

from dataclasses import dataclass

from packages.common.errors import ParseError

_DIGITS = "0123456789"


@dataclass
class Cursor:
    """
    Left-to-right reader over the input text.

    Every read either consumes its token and advances pos, or raises
    ParseError positioned at the offending character. Nothing is ever
    pushed back.
    """

    text: str
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str | None:
        if self.at_end():
            return None
        return self.text[self.pos]

    def fail(self, expected: str, *, position: int | None = None) -> ParseError:
        pos = self.pos if position is None else position
        found = "end of input" if pos >= len(self.text) else repr(self.text[pos])
        return ParseError(f"Expected {expected}, found {found}", position=pos, expected=expected)

    def expect(self, literal: str) -> None:
        if self.peek() != literal:
            raise self.fail(repr(literal))
        self.pos += 1

    def read_fixed_digits(self, width: int, label: str) -> int:
        start = self.pos
        for _ in range(width):
            ch = self.peek()
            if ch is None or ch not in _DIGITS:
                raise self.fail(f"{width}-digit {label}")
            self.pos += 1
        return int(self.text[start:self.pos])

    def read_unsigned(self, label: str, max_digits: int = 4) -> int:
        start = self.pos
        while not self.at_end() and self.text[self.pos] in _DIGITS:
            if self.pos - start == max_digits:
                raise self.fail(f"at most {max_digits}-digit {label}")
            self.pos += 1
        if self.pos == start:
            raise self.fail(label)
        return int(self.text[start:self.pos])

    def expect_end(self) -> None:
        if not self.at_end():
            raise self.fail("end of input")
