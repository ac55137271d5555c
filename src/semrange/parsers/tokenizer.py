"""Character stream with arbitrary lookahead used by the version parsers.

Both parsers pull characters one at a time from a :class:`LookaheadReader`.
Characters that were peeked at but not consumed yet are kept in a buffer, so
any number of positions can be inspected ahead of the current one without
re-reading the input.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

END_OF_INPUT = "\0"


@dataclass(slots=True, frozen=True)
class Char:
    """A single character of the input and its zero-based column.

    Only the reader creates the end-of-input sentinel, so a literal NUL in the
    input is an ordinary character.
    """

    value: str
    pos: int
    end_of_input: bool = False

    def __str__(self) -> str:
        return "<EOI>" if self.is_end_of_input() else self.value

    def is_(self, *tests: str) -> bool:
        """Return True if this character is one of ``tests``.

        The end-of-input sentinel never matches.
        """
        if self.is_end_of_input():
            return False
        return self.value in tests

    def is_digit(self) -> bool:
        return "0" <= self.value <= "9"

    def is_letter(self) -> bool:
        return "a" <= self.value <= "z" or "A" <= self.value <= "Z"

    def is_alphanumeric(self) -> bool:
        """Letters, digits and hyphens, the identifier alphabet."""
        return self.is_letter() or self.is_digit() or self.value == "-"

    def is_end_of_input(self) -> bool:
        return self.end_of_input

    @property
    def string_value(self) -> str:
        return "" if self.is_end_of_input() else self.value


class Lookahead(ABC, Generic[T]):
    """Stream of items supporting peeks at any offset ahead of the current one."""

    def __init__(self) -> None:
        self._buffer: deque[T] = deque()
        self._end_reached = False
        self._end_of_input_indicator: T | None = None

    def current(self) -> T:
        return self.peek(0)

    def next(self) -> T:
        return self.peek(1)

    def peek(self, offset: int) -> T:
        """Return the item ``offset`` positions ahead without consuming anything."""
        if offset < 0:
            raise ValueError("offset < 0")

        while len(self._buffer) <= offset and not self._end_reached:
            item = self._fetch()
            if item is None:
                self._end_reached = True
            else:
                self._buffer.append(item)

        if offset < len(self._buffer):
            return self._buffer[offset]

        if self._end_of_input_indicator is None:
            self._end_of_input_indicator = self._end_of_input()
        return self._end_of_input_indicator

    def consume(self) -> T:
        """Remove and return the current item."""
        result = self.current()
        self.consume_many(1)
        return result

    def consume_many(self, count: int) -> None:
        """Drop ``count`` items; consuming past the end is a no-op."""
        if count < 0:
            raise ValueError("count < 0")

        for _ in range(count):
            if self._buffer:
                self._buffer.popleft()
            elif self._end_reached:
                return
            elif self._fetch() is None:
                self._end_reached = True

    @abstractmethod
    def _end_of_input(self) -> T:
        """Create the end-of-input item. Called at most once."""

    @abstractmethod
    def _fetch(self) -> T | None:
        """Return the next item of the source, or None once it is exhausted."""


class LookaheadReader(Lookahead[Char]):
    """Lookahead over the characters of an in-memory string."""

    def __init__(self, text: str) -> None:
        super().__init__()
        self._chars: Iterator[str] = iter(text)
        self._pos = 0

    def _end_of_input(self) -> Char:
        return Char(END_OF_INPUT, self._pos, end_of_input=True)

    def _fetch(self) -> Char | None:
        value = next(self._chars, None)
        if value is None:
            return None
        char = Char(value, self._pos)
        self._pos += 1
        return char

    def __repr__(self) -> str:
        if not self._buffer:
            return f"{self._pos}: Buffer empty"
        if len(self._buffer) < 2:
            return f"{self._pos}: {self.current()}"
        return f"{self._pos}: {self.current()}, {self.next()}"
