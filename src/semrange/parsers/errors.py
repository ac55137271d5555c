"""Parse failures and the non-raising result wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")


class ParseError(ValueError):
    """Raised when a version or version range string is malformed.

    ``position`` is the zero-based column of the offending character in
    ``source``. Errors raised while parsing a version embedded in a range keep
    the inner error as ``cause`` and are rebased onto the range string.
    """

    def __init__(
        self,
        message: str,
        source: str,
        position: int,
        cause: ParseError | None = None,
    ) -> None:
        self.message = message
        self.source = source
        self.position = position
        self.cause = cause
        super().__init__(f"{message} (at column {position} of {source!r})")

    @classmethod
    def rebased(cls, inner: ParseError, source: str, offset: int) -> ParseError:
        """Wrap ``inner`` so that it points into ``source`` at ``offset`` + its column."""
        return cls(inner.message, source, inner.position + offset, cause=inner)

    def render(self) -> str:
        """Return the message, the input and a caret under the offending column."""
        return f"{self.message}\n{self.source}\n{' ' * self.position}^"


@dataclass(slots=True, frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the error that prevented parsing it."""

    value: T | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error if parsing failed."""
        if self.error is not None:
            raise self.error
        return cast(T, self.value)
