"""Parse compact duration strings such as ``"1h33m7s"``.

The grammar is ``([+-]?\\d+(ns|us|ms|s|m|h))*`` with no separators. Each
component is converted into the target resolution (truncating toward zero)
and the components are summed, so ``"1h-1h"`` is zero and ``"1h1h"`` is two
hours. The empty string is a valid zero duration.

Example:
    >>> to_duration("1h33m7s")
    5587
    >>> to_duration("1s", "milliseconds")
    1000
"""

import logging
from collections.abc import Iterable
from typing import Any

from chronoparse.duration import Duration
from chronoparse.resolution import (
    UNITS,
    Resolution,
    ResolutionName,
    Unit,
    coerce_resolution,
    seconds,
)

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")

Text = str | bytes | bytearray | memoryview | Iterable[str]


class MalformedDurationError(ValueError):
    """Raised when a duration string does not match the grammar."""

    def __init__(self, text: str, position: int, reason: str):
        self.text: str = text
        self.position: int = position
        self.reason: str = reason
        super().__init__(
            f"Malformed duration string {text!r}: {reason} at position {position}\n"
            f"  {text}\n"
            f"  {' ' * position}^\n"
            f"Hint: Use [+-]<digits><unit> with unit one of "
            f"{', '.join(UNITS)}, e.g. '1h33m7s'"
        )


class _Scanner:
    """Forward cursor over the input with a one-character pushback."""

    def __init__(self, text: str):
        self.text: str = text
        self.pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the current character, or "" past the end."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def take(self) -> str:
        char = self.peek()
        self.pos += 1
        return char

    def unread(self) -> None:
        self.pos -= 1

    def error(
        self, reason: str, position: int | None = None
    ) -> MalformedDurationError:
        if position is None:
            position = self.pos
        return MalformedDurationError(self.text, min(position, len(self.text)), reason)

    def sign(self) -> bool:
        """Consume an optional sign; True when it was a minus."""
        if self.peek() in _SIGNS:
            return self.take() == "-"
        return False

    def magnitude(self) -> int:
        start = self.pos
        value = 0
        while (char := self.peek()) in _DIGITS:
            value = value * 10 + ord(char) - ord("0")
            self.pos += 1
        if self.pos == start:
            reason = "unexpected end of input" if self.at_end() else "expected digit"
            raise self.error(reason)
        return value

    def unit(self) -> Unit:
        start = self.pos
        char = self.take()
        if char in ("n", "u"):
            if self.take() != "s":
                raise self.error(f"expected 's' after {char!r}", self.pos - 1)
            return "ns" if char == "n" else "us"
        if char == "m":
            # "ms" is milliseconds; a bare "m" is minutes and whatever
            # follows it starts the next component.
            if self.take() == "s":
                return "ms"
            self.unread()
            return "m"
        if char == "s":
            return "s"
        if char == "h":
            return "h"
        if char == "":
            raise self.error("expected unit", start)
        raise self.error(f"unknown unit {char!r}", start)


def _coerce_text(value: Any) -> str:
    """Convert the supported input representations to a str.

    Accepts:
    - str: Passed through as-is
    - bytes, bytearray, memoryview: One character per byte (latin-1)
    - Iterable of one-character str: Joined in order

    Raises:
        TypeError: If value is none of the above
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("latin-1")
    if isinstance(value, Iterable):
        chars = list(value)  # pyright: ignore[reportUnknownArgumentType]
        bad = [c for c in chars if not (isinstance(c, str) and len(c) == 1)]
        if not bad:
            return "".join(chars)
        raise TypeError(
            f"Duration character sequences must hold one-character strings.\n"
            f"Got element {bad[0]!r}\n"
            f"Hint: Pass the string itself: to_duration('1h30m')"
        )
    raise TypeError(
        f"Duration text must be str, bytes, or an iterable of characters.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  to_duration('1h30m')\n"
        f"  to_duration(b'1h30m')\n"
        f"  to_duration(iter('1h30m'))"
    )


def _scan(text: str, target: Resolution) -> int:
    scanner = _Scanner(text)
    total = 0
    try:
        while not scanner.at_end():
            negative = scanner.sign()
            count = scanner.magnitude()
            unit = scanner.unit()
            total += target.cast(-count if negative else count, UNITS[unit])
    except MalformedDurationError as exc:
        logger.debug(
            "Rejected duration %r at position %d: %s", text, exc.position, exc.reason
        )
        raise
    return total


def to_duration(
    text: Text,
    resolution: Resolution | ResolutionName | Unit = seconds,
) -> int:
    """Parse ``text`` into a count of ``resolution`` ticks.

    Args:
        text: Duration string, bytes, or iterable of characters
        resolution: Target tick granularity; a Resolution, a builtin name
            ("milliseconds") or a unit suffix ("ms"). Defaults to seconds.

    Returns:
        The sum of all components, each converted to ``resolution`` with
        truncation toward zero. Magnitudes are unbounded.

    Raises:
        MalformedDurationError: If the text does not match the grammar
        TypeError: If text or resolution has an unsupported type
    """
    return _scan(_coerce_text(text), coerce_resolution(resolution))


def parse(
    text: Text,
    resolution: Resolution | ResolutionName | Unit = seconds,
) -> Duration:
    """Parse ``text`` into a Duration bound to ``resolution``."""
    target = coerce_resolution(resolution)
    return Duration(count=_scan(_coerce_text(text), target), resolution=target)
