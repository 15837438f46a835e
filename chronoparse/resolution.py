"""Tick granularities and truncating conversion between them.

A resolution is a fixed tick length expressed as an exact fraction of a
second. Converting a count from one resolution to another discards any
fractional remainder toward zero, the way an integer duration cast does.
"""

from dataclasses import dataclass
from fractions import Fraction
from math import gcd
from typing import Any, Literal, TypeAlias

from chronoparse.util import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
)

ResolutionName: TypeAlias = Literal[
    "nanoseconds", "microseconds", "milliseconds", "seconds", "minutes", "hours"
]
Unit: TypeAlias = Literal["ns", "us", "ms", "s", "m", "h"]


@dataclass(frozen=True)
class Resolution:
    name: str
    period: Fraction

    def __post_init__(self) -> None:
        period: Any = self.period
        if isinstance(period, bool) or not isinstance(period, (int, Fraction)):
            raise TypeError(
                f"Resolution period must be an int or Fraction of a second.\n"
                f"Got {type(period).__name__!r}: {period!r}\n"
                f"Hint: Fraction(1, 10) is a tick of a tenth of a second"
            )
        if period <= 0:
            raise ValueError(
                f"Resolution {self.name!r} must have a positive period, got {period!r}"
            )
        object.__setattr__(self, "period", Fraction(period))

    def __str__(self) -> str:
        return self.name

    def cast(self, count: int, source: "Resolution") -> int:
        """Convert ``count`` ticks of ``source`` into ticks of this resolution.

        The result is truncated toward zero, so ``-1500`` milliseconds cast
        to seconds is ``-1``, not ``-2``.
        """
        if source.period == self.period:
            return count
        return int(count * source.period / self.period)


nanoseconds = Resolution("nanoseconds", Fraction(NANOSECOND, SECOND))
microseconds = Resolution("microseconds", Fraction(MICROSECOND, SECOND))
milliseconds = Resolution("milliseconds", Fraction(MILLISECOND, SECOND))
seconds = Resolution("seconds", Fraction(1))
minutes = Resolution("minutes", Fraction(MINUTE, SECOND))
hours = Resolution("hours", Fraction(HOUR, SECOND))

RESOLUTIONS: dict[str, Resolution] = {
    "nanoseconds": nanoseconds,
    "microseconds": microseconds,
    "milliseconds": milliseconds,
    "seconds": seconds,
    "minutes": minutes,
    "hours": hours,
}

# Suffixes accepted by the duration grammar
UNITS: dict[str, Resolution] = {
    "ns": nanoseconds,
    "us": microseconds,
    "ms": milliseconds,
    "s": seconds,
    "m": minutes,
    "h": hours,
}


def common(a: Resolution, b: Resolution) -> Resolution:
    """Return the coarsest resolution that counts both ``a`` and ``b`` exactly.

    This is the finer of the two when its period divides the other's,
    otherwise a new resolution whose period is the rational gcd of both.
    """
    finer, coarser = sorted((a, b), key=lambda r: r.period)
    if (coarser.period / finer.period).denominator == 1:
        return finer
    period = Fraction(
        gcd(
            a.period.numerator * b.period.denominator,
            b.period.numerator * a.period.denominator,
        ),
        a.period.denominator * b.period.denominator,
    )
    return Resolution(f"{period} seconds", period)


def coerce_resolution(value: Any) -> Resolution:
    """Coerce a Resolution, builtin name or unit suffix into a Resolution.

    Accepts:
    - Resolution: Passed through as-is
    - str: A builtin name ("milliseconds") or grammar suffix ("ms")

    Raises:
        TypeError: If value is not a Resolution or str
        ValueError: If value is a str naming no builtin resolution
    """
    if isinstance(value, Resolution):
        return value
    if isinstance(value, str):
        found = RESOLUTIONS.get(value) or UNITS.get(value)
        if found is None:
            raise ValueError(
                f"Unknown resolution {value!r}.\n"
                f"Hint: Use one of {', '.join(RESOLUTIONS)}\n"
                f"      or a unit suffix: {', '.join(UNITS)}"
            )
        return found
    raise TypeError(
        f"Resolution must be a Resolution or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  to_duration('1h', milliseconds)  # builtin Resolution\n"
        f"  to_duration('1h', 'milliseconds')  # by name\n"
        f"  to_duration('1h', Resolution('deciseconds', Fraction(1, 10)))"
    )
