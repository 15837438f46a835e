from fractions import Fraction

import pytest

from chronoparse.resolution import (
    RESOLUTIONS,
    UNITS,
    Resolution,
    coerce_resolution,
    common,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
)


def test_builtin_periods():
    """Test the fixed ratios between builtin resolutions."""
    assert hours.period == 60 * minutes.period
    assert minutes.period == 60 * seconds.period
    assert seconds.period == 1000 * milliseconds.period
    assert milliseconds.period == 1000 * microseconds.period
    assert microseconds.period == 1000 * nanoseconds.period
    assert hours.period / nanoseconds.period == 3_600_000_000_000


def test_cast_to_finer_resolution_is_exact():
    assert nanoseconds.cast(1, hours) == 3_600_000_000_000
    assert milliseconds.cast(-3, seconds) == -3000


def test_cast_to_coarser_resolution_truncates_toward_zero():
    """Test that casting discards remainders toward zero for both signs."""
    assert seconds.cast(1999, milliseconds) == 1
    assert seconds.cast(-1999, milliseconds) == -1
    assert hours.cast(119, minutes) == 1
    assert hours.cast(-119, minutes) == -1
    assert minutes.cast(59, seconds) == 0


def test_cast_to_same_resolution_is_identity():
    assert seconds.cast(42, seconds) == 42


def test_custom_resolution_accepts_int_and_fraction():
    """Test user-defined tick granularities."""
    quarter_hours = Resolution("quarter-hours", 900)
    assert quarter_hours.period == Fraction(900)
    assert quarter_hours.cast(1, hours) == 4

    thirds = Resolution("thirds", Fraction(1, 3))
    assert thirds.cast(1, seconds) == 3
    assert seconds.cast(4, thirds) == 1


def test_resolution_rejects_invalid_periods():
    with pytest.raises(ValueError, match="must have a positive period"):
        Resolution("never", 0)

    with pytest.raises(ValueError, match="must have a positive period"):
        Resolution("backwards", Fraction(-1, 2))

    with pytest.raises(TypeError, match="int or Fraction"):
        Resolution("approx", 0.5)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="int or Fraction"):
        Resolution("flag", True)  # type: ignore[arg-type]


def test_str_is_name():
    assert str(milliseconds) == "milliseconds"


def test_unit_table_covers_grammar_suffixes():
    assert list(UNITS) == ["ns", "us", "ms", "s", "m", "h"]
    assert UNITS["m"] is minutes
    assert UNITS["ms"] is milliseconds


def test_coerce_resolution():
    """Test coercion from names, suffixes, and instances."""
    assert coerce_resolution(seconds) is seconds
    assert coerce_resolution("minutes") is minutes
    assert coerce_resolution("us") is microseconds
    for name, resolution in RESOLUTIONS.items():
        assert coerce_resolution(name) is resolution

    custom = Resolution("deciseconds", Fraction(1, 10))
    assert coerce_resolution(custom) is custom


def test_coerce_resolution_errors():
    with pytest.raises(ValueError, match="Unknown resolution 'Seconds'"):
        coerce_resolution("Seconds")

    with pytest.raises(TypeError, match="Got 'NoneType'"):
        coerce_resolution(None)


def test_common_prefers_finer_builtin_when_it_divides():
    assert common(hours, milliseconds) is milliseconds
    assert common(nanoseconds, seconds) is nanoseconds
    assert common(minutes, minutes) is minutes


def test_common_of_non_dividing_periods():
    """Test the rational gcd when neither period divides the other."""
    thirds = Resolution("thirds", Fraction(1, 3))
    quarters = Resolution("quarters", Fraction(1, 4))

    assert common(thirds, milliseconds).period == Fraction(1, 3000)
    assert common(thirds, quarters).period == Fraction(1, 12)
    assert common(Resolution("two", 2), Resolution("three", 3)).period == 1
