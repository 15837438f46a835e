"""Utility constants for chronoparse.

Time unit constants represent durations in nanoseconds, the finest unit
the duration grammar can express.
"""

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
