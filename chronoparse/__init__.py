from .duration import Duration
from .parser import MalformedDurationError, parse, to_duration
from .resolution import (
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

__all__ = [
    "to_duration",
    "parse",
    "Duration",
    "Resolution",
    "MalformedDurationError",
    "coerce_resolution",
    "common",
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "RESOLUTIONS",
    "UNITS",
]
