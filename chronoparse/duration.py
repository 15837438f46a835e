from dataclasses import dataclass
from datetime import timedelta

from typing_extensions import override

from chronoparse.resolution import Resolution, common, microseconds


@dataclass(frozen=True, kw_only=True)
class Duration:
    count: int
    resolution: Resolution

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(
                f"Duration count must be an int, "
                f"got {type(self.count).__name__!r}: {self.count!r}"
            )
        if not isinstance(self.resolution, Resolution):
            raise TypeError(
                f"Duration resolution must be a Resolution, "
                f"got {type(self.resolution).__name__!r}: {self.resolution!r}"
            )

    @override
    def __str__(self) -> str:
        """Human-friendly string showing count and resolution."""
        return f"Duration({self.count} {self.resolution})"

    def __int__(self) -> int:
        return self.count

    def __neg__(self) -> "Duration":
        return Duration(count=-self.count, resolution=self.resolution)

    def __add__(self, other: "Duration") -> "Duration":
        """Sum two durations exactly, in a resolution that counts both."""
        if not isinstance(other, Duration):
            return NotImplemented
        target = common(self.resolution, other.resolution)
        return Duration(
            count=self.cast(target).count + other.cast(target).count,
            resolution=target,
        )

    def __radd__(self, other: object) -> "Duration":
        # sum() starts from 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def cast(self, resolution: Resolution) -> "Duration":
        """Convert to another resolution, truncating toward zero."""
        return Duration(
            count=resolution.cast(self.count, self.resolution),
            resolution=resolution,
        )

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncated toward zero to whole microseconds."""
        return timedelta(microseconds=microseconds.cast(self.count, self.resolution))
