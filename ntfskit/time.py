"""NTFS timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from fractions import Fraction

from .errors import InvalidTimeError

_U64_MAX = 2**64 - 1

#: Number of 100-nanosecond intervals in a second.
INTERVALS_PER_SECOND = 10_000_000

#: Difference in 100-nanosecond intervals between 1601-01-01 and 1970-01-01.
EPOCH_DIFFERENCE_IN_INTERVALS = 116_444_736_000_000_000

_NTFS_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class NtfsTime:
    """Number of 100-nanosecond intervals since January 1, 1601 (UTC)."""

    nt_timestamp: int

    def __post_init__(self) -> None:
        if not 0 <= self.nt_timestamp <= _U64_MAX:
            raise InvalidTimeError()

    @classmethod
    def from_datetime(cls, dt: datetime) -> NtfsTime:
        """Convert a datetime (naive values are taken as UTC)."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - _NTFS_EPOCH
        intervals = (
            delta.days * 86_400 * INTERVALS_PER_SECOND
            + delta.seconds * INTERVALS_PER_SECOND
            + delta.microseconds * 10
        )
        if not 0 <= intervals <= _U64_MAX:
            raise InvalidTimeError()
        return cls(intervals)

    @classmethod
    def from_unix_time(cls, seconds: int | float) -> NtfsTime:
        """Convert seconds since the Unix epoch, as returned by time.time()."""
        if seconds < 0:
            raise InvalidTimeError()
        intervals = int(Fraction(seconds) * INTERVALS_PER_SECOND)
        total = intervals + EPOCH_DIFFERENCE_IN_INTERVALS
        if total > _U64_MAX:
            raise InvalidTimeError()
        return cls(total)

    def to_datetime(self) -> datetime:
        """Return this timestamp as an aware UTC datetime (microsecond precision)."""
        try:
            return _NTFS_EPOCH + timedelta(microseconds=self.nt_timestamp // 10)
        except OverflowError as exc:
            raise InvalidTimeError() from exc

    def __int__(self) -> int:
        return self.nt_timestamp