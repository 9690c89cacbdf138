"""Strings stored as UTF-16LE in NTFS structures."""

from __future__ import annotations

import struct
from typing import Protocol


class _Upcaser(Protocol):
    def to_uppercase(self, code_unit: int) -> int: ...


def _code_units(data: bytes) -> tuple[int, ...]:
    count = len(data) // 2
    return struct.unpack(f"<{count}H", data[: count * 2])


def _cmp(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    return (a > b) - (a < b)


class NtfsString:
    """A UTF-16LE string taken from an NTFS structure.

    Comparisons with other NtfsString objects and with str are case-sensitive
    and work on UTF-16 code units.
    """

    __slots__ = ("data",)

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)

    def _units(self) -> tuple[int, ...]:
        return _code_units(self.data)

    @staticmethod
    def _units_of(other: object) -> tuple[int, ...] | None:
        if isinstance(other, NtfsString):
            return other._units()
        if isinstance(other, str):
            return _code_units(other.encode("utf-16-le", "surrogatepass"))
        return None

    def __len__(self) -> int:
        """Length in bytes, not characters."""
        return len(self.data)

    def to_string_checked(self) -> str | None:
        """Decode the string, or return None if it is not valid UTF-16."""
        even = len(self.data) & ~1
        try:
            return self.data[:even].decode("utf-16-le")
        except UnicodeDecodeError:
            return None

    def to_string_lossy(self) -> str:
        """Decode the string, replacing invalid data with U+FFFD."""
        even = len(self.data) & ~1
        return self.data[:even].decode("utf-16-le", "replace")

    def upcase_cmp(self, upcase_table: _Upcaser, other: NtfsString | str) -> int:
        """Compare case-insensitively via an upcase table; return -1, 0 or 1."""
        other_units = self._units_of(other)
        if other_units is None:
            raise TypeError(f"cannot compare NtfsString with {type(other).__name__}")
        upper = upcase_table.to_uppercase
        mine = tuple(upper(unit) for unit in self._units())
        theirs = tuple(upper(unit) for unit in other_units)
        return _cmp(mine, theirs)

    def __str__(self) -> str:
        return self.to_string_lossy()

    def __repr__(self) -> str:
        return f"NtfsString({self.to_string_lossy()!r})"

    def __hash__(self) -> int:
        even = len(self.data) & ~1
        return hash(self.data[:even].decode("utf-16-le", "surrogatepass"))

    def __eq__(self, other: object) -> bool:
        units = self._units_of(other)
        if units is None:
            return NotImplemented
        return self._units() == units

    def __lt__(self, other: object) -> bool:
        units = self._units_of(other)
        if units is None:
            return NotImplemented
        return self._units() < units

    def __le__(self, other: object) -> bool:
        units = self._units_of(other)
        if units is None:
            return NotImplemented
        return self._units() <= units

    def __gt__(self, other: object) -> bool:
        units = self._units_of(other)
        if units is None:
            return NotImplemented
        return self._units() > units

    def __ge__(self, other: object) -> bool:
        units = self._units_of(other)
        if units is None:
            return NotImplemented
        return self._units() >= units