"""The $UpCase table used for case-insensitive comparisons."""

from __future__ import annotations

import struct

from .errors import InvalidUpcaseTableSizeError

#: Number of characters of the Basic Multilingual Plane covered by the table.
UPCASE_CHARACTER_COUNT = 65536

#: Size of the raw table in bytes (128 KiB).
UPCASE_TABLE_SIZE = UPCASE_CHARACTER_COUNT * 2


class UpcaseTable:
    """Maps each UCS-2 code unit to its uppercase variant."""

    __slots__ = ("_characters",)

    def __init__(self, characters: tuple[int, ...]) -> None:
        if len(characters) != UPCASE_CHARACTER_COUNT:
            raise InvalidUpcaseTableSizeError(
                expected=UPCASE_TABLE_SIZE, actual=len(characters) * 2
            )
        self._characters = characters

    @classmethod
    def from_bytes(cls, data: bytes) -> UpcaseTable:
        """Build a table from the raw contents of the $UpCase file."""
        if len(data) != UPCASE_TABLE_SIZE:
            raise InvalidUpcaseTableSizeError(expected=UPCASE_TABLE_SIZE, actual=len(data))
        return cls(struct.unpack(f"<{UPCASE_CHARACTER_COUNT}H", data))

    def to_uppercase(self, code_unit: int) -> int:
        """Return the uppercase variant of a UCS-2 code unit."""
        if not 0 <= code_unit < UPCASE_CHARACTER_COUNT:
            raise ValueError(f"code unit {code_unit} is outside of the UCS-2 range")
        return self._characters[code_unit]