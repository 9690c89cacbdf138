"""Fixed-size NTFS records protected by an Update Sequence Array."""

from __future__ import annotations

import struct

from .errors import (
    UpdateSequenceArrayExceedsRecordSizeError,
    UpdateSequenceNumberMismatchError,
)

#: Size of the common record header (signature, USA offset, USA count, LSN).
RECORD_HEADER_SIZE = 16

_U16 = struct.Struct("<H")
_SIGNATURE_SLICE = slice(0, 4)
_UPDATE_SEQUENCE_OFFSET_POS = 4
_UPDATE_SEQUENCE_COUNT_POS = 6


class Record:
    """A record (e.g. an Index Record) read from the filesystem.

    The last two bytes of every sector of a record are replaced by the Update
    Sequence Number on disk; :meth:`fixup` restores the original bytes.
    """

    __slots__ = ("data", "position", "sector_size")

    def __init__(self, data: bytes, position: int, sector_size: int) -> None:
        self.data = bytearray(data)
        self.position = position
        self.sector_size = sector_size

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return (
            f"Record(signature={self.signature!r}, position={self.position:#x}, "
            f"size={len(self.data)})"
        )

    @property
    def signature(self) -> bytes:
        """The four signature bytes at the start of the record."""
        return bytes(self.data[_SIGNATURE_SLICE])

    @property
    def update_sequence_offset(self) -> int:
        """Offset of the Update Sequence Number within the record."""
        return _U16.unpack_from(self.data, _UPDATE_SEQUENCE_OFFSET_POS)[0]

    @property
    def update_sequence_count(self) -> int:
        """Number of 16-bit words of the update sequence, including the USN."""
        return _U16.unpack_from(self.data, _UPDATE_SEQUENCE_COUNT_POS)[0]

    @property
    def update_sequence_size(self) -> int:
        """Size of the update sequence (USN plus array), in bytes."""
        return self.update_sequence_count * 2

    @property
    def update_sequence_number(self) -> bytes:
        """The two bytes of the Update Sequence Number."""
        start = self.update_sequence_offset
        return bytes(self.data[start : start + 2])

    def _array_count(self) -> int:
        return self.update_sequence_count - 2

    def _exceeds_error(self) -> UpdateSequenceArrayExceedsRecordSizeError:
        return UpdateSequenceArrayExceedsRecordSizeError(
            position=self.position,
            array_count=self._array_count(),
            sector_size=self.sector_size,
            record_size=len(self.data),
        )

    def fixup(self) -> None:
        """Restore the last two bytes of every sector from the Update Sequence Array."""
        usn = self.update_sequence_number
        offset = self.update_sequence_offset
        array_start = offset + 2
        array_end = offset + self.update_sequence_size

        for sector_index, array_position in enumerate(range(array_start, array_end, 2)):
            sector_position = (sector_index + 1) * self.sector_size - 2
            sector_end = sector_position + 2
            if sector_end > len(self.data):
                raise self._exceeds_error()

            new_bytes = bytes(self.data[array_position : array_position + 2])
            if len(new_bytes) != 2:
                raise self._exceeds_error()

            current = bytes(self.data[sector_position:sector_end])
            if current != usn:
                raise UpdateSequenceNumberMismatchError(
                    position=self.position + array_position,
                    expected=usn,
                    actual=current,
                )

            self.data[sector_position:sector_end] = new_bytes