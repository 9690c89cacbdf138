"""Index Entries of NTFS B-tree index nodes.

An *entry type* object describes how keys and data of an index are decoded.
It provides ``key_from_bytes(data, position)``; it may provide
``data_from_bytes(data, position)`` for entries carrying data, and sets
``has_file_reference = True`` for entries carrying a file reference instead.
"""

from __future__ import annotations

import enum
import struct
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from .errors import InvalidIndexEntryDataRangeError, InvalidIndexEntrySizeError
from .types import Vcn

#: Size of the Index Entry header fields plus reserved bytes.
INDEX_ENTRY_HEADER_SIZE = 16

_HEADER = struct.Struct("<HHIHHB")
_VCN = struct.Struct("<q")
_FILE_REFERENCE = struct.Struct("<Q")


class IndexEntryFlags(enum.IntFlag):
    """Flags of an Index Entry."""

    HAS_SUBNODE = 0x01
    LAST_ENTRY = 0x02


class EntryType(Protocol):
    """Decoder for the keys of an index."""

    def key_from_bytes(self, data: bytes, position: int) -> Any: ...


@dataclass(frozen=True)
class IndexEntry:
    """A single entry of an NTFS index node."""

    raw: bytes = field(repr=False)
    position: int
    entry_type: Any = field(repr=False)
    data_offset: int
    data_length: int
    index_entry_length: int
    key_length: int
    flags: IndexEntryFlags

    @classmethod
    def parse(cls, data: bytes, position: int, entry_type: EntryType) -> IndexEntry:
        """Parse the entry at the start of ``data`` and validate its size."""
        data = bytes(data)
        if len(data) < INDEX_ENTRY_HEADER_SIZE:
            raise InvalidIndexEntrySizeError(
                position=position, expected=INDEX_ENTRY_HEADER_SIZE, actual=len(data)
            )
        data_offset, data_length, _padding, length, key_length, flags = _HEADER.unpack_from(
            data
        )
        if length > len(data):
            raise InvalidIndexEntrySizeError(
                position=position, expected=length, actual=len(data)
            )
        return cls(
            raw=data[:length],
            position=position,
            entry_type=entry_type,
            data_offset=data_offset,
            data_length=data_length,
            index_entry_length=length,
            key_length=key_length,
            flags=IndexEntryFlags(flags & 0x03),
        )

    @property
    def is_last(self) -> bool:
        """Whether this is the terminating entry of its node."""
        return IndexEntryFlags.LAST_ENTRY in self.flags

    def _slice(self, start: int, end: int) -> bytes:
        if end > len(self.raw):
            raise InvalidIndexEntryDataRangeError(
                position=self.position, range=range(start, end), size=len(self.raw)
            )
        return self.raw[start:end]

    def key(self) -> Any | None:
        """Return the decoded key, or None for an entry without a key."""
        if self.key_length == 0 or self.is_last:
            return None
        start = INDEX_ENTRY_HEADER_SIZE
        end = start + self.key_length
        return self.entry_type.key_from_bytes(self._slice(start, end), self.position + start)

    def data(self) -> Any | None:
        """Return the decoded data of this entry, or None if it has none."""
        parse_data = getattr(self.entry_type, "data_from_bytes", None)
        if parse_data is None:
            raise TypeError("this index entry type carries no data")
        if self.data_offset == 0 or self.data_length == 0:
            return None
        start = self.data_offset
        end = start + self.data_length
        return parse_data(self._slice(start, end), self.position + start)

    def file_reference(self) -> int:
        """Return the raw 64-bit reference of the file this entry points to."""
        if not getattr(self.entry_type, "has_file_reference", False):
            raise TypeError("this index entry type carries no file reference")
        return _FILE_REFERENCE.unpack_from(self.raw)[0]

    def subnode_vcn(self) -> Vcn | None:
        """Return the VCN of the subnode, or None if this entry has none."""
        if IndexEntryFlags.HAS_SUBNODE not in self.flags:
            return None
        start = max(self.index_entry_length - _VCN.size, INDEX_ENTRY_HEADER_SIZE)
        end = start + _VCN.size
        return Vcn(_VCN.unpack(self._slice(start, end))[0])


def iter_node_entries(
    data: bytes, position: int, entry_type: EntryType
) -> Iterator[IndexEntry]:
    """Yield the entries of one index node, up to and including the last entry."""
    data = bytes(data)
    offset = 0
    while offset < len(data):
        entry = IndexEntry.parse(data[offset:], position, entry_type)
        yield entry
        if entry.is_last:
            return
        offset += entry.index_entry_length
        position += entry.index_entry_length