"""The $INDEX_ROOT attribute: the top-level node of an index B-tree."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..errors import (
    InvalidIndexRootEntriesOffsetError,
    InvalidIndexRootUsedSizeError,
    InvalidStructuredValueSizeError,
)
from ..index_entry import EntryType, IndexEntry, iter_node_entries
from ..index_record import INDEX_NODE_HEADER_SIZE

#: Size of the Index Root header fields plus reserved bytes.
INDEX_ROOT_HEADER_SIZE = 16

LARGE_INDEX_FLAG = 0x01

_ROOT_HEADER = struct.Struct("<IIIb")
_NODE_HEADER = struct.Struct("<IIIB")
_TY = "IndexRoot"


@dataclass(frozen=True)
class IndexRoot:
    """The top-level node of an index; subnodes live in an $INDEX_ALLOCATION."""

    raw: bytes = field(repr=False)
    position: int

    @classmethod
    def from_bytes(cls, data: bytes, position: int) -> IndexRoot:
        """Parse and validate the resident attribute value found at ``position``."""
        data = bytes(data)
        if len(data) < INDEX_ROOT_HEADER_SIZE + INDEX_NODE_HEADER_SIZE:
            raise InvalidStructuredValueSizeError(
                position=position,
                ty=_TY,
                expected=INDEX_ROOT_HEADER_SIZE,
                actual=len(data),
            )
        index_root = cls(data, position)
        index_root._validate_sizes()
        return index_root

    def _validate_sizes(self) -> None:
        start, end = self._entries_range()
        if start >= len(self.raw):
            raise InvalidIndexRootEntriesOffsetError(
                position=self.position, expected=start, actual=len(self.raw)
            )
        if end > len(self.raw):
            raise InvalidIndexRootUsedSizeError(
                position=self.position, expected=end, actual=len(self.raw)
            )

    def _node_header(self) -> tuple[int, int, int, int]:
        return _NODE_HEADER.unpack_from(self.raw, INDEX_ROOT_HEADER_SIZE)

    def _entries_range(self) -> tuple[int, int]:
        entries_offset, index_size, _allocated, _flags = self._node_header()
        return (
            INDEX_ROOT_HEADER_SIZE + entries_offset,
            INDEX_ROOT_HEADER_SIZE + index_size,
        )

    @property
    def index_record_size(self) -> int:
        """Size of a single Index Record of this index, in bytes."""
        return _ROOT_HEADER.unpack_from(self.raw)[2]

    @property
    def index_data_size(self) -> int:
        """Size actually used by index data within this Index Root, in bytes."""
        return self._node_header()[1]

    @property
    def index_allocated_size(self) -> int:
        """Allocated size of this Index Root, in bytes."""
        return self._node_header()[2]

    @property
    def is_large_index(self) -> bool:
        """Whether the index needs an additional $INDEX_ALLOCATION attribute."""
        return bool(self._node_header()[3] & LARGE_INDEX_FLAG)

    @property
    def entries_data(self) -> bytes:
        """The bytes holding the top-level entries."""
        start, end = self._entries_range()
        return self.raw[start:end]

    @property
    def entries_position(self) -> int:
        """Absolute position of the first top-level entry, in bytes."""
        start, _end = self._entries_range()
        return self.position + start

    def entries(self, entry_type: EntryType) -> Iterator[IndexEntry]:
        """Iterate over the top-level entries, decoded with ``entry_type``."""
        return iter_node_entries(self.entries_data, self.entries_position, entry_type)