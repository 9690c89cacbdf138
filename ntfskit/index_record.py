"""NTFS Index Records (the ``INDX`` nodes of an Index Allocation)."""

from __future__ import annotations

import struct
from collections.abc import Iterator

from .errors import (
    InvalidIndexAllocatedSizeError,
    InvalidIndexSignatureError,
    InvalidIndexUsedSizeError,
)
from .index_entry import EntryType, IndexEntry, iter_node_entries
from .record import Record
from .types import Vcn

#: Size of the Index Record header (record header plus VCN).
INDEX_RECORD_HEADER_SIZE = 24

#: Size of the Index Node header fields plus reserved bytes.
INDEX_NODE_HEADER_SIZE = 16

#: Signature every Index Record starts with.
INDEX_RECORD_SIGNATURE = b"INDX"

HAS_SUBNODES_FLAG = 0x01

_NODE_HEADER = struct.Struct("<IIIB")
_VCN = struct.Struct("<q")
_VCN_POSITION = 16


class IndexRecord:
    """A single Index Record: one B-tree node stored in an $INDEX_ALLOCATION."""

    __slots__ = ("_record",)

    def __init__(self, record: Record) -> None:
        self._record = record

    @classmethod
    def from_bytes(cls, data: bytes, position: int, sector_size: int) -> IndexRecord:
        """Parse, fix up and validate a raw Index Record read from ``position``."""
        record = Record(data, position, sector_size)
        cls._validate_signature(record)

        minimum = INDEX_RECORD_HEADER_SIZE + INDEX_NODE_HEADER_SIZE
        if len(record) < minimum:
            raise InvalidIndexAllocatedSizeError(
                position=position, expected=len(record), actual=minimum
            )

        record.fixup()
        index_record = cls(record)
        index_record._validate_sizes()
        return index_record

    @staticmethod
    def _validate_signature(record: Record) -> None:
        signature = record.signature
        if signature != INDEX_RECORD_SIGNATURE:
            raise InvalidIndexSignatureError(
                position=record.position,
                expected=INDEX_RECORD_SIGNATURE,
                actual=signature,
            )

    def _validate_sizes(self) -> None:
        record_size = len(self._record)

        total_allocated_size = INDEX_RECORD_HEADER_SIZE + self.index_allocated_size
        if total_allocated_size > record_size:
            raise InvalidIndexAllocatedSizeError(
                position=self.position, expected=record_size, actual=total_allocated_size
            )

        total_data_size = INDEX_RECORD_HEADER_SIZE + self.index_data_size
        if total_data_size > total_allocated_size:
            raise InvalidIndexUsedSizeError(
                position=self.position, expected=total_allocated_size, actual=total_data_size
            )

    def _node_header(self) -> tuple[int, int, int, int]:
        return _NODE_HEADER.unpack_from(self._record.data, INDEX_RECORD_HEADER_SIZE)

    def __repr__(self) -> str:
        return (
            f"IndexRecord(position={self.position:#x}, vcn={self.vcn}, "
            f"size={len(self._record)})"
        )

    @property
    def data(self) -> bytes:
        """The fixed-up bytes of the whole record."""
        return bytes(self._record.data)

    @property
    def position(self) -> int:
        """Absolute position of this record within the filesystem, in bytes."""
        return self._record.position

    @property
    def index_entries_offset(self) -> int:
        """Offset of the first entry, relative to the node header."""
        return self._node_header()[0]

    @property
    def index_data_size(self) -> int:
        """Size actually used by index data, in bytes."""
        return self._node_header()[1]

    @property
    def index_allocated_size(self) -> int:
        """Allocated size of the index data, in bytes."""
        return self._node_header()[2]

    @property
    def has_subnodes(self) -> bool:
        """Whether this node has subnodes (otherwise it is a leaf node)."""
        return bool(self._node_header()[3] & HAS_SUBNODES_FLAG)

    @property
    def vcn(self) -> Vcn:
        """The VCN this record reports for itself."""
        return Vcn(_VCN.unpack_from(self._record.data, _VCN_POSITION)[0])

    def _entries_range(self) -> tuple[int, int]:
        start = INDEX_RECORD_HEADER_SIZE + self.index_entries_offset
        end = INDEX_RECORD_HEADER_SIZE + self.index_data_size
        return start, end

    @property
    def entries_data(self) -> bytes:
        """The bytes holding the entries of this node."""
        start, end = self._entries_range()
        return bytes(self._record.data[start:end])

    @property
    def entries_position(self) -> int:
        """Absolute position of the first entry of this node, in bytes."""
        start, _end = self._entries_range()
        return self.position + start

    def entries(self, entry_type: EntryType) -> Iterator[IndexEntry]:
        """Iterate over the entries of this node, decoded with ``entry_type``."""
        return iter_node_entries(self.entries_data, self.entries_position, entry_type)