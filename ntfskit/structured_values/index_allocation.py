"""The $INDEX_ALLOCATION attribute: the subnodes of an index B-tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..errors import VcnMismatchError, VcnOutOfBoundsError
from ..index_record import IndexRecord
from ..types import Vcn


@dataclass(frozen=True)
class IndexAllocation:
    """The Index Records of an index, stored back to back in one attribute value.

    ``data`` is the complete attribute value and ``position`` the absolute byte
    position of its first byte within the filesystem.
    """

    data: bytes = field(repr=False)
    position: int
    cluster_size: int
    sector_size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def _read_record(self, offset: int, index_record_size: int) -> IndexRecord:
        chunk = self.data[offset : offset + index_record_size]
        if len(chunk) < index_record_size:
            raise EOFError("failed to fill whole buffer")
        return IndexRecord.from_bytes(chunk, self.position + offset, self.sector_size)

    def record_from_vcn(self, index_record_size: int, vcn: Vcn) -> IndexRecord:
        """Return the fixed-up and validated Index Record located at ``vcn``."""
        offset = vcn.offset(self.cluster_size)
        if offset < 0 or offset >= len(self.data):
            raise VcnOutOfBoundsError(position=self.position, vcn=vcn)

        record = self._read_record(offset, index_record_size)
        if record.vcn != vcn:
            raise VcnMismatchError(position=self.position, expected=vcn, actual=record.vcn)
        return record

    def records(self, index_record_size: int) -> Iterator[IndexRecord]:
        """Yield every Index Record of this attribute, fixed up and validated."""
        if index_record_size <= 0:
            raise ValueError(f"invalid index record size {index_record_size}")
        for offset in range(0, len(self.data), index_record_size):
            yield self._read_record(offset, index_record_size)