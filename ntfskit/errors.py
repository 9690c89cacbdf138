"""Exceptions raised while reading NTFS structures."""

from __future__ import annotations

from typing import Any


class NtfsError(Exception):
    """Base class of every error raised while reading NTFS structures."""


class _ExpectedActualError(NtfsError):
    """An error at a filesystem position where a value differs from the expected one."""

    _template = "at {position:#x}: expected {expected!r}, found {actual!r}"

    def __init__(self, position: int, expected: Any, actual: Any) -> None:
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            self._template.format(position=position, expected=expected, actual=actual)
        )


class InvalidIndexEntrySizeError(_ExpectedActualError):
    """An Index Entry is smaller than its header or than its own length field."""

    _template = (
        "index entry at {position:#x} needs {expected} bytes, but only {actual} are available"
    )


class InvalidIndexEntryDataRangeError(NtfsError):
    """A key, data or subnode range of an Index Entry lies outside of the entry."""

    def __init__(self, position: int, range: range, size: int) -> None:
        self.position = position
        self.range = range
        self.size = size
        super().__init__(
            f"index entry at {position:#x}: range {range.start}..{range.stop} "
            f"exceeds the entry size of {size} bytes"
        )


class InvalidIndexSignatureError(_ExpectedActualError):
    """An Index Record does not start with the INDX signature."""

    _template = "index record at {position:#x} has signature {actual!r}, expected {expected!r}"


class InvalidIndexAllocatedSizeError(_ExpectedActualError):
    """The allocated size of an Index Record exceeds the index record size."""

    _template = (
        "index record at {position:#x} allocates {actual} bytes, "
        "but records are only {expected} bytes large"
    )


class InvalidIndexUsedSizeError(_ExpectedActualError):
    """The used size of an Index Record exceeds its allocated size."""

    _template = (
        "index record at {position:#x} uses {actual} bytes, "
        "but only {expected} bytes are allocated"
    )


class UpdateSequenceArrayExceedsRecordSizeError(NtfsError):
    """The Update Sequence Array addresses sectors beyond the end of the record."""

    def __init__(
        self, position: int, array_count: int, sector_size: int, record_size: int
    ) -> None:
        self.position = position
        self.array_count = array_count
        self.sector_size = sector_size
        self.record_size = record_size
        super().__init__(
            f"record at {position:#x}: update sequence array with {array_count} entries "
            f"for {sector_size}-byte sectors exceeds the record size of {record_size} bytes"
        )


class UpdateSequenceNumberMismatchError(_ExpectedActualError):
    """A sector's last two bytes do not match the Update Sequence Number."""

    _template = (
        "update sequence number mismatch at {position:#x}: "
        "expected {expected!r}, found {actual!r}"
    )


class InvalidStructuredValueSizeError(NtfsError):
    """A structured attribute value has an invalid size."""

    def __init__(self, position: int, ty: str, expected: int, actual: int) -> None:
        self.position = position
        self.ty = ty
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{ty} value at {position:#x} has invalid size {actual}, expected {expected}"
        )


class UnsupportedFileNamespaceError(NtfsError):
    """A file name carries an unknown namespace."""

    def __init__(self, position: int, actual: int) -> None:
        self.position = position
        self.actual = actual
        super().__init__(f"file name at {position:#x} has unsupported namespace {actual}")


class InvalidIndexRootEntriesOffsetError(_ExpectedActualError):
    """The entries offset of an Index Root points outside of it."""

    _template = (
        "index root at {position:#x}: entries start at offset {expected}, "
        "but the index root is only {actual} bytes large"
    )


class InvalidIndexRootUsedSizeError(_ExpectedActualError):
    """The used size of an Index Root exceeds the index root itself."""

    _template = (
        "index root at {position:#x}: entries end at offset {expected}, "
        "but the index root is only {actual} bytes large"
    )


class MissingIndexAllocationError(NtfsError):
    """A large index or a subnode reference lacks an Index Allocation attribute."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"index at {position:#x} has no index allocation attribute")


class VcnOutOfBoundsError(NtfsError):
    """A VCN points beyond the end of an Index Allocation."""

    def __init__(self, position: int, vcn: Any) -> None:
        self.position = position
        self.vcn = vcn
        super().__init__(
            f"VCN {vcn} is out of bounds of the index allocation at {position:#x}"
        )


class VcnMismatchError(_ExpectedActualError):
    """An Index Record reports a different VCN than the one requested."""

    _template = (
        "index allocation at {position:#x}: requested VCN {expected}, "
        "but the record reports VCN {actual}"
    )


class LcnTooBigError(NtfsError):
    """The byte position of an LCN does not fit into 64 bits."""

    def __init__(self, lcn: Any) -> None:
        self.lcn = lcn
        super().__init__(f"LCN {lcn} is too big to be converted into a byte position")


class VcnTooBigError(NtfsError):
    """The byte offset of a VCN does not fit into 64 bits."""

    def __init__(self, vcn: Any) -> None:
        self.vcn = vcn
        super().__init__(f"VCN {vcn} is too big to be converted into a byte offset")


class InvalidTimeError(NtfsError):
    """A point in time cannot be represented as an NTFS timestamp."""

    def __init__(self) -> None:
        super().__init__("the given time cannot be represented as an NTFS timestamp")


class InvalidUpcaseTableSizeError(NtfsError):
    """The $UpCase data does not have the size of a complete table."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"upcase table has size {actual}, expected {expected}")