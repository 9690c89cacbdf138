"""The $FILE_NAME attribute, which also serves as the key of file name indexes."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

from ..errors import InvalidStructuredValueSizeError, UnsupportedFileNamespaceError
from ..string import NtfsString
from ..time import NtfsTime
from .flags import FileAttributeFlags

#: Size of all header fields of a $FILE_NAME value.
FILE_NAME_HEADER_SIZE = 66

#: The smallest $FILE_NAME value holds a name of a single UTF-16 code unit.
FILE_NAME_MIN_SIZE = FILE_NAME_HEADER_SIZE + 2

#: The name length is an 8-bit count of UTF-16 code units.
NAME_MAX_SIZE = 255 * 2

_HEADER = struct.Struct("<QQQQQQQIIBB")
_TY = "FileName"


class FileNamespace(enum.IntEnum):
    """Character set constraint of a file name."""

    POSIX = 0
    WIN32 = 1
    DOS = 2
    WIN32_AND_DOS = 3


@dataclass(frozen=True)
class FileName:
    """A file name together with the metadata NTFS stores next to it.

    The times, sizes and attributes are only updated when the name changes;
    the $STANDARD_INFORMATION attribute holds the current values.
    """

    parent_directory_reference: int
    creation_time: NtfsTime
    modification_time: NtfsTime
    mft_record_modification_time: NtfsTime
    access_time: NtfsTime
    allocated_size: int
    data_size: int
    file_attributes: FileAttributeFlags
    namespace: FileNamespace
    raw_name: bytes = field(repr=False)

    @classmethod
    def from_bytes(cls, data: bytes, position: int) -> FileName:
        """Parse a $FILE_NAME value (or index key) found at ``position``."""
        data = bytes(data)
        value_length = len(data)
        if value_length < FILE_NAME_MIN_SIZE:
            raise InvalidStructuredValueSizeError(
                position=position,
                ty=_TY,
                expected=FILE_NAME_MIN_SIZE,
                actual=value_length,
            )

        (
            parent_reference,
            creation,
            modification,
            mft_modification,
            access,
            allocated_size,
            data_size,
            file_attributes,
            _reparse_point_tag,
            name_units,
            namespace,
        ) = _HEADER.unpack_from(data)

        name_length = name_units * 2
        total_size = FILE_NAME_HEADER_SIZE + name_length
        if total_size > value_length:
            raise InvalidStructuredValueSizeError(
                position=position, ty=_TY, expected=value_length, actual=total_size
            )

        try:
            parsed_namespace = FileNamespace(namespace)
        except ValueError:
            raise UnsupportedFileNamespaceError(position=position, actual=namespace) from None

        return cls(
            parent_directory_reference=parent_reference,
            creation_time=NtfsTime(creation),
            modification_time=NtfsTime(modification),
            mft_record_modification_time=NtfsTime(mft_modification),
            access_time=NtfsTime(access),
            allocated_size=allocated_size,
            data_size=data_size,
            file_attributes=FileAttributeFlags.from_bits_truncate(file_attributes),
            namespace=parsed_namespace,
            raw_name=data[FILE_NAME_HEADER_SIZE:total_size],
        )

    @property
    def name(self) -> NtfsString:
        """The file name."""
        return NtfsString(self.raw_name)

    @property
    def name_length(self) -> int:
        """Length of the file name, in bytes."""
        return len(self.raw_name)

    @property
    def is_directory(self) -> bool:
        """Whether this file is a directory."""
        return FileAttributeFlags.IS_DIRECTORY in self.file_attributes