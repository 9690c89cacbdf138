"""The $ATTRIBUTE_LIST attribute."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..errors import InvalidStructuredValueSizeError
from ..string import NtfsString
from ..types import Vcn

#: Size of all header fields of an attribute list entry.
ATTRIBUTE_LIST_ENTRY_HEADER_SIZE = 26

#: The name length is an 8-bit count of UTF-16 code units.
NAME_MAX_SIZE = 255 * 2

_HEADER = struct.Struct("<IHBBqQH")
_TY = "AttributeList"


@dataclass(frozen=True)
class AttributeListEntry:
    """A single entry of an $ATTRIBUTE_LIST, referencing an attribute in some File Record."""

    ty: int
    list_entry_length: int
    name_offset: int
    lowest_vcn: Vcn
    base_file_reference: int
    instance: int
    position: int
    raw_name: bytes = field(repr=False)

    @classmethod
    def from_bytes(cls, data: bytes, position: int) -> AttributeListEntry:
        """Parse the entry at the start of ``data``, found at ``position``."""
        data = bytes(data)
        if len(data) < ATTRIBUTE_LIST_ENTRY_HEADER_SIZE:
            raise InvalidStructuredValueSizeError(
                position=position,
                ty=_TY,
                expected=ATTRIBUTE_LIST_ENTRY_HEADER_SIZE,
                actual=len(data),
            )
        (
            ty,
            list_entry_length,
            name_units,
            name_offset,
            lowest_vcn,
            base_file_reference,
            instance,
        ) = _HEADER.unpack_from(data)

        name_length = name_units * 2
        total_size = ATTRIBUTE_LIST_ENTRY_HEADER_SIZE + name_length
        if total_size > list_entry_length:
            raise InvalidStructuredValueSizeError(
                position=position, ty=_TY, expected=list_entry_length, actual=total_size
            )
        if total_size > len(data):
            raise InvalidStructuredValueSizeError(
                position=position, ty=_TY, expected=total_size, actual=len(data)
            )

        return cls(
            ty=ty,
            list_entry_length=list_entry_length,
            name_offset=name_offset,
            lowest_vcn=Vcn(lowest_vcn),
            base_file_reference=base_file_reference,
            instance=instance,
            position=position,
            raw_name=data[ATTRIBUTE_LIST_ENTRY_HEADER_SIZE:total_size],
        )

    @property
    def name(self) -> NtfsString:
        """The attribute name."""
        return NtfsString(self.raw_name)

    @property
    def name_length(self) -> int:
        """Length of the attribute name, in bytes."""
        return len(self.raw_name)


@dataclass(frozen=True)
class AttributeList:
    """The value of an $ATTRIBUTE_LIST attribute found at ``position``."""

    data: bytes = field(repr=False)
    position: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def entries(self) -> Iterator[AttributeListEntry]:
        """Yield every entry of this attribute list in stored order."""
        remaining = self.data
        position = self.position
        while remaining:
            entry = AttributeListEntry.from_bytes(remaining, position)
            yield entry
            remaining = remaining[entry.list_entry_length :]
            position += entry.list_entry_length

    def __iter__(self) -> Iterator[AttributeListEntry]:
        return self.entries()