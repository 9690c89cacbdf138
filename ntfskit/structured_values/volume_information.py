"""The $VOLUME_INFORMATION attribute."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from ..errors import InvalidStructuredValueSizeError

#: Size of all fields of the attribute value.
VOLUME_INFORMATION_SIZE = 12

_DATA = struct.Struct("<QBBH")
_TY = "VolumeInformation"


class VolumeFlags(enum.IntFlag):
    """Flags of an NTFS volume."""

    IS_DIRTY = 0x0001
    RESIZE_LOG_FILE = 0x0002
    UPGRADE_ON_MOUNT = 0x0004
    MOUNTED_ON_NT4 = 0x0008
    DELETE_USN_UNDERWAY = 0x0010
    REPAIR_OBJECT_ID = 0x0020
    CHKDSK_UNDERWAY = 0x4000
    MODIFIED_BY_CHKDSK = 0x8000

    @classmethod
    def from_bits_truncate(cls, bits: int) -> VolumeFlags:
        """Build flags from raw bits, dropping every unknown bit."""
        mask = 0
        for member in cls:
            mask |= member.value
        return cls(bits & mask)


@dataclass(frozen=True)
class VolumeInformation:
    """General information about the volume, like the NTFS version."""

    major_version: int
    minor_version: int
    flags: VolumeFlags

    @classmethod
    def from_bytes(cls, data: bytes, position: int) -> VolumeInformation:
        """Parse the attribute value found at ``position``."""
        if len(data) < VOLUME_INFORMATION_SIZE:
            raise InvalidStructuredValueSizeError(
                position=position,
                ty=_TY,
                expected=VOLUME_INFORMATION_SIZE,
                actual=len(data),
            )
        _reserved, major, minor, flags = _DATA.unpack_from(data)
        return cls(
            major_version=major,
            minor_version=minor,
            flags=VolumeFlags.from_bits_truncate(flags),
        )