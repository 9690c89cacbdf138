"""The $STANDARD_INFORMATION attribute."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ..errors import InvalidStructuredValueSizeError
from ..time import NtfsTime
from .flags import FileAttributeFlags

#: Size of the NTFS 1.x fields plus reserved bytes.
STANDARD_INFORMATION_SIZE_NTFS1 = 48

#: Size of the NTFS 1.x and 3.x fields together.
STANDARD_INFORMATION_SIZE_NTFS3 = 72

_NTFS1 = struct.Struct("<QQQQI")
_NTFS3 = struct.Struct("<IIIIIQQ")
_TY = "StandardInformation"


@dataclass(frozen=True)
class StandardInformation:
    """File times and user-settable file attributes.

    The NTFS 3.x fields are None if the value is too short to hold them.
    """

    creation_time: NtfsTime
    modification_time: NtfsTime
    mft_record_modification_time: NtfsTime
    access_time: NtfsTime
    file_attributes: FileAttributeFlags
    maximum_versions: int | None = None
    version: int | None = None
    class_id: int | None = None
    owner_id: int | None = None
    security_id: int | None = None
    quota_charged: int | None = None
    usn: int | None = None

    @classmethod
    def from_bytes(cls, data: bytes, position: int) -> StandardInformation:
        """Parse the attribute value found at ``position``."""
        value_length = len(data)
        if value_length < STANDARD_INFORMATION_SIZE_NTFS1:
            raise InvalidStructuredValueSizeError(
                position=position,
                ty=_TY,
                expected=STANDARD_INFORMATION_SIZE_NTFS1,
                actual=value_length,
            )

        creation, modification, mft_modification, access, attributes = _NTFS1.unpack_from(
            data
        )
        ntfs3: dict[str, int] = {}
        if value_length >= STANDARD_INFORMATION_SIZE_NTFS3:
            (
                maximum_versions,
                version,
                class_id,
                owner_id,
                security_id,
                quota_charged,
                usn,
            ) = _NTFS3.unpack_from(data, _NTFS1.size)
            ntfs3 = {
                "maximum_versions": maximum_versions,
                "version": version,
                "class_id": class_id,
                "owner_id": owner_id,
                "security_id": security_id,
                "quota_charged": quota_charged,
                "usn": usn,
            }

        return cls(
            creation_time=NtfsTime(creation),
            modification_time=NtfsTime(modification),
            mft_record_modification_time=NtfsTime(mft_modification),
            access_time=NtfsTime(access),
            file_attributes=FileAttributeFlags.from_bits_truncate(attributes),
            **ntfs3,
        )