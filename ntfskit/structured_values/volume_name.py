"""The $VOLUME_NAME attribute."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidStructuredValueSizeError
from ..string import NtfsString

#: The smallest volume name holds a single UTF-16 code unit.
VOLUME_NAME_MIN_SIZE = 2

#: The largest volume name holds 128 UTF-16 code units.
VOLUME_NAME_MAX_SIZE = 128 * 2

_TY = "VolumeName"


@dataclass(frozen=True)
class VolumeName:
    """The user-defined name (label) of an NTFS volume."""

    raw: bytes

    @classmethod
    def from_bytes(cls, data: bytes, position: int) -> VolumeName:
        """Parse the attribute value found at ``position``."""
        length = len(data)
        if length < VOLUME_NAME_MIN_SIZE:
            raise InvalidStructuredValueSizeError(
                position=position, ty=_TY, expected=VOLUME_NAME_MIN_SIZE, actual=length
            )
        if length > VOLUME_NAME_MAX_SIZE:
            raise InvalidStructuredValueSizeError(
                position=position, ty=_TY, expected=VOLUME_NAME_MAX_SIZE, actual=length
            )
        return cls(bytes(data))

    @property
    def name(self) -> NtfsString:
        """The volume name."""
        return NtfsString(self.raw)

    @property
    def name_length(self) -> int:
        """Length of the volume name, in bytes."""
        return len(self.raw)