"""File attribute flags shared by several structured values."""

from __future__ import annotations

import enum


class FileAttributeFlags(enum.IntFlag):
    """Flags a user can set for a file (Read-Only, Hidden, System, Archive, ...)."""

    READ_ONLY = 0x0001
    HIDDEN = 0x0002
    SYSTEM = 0x0004
    ARCHIVE = 0x0020
    DEVICE = 0x0040
    NORMAL = 0x0080
    TEMPORARY = 0x0100
    SPARSE_FILE = 0x0200
    REPARSE_POINT = 0x0400
    COMPRESSED = 0x0800
    OFFLINE = 0x1000
    NOT_CONTENT_INDEXED = 0x2000
    ENCRYPTED = 0x4000
    IS_DIRECTORY = 0x1000_0000

    @classmethod
    def from_bits_truncate(cls, bits: int) -> FileAttributeFlags:
        """Build flags from raw bits, dropping every unknown bit."""
        mask = 0
        for member in cls:
            mask |= member.value
        return cls(bits & mask)