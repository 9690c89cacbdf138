import pytest

from ntfskit.structured_values.flags import FileAttributeFlags


def test_documented_bits():
    assert FileAttributeFlags.from_bits_truncate(0x0001) == FileAttributeFlags.READ_ONLY
    assert FileAttributeFlags.from_bits_truncate(0x1000_0000) == FileAttributeFlags.IS_DIRECTORY


def test_combined_bits():
    flags = FileAttributeFlags.from_bits_truncate(0x1000_0000 | 0x0002 | 0x0020)
    assert FileAttributeFlags.IS_DIRECTORY in flags
    assert FileAttributeFlags.HIDDEN in flags
    assert FileAttributeFlags.ARCHIVE in flags
    assert FileAttributeFlags.SYSTEM not in flags


@pytest.mark.parametrize("unknown", [0x0008, 0x0010, 0x8000, 0x8000_0000])
def test_unknown_bits_are_dropped(unknown):
    flags = FileAttributeFlags.from_bits_truncate(unknown | FileAttributeFlags.READ_ONLY)
    assert flags == FileAttributeFlags.READ_ONLY
    assert int(flags) & unknown == 0


def test_every_member_survives_truncation():
    for member in FileAttributeFlags:
        assert FileAttributeFlags.from_bits_truncate(int(member)) == member