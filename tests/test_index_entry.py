import struct

import pytest

from ntfskit.errors import InvalidIndexEntryDataRangeError, InvalidIndexEntrySizeError
from ntfskit.index_entry import (
    INDEX_ENTRY_HEADER_SIZE,
    IndexEntry,
    IndexEntryFlags,
    iter_node_entries,
)
from ntfskit.types import Vcn


class KeyOnly:
    has_file_reference = True

    def key_from_bytes(self, data, position):
        return (bytes(data), position)


class WithData:
    def key_from_bytes(self, data, position):
        return (bytes(data), position)

    def data_from_bytes(self, data, position):
        return ("data", bytes(data), position)


def make_entry(key=b"", flags=0, data_offset=0, data_length=0, padding=0, extra=b"",
               vcn=None, length=None):
    body = key + extra
    if vcn is not None:
        body += struct.pack("<q", vcn)
    total = INDEX_ENTRY_HEADER_SIZE + len(body) if length is None else length
    header = struct.pack(
        "<HHIHHB3x", data_offset, data_length, padding, total, len(key), flags
    )
    return header + body


def test_raw_flag_bits_are_interpreted():
    assert IndexEntryFlags.HAS_SUBNODE == 0x01
    assert IndexEntryFlags.LAST_ENTRY == 0x02
    subnode = IndexEntry.parse(make_entry(key=b"ab", flags=0x01, vcn=5), 0, KeyOnly())
    assert subnode.subnode_vcn() == Vcn(5)
    assert not subnode.is_last
    last = IndexEntry.parse(make_entry(flags=0x02), 0, KeyOnly())
    assert last.is_last
    assert last.subnode_vcn() is None


def test_parse_too_short():
    with pytest.raises(InvalidIndexEntrySizeError) as info:
        IndexEntry.parse(b"\x00" * 10, 0x100, KeyOnly())
    assert info.value.expected == INDEX_ENTRY_HEADER_SIZE
    assert info.value.actual == 10


def test_parse_length_exceeds_data():
    raw = make_entry(key=b"abcd", length=64)
    with pytest.raises(InvalidIndexEntrySizeError) as info:
        IndexEntry.parse(raw, 0x100, KeyOnly())
    assert info.value.expected == 64
    assert info.value.actual == len(raw)


def test_parse_trims_to_entry_length():
    raw = make_entry(key=b"abcd") + b"trailing"
    entry = IndexEntry.parse(raw, 0x100, KeyOnly())
    assert entry.index_entry_length == INDEX_ENTRY_HEADER_SIZE + 4
    assert len(entry.raw) == entry.index_entry_length


def test_key_is_decoded_with_position():
    entry = IndexEntry.parse(make_entry(key=b"k\x00e\x00"), 0x100, KeyOnly())
    assert entry.key() == (b"k\x00e\x00", 0x100 + INDEX_ENTRY_HEADER_SIZE)


def test_last_entry_has_no_key():
    raw = make_entry(key=b"abcd", flags=IndexEntryFlags.LAST_ENTRY)
    entry = IndexEntry.parse(raw, 0, KeyOnly())
    assert entry.is_last
    assert entry.key() is None


def test_key_range_outside_entry():
    raw = bytearray(make_entry(key=b"abcd"))
    struct.pack_into("<H", raw, 10, 40)
    entry = IndexEntry.parse(bytes(raw), 0x80, KeyOnly())
    with pytest.raises(InvalidIndexEntryDataRangeError) as info:
        entry.key()
    assert info.value.range == range(16, 56)
    assert info.value.size == len(raw)
    assert info.value.position == 0x80


def test_subnode_vcn_read_from_entry_end():
    flags = IndexEntryFlags.HAS_SUBNODE | IndexEntryFlags.LAST_ENTRY
    entry = IndexEntry.parse(make_entry(flags=flags, vcn=5), 0, KeyOnly())
    assert entry.subnode_vcn() == Vcn(5)
    assert entry.key() is None


def test_subnode_vcn_after_key():
    raw = make_entry(key=b"abcdefgh", flags=IndexEntryFlags.HAS_SUBNODE, vcn=9)
    entry = IndexEntry.parse(raw, 0, KeyOnly())
    assert entry.subnode_vcn() == Vcn(9)
    assert entry.key() == (b"abcdefgh", INDEX_ENTRY_HEADER_SIZE)


def test_no_subnode():
    entry = IndexEntry.parse(make_entry(key=b"ab"), 0, KeyOnly())
    assert entry.subnode_vcn() is None


def test_subnode_vcn_missing_bytes():
    entry = IndexEntry.parse(make_entry(flags=IndexEntryFlags.HAS_SUBNODE), 0, KeyOnly())
    with pytest.raises(InvalidIndexEntryDataRangeError):
        entry.subnode_vcn()


def test_data_is_decoded():
    raw = make_entry(key=b"kk", data_offset=18, data_length=4, extra=b"DATA")
    entry = IndexEntry.parse(raw, 0x200, WithData())
    assert entry.data() == ("data", b"DATA", 0x200 + 18)


def test_data_absent_when_offset_zero():
    entry = IndexEntry.parse(make_entry(key=b"kk", data_length=4), 0, WithData())
    assert entry.data() is None


def test_data_range_outside_entry():
    raw = make_entry(key=b"kk", data_offset=18, data_length=30)
    entry = IndexEntry.parse(raw, 0, WithData())
    with pytest.raises(InvalidIndexEntryDataRangeError):
        entry.data()


def test_data_unsupported_by_entry_type():
    entry = IndexEntry.parse(make_entry(key=b"kk"), 0, KeyOnly())
    with pytest.raises(TypeError):
        entry.data()


def test_file_reference_from_first_eight_bytes():
    raw = make_entry(key=b"kk", data_offset=0x0102, data_length=0x0304, padding=0x05060708)
    entry = IndexEntry.parse(raw, 0, KeyOnly())
    assert entry.file_reference() == int.from_bytes(raw[:8], "little")


def test_file_reference_unsupported_by_entry_type():
    entry = IndexEntry.parse(make_entry(key=b"kk"), 0, WithData())
    with pytest.raises(TypeError):
        entry.file_reference()


def test_iter_node_entries_stops_at_last_entry():
    first = make_entry(key=b"a\x00")
    second = make_entry(key=b"b\x00c\x00")
    last = make_entry(flags=IndexEntryFlags.LAST_ENTRY)
    blob = first + second + last + b"\xff" * 32
    entries = list(iter_node_entries(blob, 1000, KeyOnly()))
    assert len(entries) == 3
    assert [e.position for e in entries] == [
        1000,
        1000 + len(first),
        1000 + len(first) + len(second),
    ]
    assert [e.key() for e in entries] == [
        (b"a\x00", 1000 + INDEX_ENTRY_HEADER_SIZE),
        (b"b\x00c\x00", 1000 + len(first) + INDEX_ENTRY_HEADER_SIZE),
        None,
    ]


def test_iter_node_entries_empty():
    assert list(iter_node_entries(b"", 0, KeyOnly())) == []


def test_iter_node_entries_propagates_errors():
    blob = make_entry(key=b"a\x00") + b"\x00" * 4
    iterator = iter_node_entries(blob, 0, KeyOnly())
    assert next(iterator).key() == (b"a\x00", INDEX_ENTRY_HEADER_SIZE)
    with pytest.raises(InvalidIndexEntrySizeError):
        next(iterator)