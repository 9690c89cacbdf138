import struct

import pytest

from ntfskit.index_entry import IndexEntry
from ntfskit.indexes.entry_types import IndexEntryType


class KeysOnly(IndexEntryType):
    def key_from_bytes(self, data, position):
        return (data.rstrip(b"\0").decode("ascii"), position)


class KeysAndData(IndexEntryType):
    def key_from_bytes(self, data, position):
        return data.rstrip(b"\0").decode("ascii")

    def data_from_bytes(self, data, position):
        return struct.unpack("<I", data)[0]


class KeysAndReferences(IndexEntryType):
    has_file_reference = True

    def key_from_bytes(self, data, position):
        return data.decode("ascii")


def _entry_with_data(key, value):
    key_field = key + b"\0" * (-len(key) % 8)
    data_offset = 16 + len(key_field)
    length = data_offset + 4
    header = struct.pack("<HHIHHB3x", data_offset, 4, 0, length, len(key), 0)
    return header + key_field + struct.pack("<I", value)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        IndexEntryType()


def test_type_without_data_or_reference():
    entry_type = KeysOnly()
    assert entry_type.has_data is False
    assert entry_type.has_file_reference is False
    entry = IndexEntry.parse(_entry_with_data(b"key", 1), 0, entry_type)
    with pytest.raises(TypeError):
        entry.data()
    with pytest.raises(TypeError):
        entry.file_reference()


def test_type_with_data():
    entry_type = KeysAndData()
    assert entry_type.has_data is True
    assert entry_type.has_file_reference is False
    entry = IndexEntry.parse(_entry_with_data(b"key", 42), 0, entry_type)
    assert entry.data() == 42


def test_type_with_file_reference():
    entry_type = KeysAndReferences()
    assert entry_type.has_file_reference is True
    assert entry_type.has_data is False
    raw = _entry_with_data(b"key", 1)
    entry = IndexEntry.parse(raw, 0, entry_type)
    assert entry.file_reference() == int.from_bytes(raw[:8], "little")


def test_key_is_decoded_through_entry_type():
    raw = _entry_with_data(b"abc", 7)
    entry = IndexEntry.parse(raw, 0x200, KeysOnly())
    name, position = entry.key()
    assert name == "abc"
    assert position == 0x200 + 16


def test_data_is_decoded_through_entry_type():
    raw = _entry_with_data(b"key", 0xDEADBEEF)
    entry = IndexEntry.parse(raw, 0, KeysAndData())
    assert entry.key() == "key"
    assert entry.data() == 0xDEADBEEF


def test_data_rejected_for_type_without_data():
    raw = _entry_with_data(b"key", 1)
    entry = IndexEntry.parse(raw, 0, KeysOnly())
    with pytest.raises(TypeError):
        entry.data()


def test_file_reference_rejected_for_type_without_reference():
    raw = _entry_with_data(b"key", 1)
    entry = IndexEntry.parse(raw, 0, KeysAndData())
    with pytest.raises(TypeError):
        entry.file_reference()


def test_repr_names_the_type():
    entry_type = KeysOnly()
    assert repr(entry_type) == "KeysOnly()"
    entry = IndexEntry.parse(_entry_with_data(b"xy", 0), 0, entry_type)
    assert entry.key() == ("xy", 16)