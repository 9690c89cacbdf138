"""Decoding of NTFS on-disk structures from bytes: records, B-tree indexes, attribute values and timestamps."""

__version__ = "0.1.0"