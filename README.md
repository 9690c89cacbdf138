# ntfskit

A pure-Python library for decoding the on-disk structures of NTFS file systems.
It works on bytes you have already read from a volume or an image: every parser
takes the raw bytes of a structure together with its absolute byte position, and
that position is reported in the error raised for malformed data.

## Modules

- `ntfskit.record`: `Record`, a multi-sector record whose `fixup()` restores the
  last two bytes of every sector from the Update Sequence Array.
- `ntfskit.index_record`: `IndexRecord.from_bytes(data, position, sector_size)`
  checks the `INDX` signature, applies the fixup, validates the sizes and
  exposes `vcn`, `has_subnodes`, `index_data_size`, `index_allocated_size` and
  `entries(entry_type)`.
- `ntfskit.index_entry`: `IndexEntry`, `IndexEntryFlags` and
  `iter_node_entries(data, position, entry_type)` for the entries of a single
  node, with `key()`, `data()`, `file_reference()` and `subnode_vcn()`.
- `ntfskit.index`: `NtfsIndex` iterates a whole B-tree index in ascending key
  order; `IndexFinder.find(cmp)` walks down the tree to a single entry.
- `ntfskit.indexes.entry_types`: `IndexEntryType`, the base class of key decoders.
- `ntfskit.indexes.file_name_index`: `FileNameIndex`, the entry type of
  directories, with `FileNameIndex.find(finder, upcase_table, name)` for a
  case-insensitive lookup by name.
- `ntfskit.structured_values`:
  - `index_root.IndexRoot` (`$INDEX_ROOT`) and
    `index_allocation.IndexAllocation` (`$INDEX_ALLOCATION`, with
    `record_from_vcn()` and `records()`),
  - `file_name.FileName` and `file_name.FileNamespace` (`$FILE_NAME`),
  - `standard_information.StandardInformation` (`$STANDARD_INFORMATION`; the
    NTFS 3.x fields are `None` when the value is too short),
  - `volume_information.VolumeInformation` and `VolumeFlags`,
  - `volume_name.VolumeName`,
  - `attribute_list.AttributeList` and `AttributeListEntry`,
  - `flags.FileAttributeFlags`.
- `ntfskit.string`: `NtfsString`, a UTF-16LE name; comparisons with other
  `NtfsString` objects and with `str` are case-sensitive, `upcase_cmp()` compares
  case-insensitively through an upcase table.
- `ntfskit.upcase_table`: `UpcaseTable.from_bytes()` for the 128 KiB `$UpCase`
  data.
- `ntfskit.time`: `NtfsTime`, 100-nanosecond ticks since 1601-01-01 UTC, with
  `from_datetime()`, `from_unix_time()` and `to_datetime()`.
- `ntfskit.types`: `Lcn` and `Vcn` cluster numbers, with `Lcn.position()`,
  `Lcn.checked_add()` and `Vcn.offset()`.
- `ntfskit.errors`: `NtfsError` and its subclasses.

Malformed structures raise a subclass of `NtfsError`. A few misuses raise plain
Python exceptions instead: `ValueError` for out-of-range cluster numbers or code
units, `TypeError` when asking an entry type for data or a file reference it
does not carry, and `EOFError` when an index allocation ends in the middle of a
record.

## Installation

```
pip install ntfskit
```

## Examples

Timestamps:

```python
from datetime import datetime, timezone
from ntfskit.time import NtfsTime

nt = NtfsTime.from_datetime(datetime(2013, 1, 5, 18, 15, tzinfo=timezone.utc))
print(int(nt))           # 130018833000000000
print(nt.to_datetime())  # 2013-01-05 18:15:00+00:00
```

Names and case-insensitive comparison:

```python
from ntfskit.string import NtfsString
from ntfskit.upcase_table import UpcaseTable

name = NtfsString("$MFT".encode("utf-16-le"))
print(name.to_string_lossy())  # $MFT

upcase = UpcaseTable.from_bytes(upcase_data)  # the 128 KiB $UpCase file contents
print(name.upcase_cmp(upcase, "$mft"))        # 0 with a standard table
```

Listing and searching a directory, given the values of its `$INDEX_ROOT` and
`$INDEX_ALLOCATION` attributes and their positions:

```python
from ntfskit.index import NtfsIndex
from ntfskit.indexes.file_name_index import FileNameIndex
from ntfskit.structured_values.index_allocation import IndexAllocation
from ntfskit.structured_values.index_root import IndexRoot

root = IndexRoot.from_bytes(index_root_value, index_root_position)
allocation = IndexAllocation(
    index_allocation_value, index_allocation_position, cluster_size=4096, sector_size=512
)
directory = NtfsIndex(root, FileNameIndex(), allocation)

for entry in directory.entries():
    print(entry.key().name, entry.file_reference())

entry = FileNameIndex.find(directory.finder(), upcase, "Windows")
if entry is not None:
    print(entry.key().name)
```

For a small index, whose root is not flagged as large, the allocation may be
left out.

## What it does not do

The package decodes structures from bytes; it does not open volumes or images.
It does not read the boot sector, locate the Master File Table, parse File
Records or attribute headers, or follow data runs of non-resident attributes.
The caller finds the attribute values (for example `$INDEX_ALLOCATION` or
`$UpCase`) and hands their bytes and positions to the parsers. File references
are returned as raw 64-bit integers. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```