"""Traversal and lookup of NTFS B-tree indexes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from .errors import MissingIndexAllocationError
from .index_entry import EntryType, IndexEntry
from .structured_values.index_allocation import IndexAllocation
from .structured_values.index_root import IndexRoot
from .types import Vcn


class NtfsIndex:
    """An NTFS index, made of an $INDEX_ROOT and, for large indexes, an $INDEX_ALLOCATION.

    ``entry_type`` decodes the keys of the index entries, e.g. a
    :class:`~ntfskit.indexes.file_name_index.FileNameIndex` for directories.
    """

    def __init__(
        self,
        index_root: IndexRoot,
        entry_type: EntryType,
        index_allocation: IndexAllocation | None = None,
    ) -> None:
        if index_allocation is None and index_root.is_large_index:
            raise MissingIndexAllocationError(position=index_root.position)
        self.index_root = index_root
        self.entry_type = entry_type
        self.index_allocation = index_allocation

    def __repr__(self) -> str:
        return (
            f"NtfsIndex(position={self.index_root.position:#x}, "
            f"entry_type={self.entry_type!r}, "
            f"large={self.index_allocation is not None})"
        )

    @property
    def index_record_size(self) -> int:
        """Size of a single Index Record of this index, in bytes."""
        return self.index_root.index_record_size

    def _root_entries(self) -> Iterator[IndexEntry]:
        return self.index_root.entries(self.entry_type)

    def _subnode_entries(self, vcn: Vcn) -> Iterator[IndexEntry]:
        if self.index_allocation is None:
            raise MissingIndexAllocationError(position=self.index_root.position)
        record = self.index_allocation.record_from_vcn(self.index_record_size, vcn)
        return record.entries(self.entry_type)

    def entries(self) -> Iterator[IndexEntry]:
        """Yield all entries of the index, in ascending key order."""
        # Each stack item holds the iterator of one node level and the entry of
        # the parent level that comes right after that subnode (if any).
        stack: list[tuple[Iterator[IndexEntry], IndexEntry | None]] = [
            (self._root_entries(), None)
        ]
        while stack:
            node_entries, following = stack[-1]
            entry = next(node_entries, None)
            if entry is None:
                stack.pop()
                if following is not None:
                    yield following
                continue

            vcn = entry.subnode_vcn()
            if vcn is not None:
                stack.append((self._subnode_entries(vcn), None if entry.is_last else entry))
            elif not entry.is_last:
                yield entry

    def __iter__(self) -> Iterator[IndexEntry]:
        return self.entries()

    def finder(self) -> IndexFinder:
        """Return a helper that looks up single entries of this index."""
        return IndexFinder(self)


class IndexFinder:
    """Finds single entries of an :class:`NtfsIndex` by walking down its B-tree."""

    def __init__(self, index: NtfsIndex) -> None:
        self.index = index

    def find(self, cmp: Callable[[Any], int]) -> IndexEntry | None:
        """Return the entry whose key matches, or None.

        ``cmp(key)`` compares what is searched for with ``key``: negative if it
        comes before the key, zero if it matches, positive if it comes after.
        """
        node_entries = self.index._root_entries()
        while True:
            entry = next(node_entries, None)
            if entry is None:
                return None

            key = entry.key()
            if key is not None:
                order = cmp(key)
                if order == 0:
                    return entry
                if order > 0:
                    continue

            # The entry has no key (end of this level) or comes after the
            # searched key: descend into its subnode, if it has one.
            vcn = entry.subnode_vcn()
            if vcn is None:
                return None
            node_entries = self.index._subnode_entries(vcn)