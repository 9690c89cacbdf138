"""File name indexes, commonly known as directories."""

from __future__ import annotations

from ..index import IndexFinder
from ..index_entry import IndexEntry
from ..string import NtfsString
from ..structured_values.file_name import FileName
from ..upcase_table import UpcaseTable
from .entry_types import IndexEntryType


class FileNameIndex(IndexEntryType):
    """Entry type of file name indexes: $FILE_NAME keys and file references."""

    has_file_reference = True

    def key_from_bytes(self, data: bytes, position: int) -> FileName:
        """Decode a $FILE_NAME key."""
        return FileName.from_bytes(data, position)

    @staticmethod
    def find(finder: IndexFinder, upcase_table: UpcaseTable, name: str) -> IndexEntry | None:
        """Find a file by name, compared case-insensitively via ``upcase_table``."""
        wanted = NtfsString(name.encode("utf-16-le", "surrogatepass"))
        return finder.find(lambda file_name: wanted.upcase_cmp(upcase_table, file_name.name))