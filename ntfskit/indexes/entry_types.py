"""Index entry types: decoders for the keys and data of an NTFS index."""

from __future__ import annotations

import abc
from typing import Any, ClassVar


class IndexEntryType(abc.ABC):
    """Describes how the entries of one kind of NTFS index are decoded.

    Subclasses implement :meth:`key_from_bytes`. An index whose entries carry
    data additionally defines ``data_from_bytes(data, position)``; an index
    whose entries carry a file reference instead sets ``has_file_reference``
    to True. The two are mutually exclusive.
    """

    has_file_reference: ClassVar[bool] = False

    @abc.abstractmethod
    def key_from_bytes(self, data: bytes, position: int) -> Any:
        """Decode the key stored in ``data``, found at ``position``."""

    @property
    def has_data(self) -> bool:
        """Whether entries of this type carry data."""
        return callable(getattr(self, "data_from_bytes", None))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"