"""Cluster number types."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import LcnTooBigError, VcnTooBigError

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass(frozen=True, order=True)
class Lcn:
    """A Logical Cluster Number: an absolute cluster index into the filesystem."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U64_MAX:
            raise ValueError(f"LCN {self.value} does not fit into an unsigned 64-bit integer")

    def checked_add(self, vcn: Vcn) -> Lcn | None:
        """Return this LCN moved by the given VCN, or None on over- or underflow."""
        result = self.value + vcn.value
        if 0 <= result <= _U64_MAX:
            return Lcn(result)
        return None

    def position(self, cluster_size: int) -> int:
        """Return the absolute byte position of this LCN."""
        result = self.value * cluster_size
        if result > _U64_MAX:
            raise LcnTooBigError(lcn=self)
        return result

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Vcn:
    """A Virtual Cluster Number: a cluster index relative to an LCN or an attribute value."""

    value: int

    def __post_init__(self) -> None:
        if not _I64_MIN <= self.value <= _I64_MAX:
            raise ValueError(f"VCN {self.value} does not fit into a signed 64-bit integer")

    def offset(self, cluster_size: int) -> int:
        """Return the byte offset of this VCN."""
        result = self.value * cluster_size
        if not _I64_MIN <= result <= _I64_MAX:
            raise VcnTooBigError(vcn=self)
        return result

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)