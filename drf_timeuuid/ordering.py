"""
Chronological ordering of UUIDs.

Comparing version 1 UUIDs byte by byte does not follow creation order,
because the low bits of the timestamp come first in the layout. Every
comparison here decodes the logical timestamp first.
"""

from functools import cmp_to_key

from drf_timeuuid.codec import decode_fields
from drf_timeuuid.compat import List, Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class OrderingService:
    """
    Total order over UUIDs consistent with creation order.

    Values are ordered by version first. Time-based values are then ordered
    by timestamp, clock sequence and node; any other version by its
    unsigned 128-bit value.
    """

    @staticmethod
    def compare(first: "UUID", second: "UUID") -> int:
        """Return -1, 0 or 1 as ``first`` sorts before, with or after ``second``."""
        a = decode_fields(first)
        b = decode_fields(second)

        if a.version != b.version:
            return _sign(a.version - b.version)

        if a.version != 1:
            return _sign(first.int - second.int)

        for left, right in (
            (a.timestamp, b.timestamp),
            (a.clock_sequence, b.clock_sequence),
            (a.node, b.node),
        ):
            if left != right:
                return _sign(left - right)
        return 0

    key = staticmethod(cmp_to_key(compare.__func__))

    @classmethod
    def sort(cls, uuids: Iterable["UUID"]) -> List["UUID"]:
        """Oldest first. Ties keep their input order."""
        return sorted(uuids, key=cls.key)

    @classmethod
    def sort_reversed(cls, uuids: Iterable["UUID"]) -> List["UUID"]:
        """Newest first. Ties keep their input order."""
        return sorted(uuids, key=cls.key, reverse=True)

    @classmethod
    def min(cls, first: Optional["UUID"], second: Optional["UUID"]) -> Optional["UUID"]:
        if first is None:
            return second
        if second is None:
            return first
        return first if cls.compare(first, second) < 0 else second

    @classmethod
    def max(cls, first: Optional["UUID"], second: Optional["UUID"]) -> Optional["UUID"]:
        if first is None:
            return second
        if second is None:
            return first
        return second if cls.compare(first, second) < 0 else first

    @staticmethod
    def is_time_based(value: Optional["UUID"]) -> bool:
        if value is None:
            return False
        # uuid.UUID.version is None outside the RFC 4122 variant.
        return decode_fields(value).version == 1
