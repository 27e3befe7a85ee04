"""
Data structures shared between the clock, codec and ordering layers.
"""

from drf_timeuuid.compat import NamedTuple


class Tick(NamedTuple):
    """
    A slot handed out by the clock arbiter.

    ``millis`` is the Unix wall-clock millisecond the slot belongs to and
    ``sub_tick_offset`` the number of 100ns ticks added on top of it.
    """

    millis: int
    sub_tick_offset: int


class TimeUUIDFields(NamedTuple):
    """Logical fields of a UUID, decoded from the RFC 4122 byte layout."""

    version: int
    timestamp: int
    clock_sequence: int
    node: int
