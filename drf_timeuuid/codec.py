"""
Packing of timestamps into the RFC 4122 version 1 byte layout.

The 60-bit timestamp of a version 1 UUID is not stored contiguously::

    bytes 0-3    time_low                 (timestamp bits 0-31)
    bytes 4-5    time_mid                 (timestamp bits 32-47)
    bytes 6-7    time_hi_and_version      (timestamp bits 48-59, version 0001)
    bytes 8-9    clock_seq_hi_and_reserved, clock_seq_low (variant 10)
    bytes 10-15  node

Timestamps count 100ns ticks since the UUID epoch, 1582-10-15T00:00:00Z.
"""

import struct
import secrets
from datetime import datetime, timedelta, timezone

import uuid6

from drf_timeuuid.types import TimeUUIDFields
from drf_timeuuid.compat import Optional, TYPE_CHECKING
from drf_timeuuid.clock import get_clock_arbiter

if TYPE_CHECKING:
    from uuid import UUID
    from drf_timeuuid.clock import ClockArbiter


# Ticks between the UUID epoch and the Unix epoch.
UUID_EPOCH_OFFSET_TICKS = 0x01B21DD213814000
TICKS_PER_MILLISECOND = 10_000
TICKS_PER_MICROSECOND = 10

TIMESTAMP_MASK = (1 << 60) - 1
CLOCK_SEQUENCE_MASK = 0x3FFF
NODE_MASK = (1 << 48) - 1

VERSION_TIME_BASED = 0x1000
VARIANT_RFC_4122 = 0x8000
MULTICAST_BIT = 1 << 40

MIN_CLOCK_SEQUENCE = 0
MAX_CLOCK_SEQUENCE = CLOCK_SEQUENCE_MASK
MIN_NODE = 0
MAX_NODE = NODE_MASK
MIN_SUB_TICK_OFFSET = 0
MAX_SUB_TICK_OFFSET = TICKS_PER_MILLISECOND - 1

_LAYOUT = struct.Struct(">IHHH6s")

UUID_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc) - timedelta(
    microseconds=UUID_EPOCH_OFFSET_TICKS // TICKS_PER_MICROSECOND
)


def pack(
    millis: int, sub_tick_offset: int, clock_sequence: int, node: int
) -> uuid6.UUID:
    """
    Assemble a version 1 UUID from a Unix millisecond and auxiliary fields.

    ``sub_tick_offset`` is added to the tick count as is; offsets of 10000
    and above roll into the following millisecond. Ticks beyond 60 bits are
    truncated.
    """
    ticks = millis * TICKS_PER_MILLISECOND + UUID_EPOCH_OFFSET_TICKS + sub_tick_offset
    ticks &= TIMESTAMP_MASK

    time_low = ticks & 0xFFFFFFFF
    time_mid = (ticks >> 32) & 0xFFFF
    time_hi_and_version = (ticks >> 48) | VERSION_TIME_BASED
    clock_seq = (clock_sequence & CLOCK_SEQUENCE_MASK) | VARIANT_RFC_4122

    raw = _LAYOUT.pack(
        time_low,
        time_mid,
        time_hi_and_version,
        clock_seq,
        (node & NODE_MASK).to_bytes(6, "big"),
    )
    return uuid6.UUID(bytes=raw)


def decode_fields(value: "UUID") -> TimeUUIDFields:
    """Recombine the split timestamp and the other logical fields of ``value``."""
    time_low, time_mid, time_hi_and_version, clock_seq, node = _LAYOUT.unpack(
        value.bytes
    )
    timestamp = ((time_hi_and_version & 0x0FFF) << 48) | (time_mid << 32) | time_low
    return TimeUUIDFields(
        version=time_hi_and_version >> 12,
        timestamp=timestamp,
        clock_sequence=clock_seq & CLOCK_SEQUENCE_MASK,
        node=int.from_bytes(node, "big"),
    )


def unpack_timestamp(value: Optional["UUID"]) -> int:
    """The raw 60-bit tick count of ``value``, or 0 for ``None``."""
    if value is None:
        return 0
    return decode_fields(value).timestamp


def unpack_millis(value: Optional["UUID"]) -> int:
    """Unix milliseconds encoded in ``value``; sub-millisecond ticks are dropped."""
    if value is None:
        return 0
    return (unpack_timestamp(value) - UUID_EPOCH_OFFSET_TICKS) // TICKS_PER_MILLISECOND


def unpack_micros(value: Optional["UUID"]) -> int:
    """Unix microseconds encoded in ``value``."""
    if value is None:
        return 0
    return (unpack_timestamp(value) - UUID_EPOCH_OFFSET_TICKS) // TICKS_PER_MICROSECOND


def to_datetime(value: Optional["UUID"]) -> Optional[datetime]:
    """Aware UTC datetime of ``value``, at microsecond precision."""
    if value is None:
        return None
    ticks = unpack_timestamp(value)
    return UUID_EPOCH + timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def random_node() -> int:
    """
    48 random bits with the multicast bit set.

    RFC 4122 reserves the multicast bit to mark a node that is not a real
    IEEE 802 address.
    """
    return secrets.randbits(48) | MULTICAST_BIT


def random_clock_sequence() -> int:
    return secrets.randbits(14)


def random_sub_tick_offset() -> int:
    return secrets.randbelow(TICKS_PER_MILLISECOND)


def generate_time_uuid(
    millis: int = 0,
    sub_tick_offset: Optional[int] = None,
    *,
    arbiter: Optional["ClockArbiter"] = None,
) -> uuid6.UUID:
    """
    Generate a version 1 UUID with a random node and clock sequence.

    With ``millis == 0`` the time comes from the clock arbiter (the
    process-wide one unless ``arbiter`` is given) and the result sorts after
    every value previously issued by that arbiter. With an explicit
    ``millis`` and no offset, random sub-millisecond jitter is used.
    """
    if millis == 0:
        tick = (arbiter or get_clock_arbiter()).next_tick()
        millis, sub_tick_offset = tick.millis, tick.sub_tick_offset
    elif sub_tick_offset is None:
        sub_tick_offset = random_sub_tick_offset()

    return pack(millis, sub_tick_offset, random_clock_sequence(), random_node())


def min_boundary(millis: int) -> uuid6.UUID:
    """The smallest version 1 UUID that can exist for ``millis``."""
    return pack(millis, MIN_SUB_TICK_OFFSET, MIN_CLOCK_SEQUENCE, MIN_NODE)


def max_boundary(millis: int) -> uuid6.UUID:
    """
    The greatest version 1 UUID that can exist for ``millis``.

    Covers sub-tick offsets 0 to 9999, the whole millisecond, rather than
    stopping at 0x1FFF.
    """
    return pack(millis, MAX_SUB_TICK_OFFSET, MAX_CLOCK_SEQUENCE, MAX_NODE)


ZERO_UUID = uuid6.UUID(int=0)
MIN_TIME_UUID = uuid6.UUID("00000000-0000-1000-8000-000000000000")
MAX_TIME_UUID = uuid6.UUID("ffffffff-ffff-1fff-bfff-ffffffffffff")
