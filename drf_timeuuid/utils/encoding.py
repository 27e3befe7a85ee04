"""
Text forms of UUIDs.

Every parser in this module returns ``None`` for malformed input instead of
raising, so callers can probe untrusted strings (URL segments, cursors,
row keys) without exception handling.
"""

import base64
import binascii
import string

import uuid6

from drf_timeuuid.compat import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID


CANONICAL_LENGTH = 36
HYPHEN_POSITIONS = (8, 13, 18, 23)
BYTE_LENGTH = 16

_HEX_DIGITS = frozenset(string.hexdigits)


def try_parse_uuid(value: Optional[str]) -> Optional[uuid6.UUID]:
    """Parse the 8-4-4-4-12 hyphenated form, or return ``None``."""
    if not isinstance(value, str) or len(value) != CANONICAL_LENGTH:
        return None

    if any(value[position] != "-" for position in HYPHEN_POSITIONS):
        return None

    return try_parse_hex(value.replace("-", ""))


def try_parse_hex(value: Optional[str]) -> Optional[uuid6.UUID]:
    """Parse 32 bare hex digits, or return ``None``."""
    # int(..., 16) would also take "0x" prefixes and underscores.
    if not isinstance(value, str) or len(value) != 32:
        return None
    if not _HEX_DIGITS.issuperset(value):
        return None
    return uuid6.UUID(hex=value)


def is_uuid(value: Optional[str]) -> bool:
    return try_parse_uuid(value) is not None


def try_extract_uuid(value: Optional[str], offset: int = 0) -> Optional[uuid6.UUID]:
    """Parse the 36 characters of ``value`` starting at ``offset``."""
    if value is None or offset < 0:
        return None
    if len(value) - offset < CANONICAL_LENGTH:
        return None
    return try_parse_uuid(value[offset : offset + CANONICAL_LENGTH])


def starts_with_uuid(value: Optional[str]) -> bool:
    return try_extract_uuid(value) is not None


def to_base64(value: Optional["UUID"]) -> Optional[str]:
    """URL-safe base64 of the 16 bytes, without padding (22 characters)."""
    if value is None:
        return None
    return base64.urlsafe_b64encode(value.bytes).rstrip(b"=").decode("ascii")


def from_base64(value: Optional[str]) -> Optional[uuid6.UUID]:
    """Inverse of ``to_base64``. Padding is optional on input."""
    if not isinstance(value, str):
        return None

    stripped = value.rstrip("=")
    try:
        raw = base64.urlsafe_b64decode(stripped + "=" * (-len(stripped) % 4))
    except (binascii.Error, ValueError):
        return None

    if len(raw) != BYTE_LENGTH:
        return None
    return uuid6.UUID(bytes=raw)
