"""
Exceptions raised by DRF TimeUUID.

Malformed input is never reported through an exception; the text helpers
return ``None`` instead. The classes here cover internal clock anomalies,
which are only raised when ``RAISE_ON_CLOCK_ERROR`` is enabled.
"""


class TimeUUIDError(Exception):
    """Base class for all library errors."""


class ClockBackoffError(TimeUUIDError):
    """The clock arbiter's backoff wait was interrupted."""
