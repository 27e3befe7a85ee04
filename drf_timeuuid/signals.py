"""
Signals emitted by DRF TimeUUID.

``clock_backoff_interrupted`` is sent with ``arbiter`` and ``error`` keyword
arguments when the wait that forces the wall clock past a saturated
millisecond fails. The tick is still issued afterwards unless
``RAISE_ON_CLOCK_ERROR`` is enabled.
"""

from django.dispatch import Signal


clock_backoff_interrupted = Signal()
