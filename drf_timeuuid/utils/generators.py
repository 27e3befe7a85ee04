"""Utility functions for generating identifiers used as database defaults.

Functions in this module are wrapped to provide a stable interface for
database defaults, allowing logic changes (e.g., switching arbiters)
without triggering schema migrations.
"""

import uuid6

from drf_timeuuid.codec import generate_time_uuid


def generate_row_key() -> uuid6.UUID:
    """Generates a time-ordered UUID v1 for primary keys and row keys.

    Wrapped in a function to allow future logic updates without
    modifying database migration files.
    """
    return generate_time_uuid()
