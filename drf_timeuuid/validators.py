"""
Validation logic for identifier values.

This module adapts the library's ``None``-returning parsers to Django's
validator protocol, so form, model and serializer fields can report
malformed identifiers the way Django expects.
"""

from uuid import UUID

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from drf_timeuuid.ordering import OrderingService
from drf_timeuuid.utils.encoding import try_parse_uuid


def validate_uuid_string(value):
    """
    Ensures that a string is a canonical 8-4-4-4-12 UUID.
    """
    if try_parse_uuid(value) is None:
        raise ValidationError(
            _("'%(value)s' is not a valid UUID."),
            code="invalid_uuid",
            params={"value": value},
        )


def validate_time_uuid(value):
    """
    Ensures that a value is a version 1 (time-based) UUID.

    Strings are parsed first; anything else must already be a ``UUID``.
    """
    if isinstance(value, str):
        validate_uuid_string(value)
        value = try_parse_uuid(value)

    if not isinstance(value, UUID) or not OrderingService.is_time_based(value):
        raise ValidationError(
            _("UUID must be time-based (version 1)."), code="not_time_based"
        )
