"""
Django REST framework integration.

Provides a serializer field that accepts every text form the library
produces and renders identifiers in the configured representation.
"""

from uuid import UUID

from rest_framework import serializers
from django.utils.translation import gettext_lazy as _

from drf_timeuuid.compat import Any, Optional
from drf_timeuuid.ordering import OrderingService
from drf_timeuuid.choices import UUID_REPRESENTATION
from drf_timeuuid.settings import drf_timeuuid_settings
from drf_timeuuid.utils.encoding import (
    to_base64,
    from_base64,
    try_parse_hex,
    try_parse_uuid,
)


class TimeUUIDSerializerField(serializers.Field):
    """
    Serializer field for time UUIDs.

    Input may be canonical (8-4-4-4-12), compact (URL-safe base64) or bare
    hex. Output follows ``representation``, falling back to the
    ``REPRESENTATION`` setting.
    """

    default_error_messages = {
        "invalid": _("Must be a valid UUID."),
        "not_time_based": _("UUID must be time-based (version 1)."),
    }

    def __init__(
        self,
        representation: Optional[str] = None,
        allow_non_time_based: Optional[bool] = None,
        **kwargs,
    ):
        if representation not in (None, *UUID_REPRESENTATION.values):
            raise ValueError(f"Unsupported representation '{representation}'.")
        self.representation = representation
        self.allow_non_time_based = allow_non_time_based
        super().__init__(**kwargs)

    def get_representation(self) -> str:
        return self.representation or drf_timeuuid_settings.REPRESENTATION

    def get_allow_non_time_based(self) -> bool:
        if self.allow_non_time_based is not None:
            return self.allow_non_time_based
        return drf_timeuuid_settings.ALLOW_NON_TIME_BASED

    def to_internal_value(self, data: Any) -> UUID:
        value = None
        if isinstance(data, UUID):
            value = data
        elif isinstance(data, str):
            data = data.strip()
            value = try_parse_uuid(data) or try_parse_hex(data) or from_base64(data)

        if value is None:
            self.fail("invalid")

        if not self.get_allow_non_time_based() and not OrderingService.is_time_based(
            value
        ):
            self.fail("not_time_based")

        return value

    def to_representation(self, value: UUID) -> str:
        representation = self.get_representation()

        if representation == UUID_REPRESENTATION.COMPACT:
            return to_base64(value)
        if representation == UUID_REPRESENTATION.HEX:
            return value.hex
        return str(value)
