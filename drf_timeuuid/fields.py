"""
Model field for time-based row keys.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from drf_timeuuid.validators import validate_time_uuid
from drf_timeuuid.utils.generators import generate_row_key


class TimeUUIDField(models.UUIDField):
    """
    A ``UUIDField`` defaulting to a freshly generated time UUID.

    Values are validated to be version 1. Note that databases compare UUID
    columns byte by byte, which is not creation order; sort fetched rows
    with ``OrderingService`` instead of ``ORDER BY`` on this column.
    """

    description = _("Time-based UUID")
    default_validators = [validate_time_uuid]

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("default", generate_row_key)
        kwargs.setdefault("editable", False)
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()

        # Keep migrations free of the implicit defaults set in __init__.
        if kwargs.get("default") is generate_row_key:
            del kwargs["default"]
        if self.editable:
            kwargs["editable"] = True
        else:
            kwargs.pop("editable", None)

        return name, path, args, kwargs
