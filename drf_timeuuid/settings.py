"""
Configuration management for DRF TimeUUID.

This module handles the loading, validation, and caching of library settings.
It enforces logical constraints (e.g., backoff bounds) and reloads itself
whenever Django's ``DRF_TIMEUUID`` setting changes.
"""

from datetime import timedelta

from django.conf import settings
from django.test.signals import setting_changed
from django.utils.module_loading import import_string
from django.utils.translation import gettext_lazy as _
from django.core.exceptions import ImproperlyConfigured

from drf_timeuuid.choices import UUID_REPRESENTATION


DEFAULTS = {
    # Clock Arbiter
    "CLOCK": None,
    "BACKOFF_INTERVAL": timedelta(milliseconds=1),
    "RELEASE_LOCK_DURING_BACKOFF": False,
    "RAISE_ON_CLOCK_ERROR": False,
    # Serialization
    "REPRESENTATION": UUID_REPRESENTATION.CANONICAL,
    "ALLOW_NON_TIME_BASED": False,
}

IMPORT_STRINGS = ("CLOCK",)

REMOVED_SETTINGS = ()

MAX_BACKOFF_INTERVAL = timedelta(seconds=1)

TYPE_VALIDATORS = {
    "BACKOFF_INTERVAL": timedelta,
    "RELEASE_LOCK_DURING_BACKOFF": bool,
    "RAISE_ON_CLOCK_ERROR": bool,
    "REPRESENTATION": str,
    "ALLOW_NON_TIME_BASED": bool,
}


class DRFTimeUUIDSettings:
    """
    Lazy settings container for DRF TimeUUID.
    """

    __slots__ = ("_user_settings", "_cache")

    def __init__(self, user_settings=None):
        self._user_settings = user_settings or {}
        self._cache = {}
        self._validate_all()

    def _get_setting(self, setting_name: str):
        return self._user_settings.get(setting_name, DEFAULTS[setting_name])

    def __getattr__(self, setting_name: str):
        if setting_name not in DEFAULTS:
            if setting_name in REMOVED_SETTINGS:
                raise AttributeError(_(f"'{setting_name}' has been removed."))
            raise AttributeError(_(f"Invalid setting: '{setting_name}'."))

        if setting_name in self._cache:
            return self._cache[setting_name]

        value = self._get_setting(setting_name)

        if setting_name in IMPORT_STRINGS and isinstance(value, str):
            value = self._import_from_string(setting_name, value)

        self._cache[setting_name] = value
        return value

    def _import_from_string(self, setting_name: str, path: str):
        try:
            return import_string(path)
        except ImportError as exc:
            raise ImproperlyConfigured(
                _(f"Could not import '{path}' for '{setting_name}'.")
            ) from exc

    def _validate_all(self):
        self._validate_removed_settings()
        self._validate_primitive_types()
        self._validate_business_logic()

    def _validate_removed_settings(self):
        for setting_name in REMOVED_SETTINGS:
            if setting_name in self._user_settings:
                raise ImproperlyConfigured(
                    _(f"'{setting_name}' is no longer supported.")
                )

    def _validate_primitive_types(self):
        for setting_name, expected_types in TYPE_VALIDATORS.items():
            value = self._get_setting(setting_name)
            if not isinstance(value, expected_types):
                raise ImproperlyConfigured(_(f"'{setting_name}' has invalid type."))

    def _validate_business_logic(self):
        self._validate_backoff_interval()
        self._validate_representation()
        self._validate_clock()

    def _validate_backoff_interval(self):
        interval = self._get_setting("BACKOFF_INTERVAL")

        if interval <= timedelta(0):
            raise ImproperlyConfigured(_("BACKOFF_INTERVAL must be positive."))

        if interval > MAX_BACKOFF_INTERVAL:
            raise ImproperlyConfigured(
                _("BACKOFF_INTERVAL must not exceed one second.")
            )

    def _validate_representation(self):
        representation = self._get_setting("REPRESENTATION")
        if representation not in UUID_REPRESENTATION.values:
            raise ImproperlyConfigured(
                _(f"'{representation}' is not a supported REPRESENTATION.")
            )

    def _validate_clock(self):
        clock = self._get_setting("CLOCK")
        if clock is None or isinstance(clock, str):
            # Dotted paths are resolved lazily on first access.
            return
        if not callable(clock):
            raise ImproperlyConfigured(_("CLOCK must be a callable."))

    def reload(self, new_user_settings=None):
        self._user_settings = new_user_settings or {}
        self._cache.clear()
        self._validate_all()


drf_timeuuid_settings = DRFTimeUUIDSettings(getattr(settings, "DRF_TIMEUUID", None))


def reload_drf_timeuuid_settings(*args, **kwargs):
    if kwargs.get("setting") == "DRF_TIMEUUID":
        drf_timeuuid_settings.reload(kwargs.get("value"))


setting_changed.connect(reload_drf_timeuuid_settings)
