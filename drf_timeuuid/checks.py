import time

from django.core.checks import Error, Warning, register
from django.core.exceptions import ImproperlyConfigured

from drf_timeuuid.settings import drf_timeuuid_settings


@register()
def check_clock_callable(app_configs, **kwargs):
    errors = []

    try:
        clock = drf_timeuuid_settings.CLOCK
    except ImproperlyConfigured as exc:
        clock = exc

    if clock is not None and not callable(clock):
        errors.append(
            Error(
                "The configured CLOCK does not resolve to a callable.",
                hint="Point CLOCK at a function returning Unix milliseconds.",
                obj="settings.DRF_TIMEUUID['CLOCK']",
                id="drf_timeuuid.E001",
            )
        )
    return errors


@register()
def check_wall_clock_resolution(app_configs, **kwargs):
    warnings = []

    try:
        custom_clock = drf_timeuuid_settings.CLOCK
    except ImproperlyConfigured:
        # Reported by check_clock_callable.
        return warnings

    if custom_clock is not None:
        return warnings

    resolution = time.get_clock_info("time").resolution
    if resolution > 0.001:
        warnings.append(
            Warning(
                f"The system clock resolution is {resolution:.6f}s.",
                hint=(
                    "Time UUID generation stalls once 1000 identifiers are "
                    "issued in one clock step; a coarse clock lowers throughput."
                ),
                id="drf_timeuuid.W001",
            )
        )
    return warnings
