"""
Constants for the textual representation of identifiers.

This module defines the formats a time UUID may be rendered in when it
leaves the process, e.g. in API payloads or pagination cursors.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class UUID_REPRESENTATION(models.TextChoices):
    """
    Supported output formats for serialized identifiers.

    Attributes:
        CANONICAL: 36-character hyphenated hex (8-4-4-4-12).
        COMPACT: 22-character URL-safe base64 without padding.
        HEX: 32-character hex without hyphens.
    """

    CANONICAL = "canonical", _("Canonical")
    COMPACT = "compact", _("Compact")
    HEX = "hex", _("Hex")
