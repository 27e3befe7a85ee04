"""
Tests for the canonical and compact text forms.
"""

import uuid

from django.test import SimpleTestCase

from drf_timeuuid.codec import generate_time_uuid
from drf_timeuuid.utils.encoding import (
    is_uuid,
    to_base64,
    from_base64,
    try_parse_hex,
    try_parse_uuid,
    starts_with_uuid,
    try_extract_uuid,
)


MIN_TEXT = "00000000-0000-1000-8000-000000000000"


class CanonicalFormTests(SimpleTestCase):
    def test_parse_minimum_time_uuid(self):
        value = try_parse_uuid(MIN_TEXT)
        self.assertIsNotNone(value)
        self.assertEqual(value.version, 1)

    def test_parse_is_case_insensitive(self):
        value = generate_time_uuid()
        self.assertEqual(try_parse_uuid(str(value).upper()), value)

    def test_rejects_malformed_strings(self):
        invalid_inputs = [
            MIN_TEXT[:8] + MIN_TEXT[9:],
            MIN_TEXT[:35],
            MIN_TEXT + "0",
            "0000000000001000-8000-0000-00000000",
            "0x000000-0000-1000-8000-000000000000",
            "0000_000-0000-1000-8000-000000000000",
            "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz",
            "{" + MIN_TEXT[1:-1] + "}",
            "",
            None,
            42,
        ]

        for value in invalid_inputs:
            with self.subTest(value=value):
                self.assertIsNone(try_parse_uuid(value))
                self.assertFalse(is_uuid(value))

    def test_parse_hex(self):
        value = generate_time_uuid()
        self.assertEqual(try_parse_hex(value.hex), value)
        self.assertIsNone(try_parse_hex(value.hex[:-1]))
        self.assertIsNone(try_parse_hex(str(value)))


class ExtractTests(SimpleTestCase):
    def test_starts_with_uuid(self):
        self.assertTrue(starts_with_uuid(MIN_TEXT + "/comments"))
        self.assertFalse(starts_with_uuid("users/" + MIN_TEXT))
        self.assertFalse(starts_with_uuid(MIN_TEXT[:20]))
        self.assertFalse(starts_with_uuid(None))

    def test_extract_at_offset(self):
        path = "users/" + MIN_TEXT + "/comments"
        self.assertEqual(try_extract_uuid(path, 6), uuid.UUID(MIN_TEXT))
        self.assertIsNone(try_extract_uuid(path, 5))
        self.assertIsNone(try_extract_uuid(path, len(path) - 10))
        self.assertIsNone(try_extract_uuid(path, -1))
        self.assertIsNone(try_extract_uuid(None))


class CompactFormTests(SimpleTestCase):
    def test_encoding_is_url_safe_without_padding(self):
        value = uuid.UUID(bytes=b"\xfb\xff" * 8)
        encoded = to_base64(value)

        self.assertEqual(len(encoded), 22)
        self.assertNotIn("=", encoded)
        self.assertNotIn("+", encoded)
        self.assertNotIn("/", encoded)

    def test_round_trip(self):
        value = generate_time_uuid()
        encoded = to_base64(value)
        self.assertEqual(from_base64(encoded), value)
        self.assertEqual(to_base64(from_base64(encoded)), encoded)

    def test_padded_input_is_accepted(self):
        value = generate_time_uuid()
        self.assertEqual(from_base64(to_base64(value) + "=="), value)

    def test_wrong_length_returns_none(self):
        invalid_inputs = [
            "AAAAAAAAAAAAAAAAAAAA",  # 15 bytes
            "AAAAAAAAAAAAAAAAAAAAAAAA",  # 18 bytes
            "",
            "A",
            "é" * 22,
            None,
        ]

        for value in invalid_inputs:
            with self.subTest(value=value):
                self.assertIsNone(from_base64(value))

    def test_none_encodes_to_none(self):
        self.assertIsNone(to_base64(None))
