import uuid6

from django.test import SimpleTestCase

from drf_timeuuid.ordering import OrderingService
from drf_timeuuid.utils.generators import generate_row_key


class RowKeyGeneratorTest(SimpleTestCase):
    def test_returns_correct_uuid_type(self):
        """Ensure the generated key is a valid uuid6.UUID instance."""
        row_key = generate_row_key()
        self.assertIsInstance(row_key, uuid6.UUID)
        self.assertEqual(row_key.version, 1)

    def test_keys_are_unique(self):
        """Ensure subsequent calls do not produce the same identifier."""
        key_one = generate_row_key()
        key_two = generate_row_key()
        self.assertNotEqual(key_one, key_two)

    def test_keys_are_chronologically_ordered(self):
        """Later keys sort after earlier keys under the chronological comparator."""
        key_early = generate_row_key()
        key_later = generate_row_key()

        # Raw byte order is not creation order for version 1 UUIDs.
        self.assertEqual(OrderingService.compare(key_early, key_later), -1)
