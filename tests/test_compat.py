import sys

from django.test import SimpleTestCase

from drf_timeuuid import compat as timeuuid_typing


class TypingCompatibilityTests(SimpleTestCase):
    def test_expected_types_are_exported(self):
        """Ensure all required types are present in the __all__ declaration."""
        expected_exports = {
            "Any",
            "List",
            "Self",
            "Callable",
            "Iterable",
            "Optional",
            "NamedTuple",
            "TYPE_CHECKING",
        }

        self.assertEqual(set(timeuuid_typing.__all__), expected_exports)

        for name in expected_exports:
            with self.subTest(type_name=name):
                self.assertTrue(hasattr(timeuuid_typing, name))

    def test_self_type_resolution(self):
        """Verify Self is imported from the correct source based on Python version."""
        if sys.version_info >= (3, 11):
            import typing

            self.assertIs(timeuuid_typing.Self, typing.Self)
        else:
            from typing_extensions import Self as TE_Self

            self.assertIs(timeuuid_typing.Self, TE_Self)
