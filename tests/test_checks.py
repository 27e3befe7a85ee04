from types import SimpleNamespace
from unittest.mock import patch

from django.test import SimpleTestCase, override_settings

from drf_timeuuid.checks import check_clock_callable, check_wall_clock_resolution


class ClockCallableCheckTests(SimpleTestCase):
    def test_default_clock_passes(self):
        self.assertEqual(check_clock_callable(None), [])

    @override_settings(DRF_TIMEUUID={"CLOCK": "tests.test_settings.fixed_clock"})
    def test_importable_clock_passes(self):
        self.assertEqual(check_clock_callable(None), [])

    @override_settings(DRF_TIMEUUID={"CLOCK": "non_existent.module.clock"})
    def test_unimportable_clock_is_an_error(self):
        errors = check_clock_callable(None)
        self.assertEqual([error.id for error in errors], ["drf_timeuuid.E001"])

    @override_settings(DRF_TIMEUUID={"CLOCK": "tests.test_settings.DEFAULTS"})
    def test_non_callable_clock_is_an_error(self):
        errors = check_clock_callable(None)
        self.assertEqual([error.id for error in errors], ["drf_timeuuid.E001"])


class WallClockResolutionCheckTests(SimpleTestCase):
    @patch("drf_timeuuid.checks.time.get_clock_info")
    def test_coarse_clock_warns(self, mock_clock_info):
        mock_clock_info.return_value = SimpleNamespace(resolution=0.015625)
        warnings = check_wall_clock_resolution(None)
        self.assertEqual([warning.id for warning in warnings], ["drf_timeuuid.W001"])

    @patch("drf_timeuuid.checks.time.get_clock_info")
    def test_fine_clock_passes(self, mock_clock_info):
        mock_clock_info.return_value = SimpleNamespace(resolution=1e-09)
        self.assertEqual(check_wall_clock_resolution(None), [])

    @override_settings(DRF_TIMEUUID={"CLOCK": "tests.test_settings.fixed_clock"})
    def test_custom_clock_is_not_inspected(self):
        with patch("drf_timeuuid.checks.time.get_clock_info") as mock_clock_info:
            self.assertEqual(check_wall_clock_resolution(None), [])
        mock_clock_info.assert_not_called()
