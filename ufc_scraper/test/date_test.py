import sys
import os
import unittest
from unittest.mock import patch

# Add project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pendulum

from ufc_scraper.utils import default_event_date, parse_epoch, parse_event_date

NOW = pendulum.datetime(2024, 11, 1, 12, 0, 0, tz='UTC')


class TestParseEventDate(unittest.TestCase):

    def test_timestamp_wins_over_text(self):
        expected_utc = pendulum.datetime(2024, 12, 8, tz='UTC')
        self.assertEqual(expected_utc, parse_event_date("January 18, 2025", timestamp=1733616000))
        self.assertEqual(expected_utc, parse_event_date("January 18, 2025", timestamp="1733616000"))

    def test_timestamp_alone(self):
        self.assertEqual(pendulum.datetime(2024, 12, 8, 1, 0, 0, tz='UTC'), parse_event_date(timestamp=1733619600))

    def test_non_numeric_timestamp_falls_back_to_text(self):
        parsed = parse_event_date("2025-01-18", timestamp="soon")
        self.assertEqual(pendulum.datetime(2025, 1, 18, tz='UTC'), parsed)

    def test_standard_date_formats(self):
        expected_utc = pendulum.datetime(2025, 1, 18, tz='UTC')
        self.assertEqual(expected_utc, parse_event_date("2025-01-18"))
        self.assertEqual(expected_utc, parse_event_date("01/18/2025"))
        self.assertEqual(expected_utc, parse_event_date("January 18, 2025"))

    def test_iso_datetime_attribute(self):
        self.assertEqual(
            pendulum.datetime(2025, 2, 8, 22, 0, 0, tz='UTC'),
            parse_event_date("2025-02-08T22:00:00Z")
        )

    def test_date_embedded_in_noise_uses_format_list(self):
        parsed = parse_event_date("Main card: December 07, 2024")
        self.assertEqual((2024, 12, 7), (parsed.year, parsed.month, parsed.day))

    def test_unparseable_text_defaults_to_thirty_days_out(self):
        self.assertEqual(NOW.add(days=30), parse_event_date("TBA", now=NOW))

    def test_partial_dates_default_to_thirty_days_out(self):
        for text in ("5", "Saturday", "Sat, Dec 7", "Sat, Dec 7 / 10:00 PM EST / Main Card", "December 2024"):
            with self.subTest(text=text):
                self.assertEqual(pendulum.datetime(2024, 12, 1, 12, 0, 0, tz='UTC'), parse_event_date(text, now=NOW))

    def test_empty_text_defaults_to_thirty_days_out(self):
        self.assertEqual(NOW.add(days=30), parse_event_date("", now=NOW))
        self.assertEqual(NOW.add(days=30), parse_event_date(None, now=NOW))
        self.assertEqual(NOW.add(days=30), parse_event_date("   ", now=NOW))

    def test_default_uses_current_time(self):
        with patch('pendulum.now', return_value=NOW):
            self.assertEqual(NOW.add(days=30), parse_event_date("TBA"))

    def test_default_offset_is_configurable(self):
        self.assertEqual(NOW.add(days=7), parse_event_date("TBA", now=NOW, default_days=7))


class TestParseEpoch(unittest.TestCase):

    def test_invalid_values(self):
        self.assertIsNone(parse_epoch(None))
        self.assertIsNone(parse_epoch(""))
        self.assertIsNone(parse_epoch("12.5"))
        self.assertIsNone(parse_epoch(True))
        self.assertIsNone(parse_epoch(10 ** 20))

    def test_whitespace_is_ignored(self):
        self.assertEqual(pendulum.datetime(2024, 12, 8, tz='UTC'), parse_epoch(" 1733616000 "))


class TestDefaultEventDate(unittest.TestCase):

    def test_naive_now_is_treated_as_utc(self):
        from datetime import datetime
        self.assertEqual(pendulum.datetime(2024, 12, 1, tz='UTC'), default_event_date(datetime(2024, 11, 1)))


if __name__ == '__main__':
    unittest.main(argv=['first-arg-is-ignored'], exit=False)
