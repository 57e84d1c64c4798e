"""
Unit tests for SimpleExpenseTracker.settings.locale.

Run:
    python -m unittest tests.test_locale
"""
import datetime
import unittest

from SimpleExpenseTracker.settings import locale


class LocaleTests(unittest.TestCase):

    def test_currency_from_locale(self):
        self.assertEqual(locale.get_currency_from_locale('en_US'), 'USD')
        self.assertEqual(locale.get_currency_from_locale('en_GB'), 'GBP')
        self.assertEqual(locale.get_currency_from_locale('hu_HU'), 'HUF')
        self.assertEqual(locale.get_currency_from_locale('xx_ZZ'), 'EUR')
        self.assertEqual(locale.get_currency_from_locale('en'), 'EUR')

    def test_format_currency_value(self):
        self.assertEqual(locale.format_currency_value(25.0, 'en_US'), '$25.00')
        self.assertEqual(locale.format_currency_value(1234.5, 'en_GB'), '£1,234.50')

    def test_format_currency_value_bad_locale_falls_back(self):
        self.assertEqual(locale.format_currency_value(25.0, 'not a locale'), '25.0')

    def test_format_float(self):
        self.assertEqual(locale.format_float(1234.5, 'en_US'), '1,234.5')

    def test_format_timestamp(self):
        value = datetime.datetime(2024, 3, 5, 14, 30)
        formatted = locale.format_timestamp(value, 'en_US')
        self.assertIn('3/5/24', formatted)

    def test_parse_amount(self):
        self.assertEqual(locale.parse_amount('25.00', 'en_US'), 25.0)
        self.assertEqual(locale.parse_amount(' 1,234.50 ', 'en_US'), 1234.5)
        self.assertEqual(locale.parse_amount('1234,5', 'de_DE'), 1234.5)

    def test_parse_amount_rejects_garbage(self):
        for text in ('', '   ', 'abc', None):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    locale.parse_amount(text, 'en_US')  # type: ignore[arg-type]
