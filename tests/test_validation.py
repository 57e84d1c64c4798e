"""
Unit tests for SimpleExpenseTracker.controller.validation.

Run:
    python -m unittest tests.test_validation
"""
import decimal
import math
import unittest

from SimpleExpenseTracker.controller.validation import (
    InputValidation,
    is_valid_amount,
    is_valid_category,
)


class AmountValidationTests(unittest.TestCase):

    def test_positive_numbers(self):
        for amount in (0.01, 1, 25.0, 999999.99):
            with self.subTest(amount=amount):
                self.assertTrue(is_valid_amount(amount))

    def test_rejected_values(self):
        for amount in (0, 0.0, -5, decimal.Decimal('3.50'), math.nan, math.inf, -math.inf, True, False, None, '10', [1]):
            with self.subTest(amount=amount):
                self.assertFalse(is_valid_amount(amount))


class CategoryValidationTests(unittest.TestCase):

    def test_valid_categories(self):
        for category in ('Food', 'food', 'Bills & Utilities', 'Car-Rental', 'Other_2', '  Travel  '):
            with self.subTest(category=category):
                self.assertTrue(is_valid_category(category))

    def test_invalid_categories(self):
        for category in ('', '   ', '1Food', 'Food!', '#tag', None, 5, 'x' * 65):
            with self.subTest(category=category):
                self.assertFalse(is_valid_category(category))


class InputValidationTests(unittest.TestCase):

    def test_unrestricted(self):
        validation = InputValidation()
        self.assertIsNone(validation.categories)
        self.assertTrue(validation.is_valid_category('Anything'))
        self.assertTrue(validation.is_valid_amount(1))
        self.assertFalse(validation.is_valid_amount(-1))

    def test_restricted_to_known_categories(self):
        validation = InputValidation(categories=['Food', 'Transport'])
        self.assertTrue(validation.is_valid_category('Food'))
        self.assertTrue(validation.is_valid_category('transport'))
        self.assertFalse(validation.is_valid_category('Travel'))
        self.assertFalse(validation.is_valid_category('Food!'))
        self.assertEqual(validation.categories, frozenset({'Food', 'Transport'}))

    def test_canonical_category(self):
        validation = InputValidation(categories=['Food', 'Bills & Utilities'])
        self.assertEqual(validation.canonical_category('  fOOd '), 'Food')
        self.assertEqual(validation.canonical_category('bills & utilities'), 'Bills & Utilities')
        self.assertIsNone(validation.canonical_category('Travel'))
        self.assertIsNone(validation.canonical_category(None))
        self.assertEqual(InputValidation().canonical_category(' travel '), 'travel')
