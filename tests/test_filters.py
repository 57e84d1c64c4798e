"""
Unit tests for SimpleExpenseTracker.controller.filters.

Run:
    python -m unittest tests.test_filters
"""
from SimpleExpenseTracker.controller.filters import AmountFilter, CategoryFilter, TransactionFilter
from SimpleExpenseTracker.model.transaction import Transaction
from tests.base import BaseTestCase


class FilterTestCase(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.transactions = [
            Transaction(25.0, 'Food'),
            Transaction(10.0, 'Transport'),
            Transaction(50.0, 'food'),
            Transaction(120.0, 'Bills'),
        ]


class AmountFilterTests(FilterTestCase):

    def test_inclusive_range(self):
        result = AmountFilter(10, 50).filter(self.transactions)
        self.assertEqual(result, self.transactions[:3])

    def test_no_match(self):
        self.assertEqual(AmountFilter(500, 1000).filter(self.transactions), [])

    def test_input_untouched(self):
        copy = list(self.transactions)
        AmountFilter(0, 20).filter(self.transactions)
        self.assertEqual(self.transactions, copy)

    def test_invalid_bounds(self):
        for bounds in ((10, 5), (-1, 5), (None, 5), (0, float('inf')), (True, 5)):
            with self.subTest(bounds=bounds):
                with self.assertRaises(ValueError):
                    AmountFilter(*bounds)


class CategoryFilterTests(FilterTestCase):

    def test_case_insensitive_match_keeps_order(self):
        result = CategoryFilter('FOOD').filter(self.transactions)
        self.assertEqual(result, [self.transactions[0], self.transactions[2]])

    def test_strips_category(self):
        self.assertEqual(CategoryFilter('  Bills ').category, 'Bills')

    def test_invalid_category(self):
        for category in ('', '!!', None):
            with self.subTest(category=category):
                with self.assertRaises(ValueError):
                    CategoryFilter(category)  # type: ignore[arg-type]

    def test_base_class_is_abstract(self):
        with self.assertRaises(TypeError):
            TransactionFilter()  # type: ignore[abstract]
