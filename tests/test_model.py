"""
Unit tests for SimpleExpenseTracker.model
(covers Transaction and ExpenseTrackerModel, including listener notification).

Run:
    python -m unittest tests.test_model
"""
import datetime
import math

from SimpleExpenseTracker.model.model import ExpenseTrackerModel, ExpenseTrackerModelListener
from SimpleExpenseTracker.model.transaction import Transaction
from SimpleExpenseTracker.status import status
from tests.base import BaseTestCase, MockListener


class TransactionTests(BaseTestCase):

    def test_fields(self):
        t = Transaction(25.0, 'Food')
        self.assertEqual(t.amount, 25.0)
        self.assertEqual(t.category, 'Food')
        self.assertIsInstance(t.timestamp, datetime.datetime)

    def test_equality_is_identity(self):
        a = Transaction(10.0, 'Transport', timestamp=datetime.datetime(2024, 1, 1))
        b = Transaction(10.0, 'Transport', timestamp=datetime.datetime(2024, 1, 1))
        self.assertEqual(a, a)
        self.assertNotEqual(a, b)
        self.assertEqual(len({a, b}), 2)

    def test_immutable(self):
        t = Transaction(25.0, 'Food')
        with self.assertRaises(AttributeError):
            t.amount = 1.0  # type: ignore[misc]

    def test_rejects_invalid_amount(self):
        for amount in (0, -1, -0.01, math.nan, math.inf, True, '10', None):
            with self.subTest(amount=amount):
                with self.assertRaises(status.TransactionInvalidException):
                    Transaction(amount, 'Food')  # type: ignore[arg-type]

    def test_rejects_invalid_category(self):
        for category in ('', '   ', None, 42):
            with self.subTest(category=category):
                with self.assertRaises(ValueError):
                    Transaction(5.0, category)  # type: ignore[arg-type]


class ModelTransactionTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.model = ExpenseTrackerModel()
        self.listener = MockListener()
        self.model.register(self.listener)

    def test_initial_state(self):
        model = ExpenseTrackerModel()
        self.assertEqual(model.get_transactions(), ())
        self.assertEqual(model.get_matched_filter_indices(), [])
        self.assertEqual(model.number_of_listeners(), 0)

    def test_add_preserves_order(self):
        food = Transaction(25.00, 'Food')
        transport = Transaction(10.00, 'Transport')
        self.model.add_transaction(food)
        self.model.add_transaction(transport)
        self.assertEqual(self.model.get_transactions(), (food, transport))

    def test_add_notifies_exactly_once(self):
        for i, amount in enumerate((0.01, 1, 25.5, 1e6), start=1):
            self.model.add_transaction(Transaction(amount, 'Food'))
            self.assertEqual(len(self.model.get_transactions()), i)
            self.assertEqual(self.listener.count, i)

    def test_add_none_raises(self):
        with self.assertRaises(status.TransactionInvalidException):
            self.model.add_transaction(None)  # type: ignore[arg-type]
        self.assertEqual(self.model.get_transactions(), ())
        self.assertEqual(self.listener.count, 0)

    def test_add_non_transaction_raises(self):
        with self.assertRaises(ValueError):
            self.model.add_transaction((25.0, 'Food'))  # type: ignore[arg-type]

    def test_get_transactions_is_read_only_copy(self):
        self.model.add_transaction(Transaction(25.0, 'Food'))
        transactions = self.model.get_transactions()
        self.assertIsInstance(transactions, tuple)
        with self.assertRaises(AttributeError):
            transactions.append(Transaction(1.0, 'Food'))  # type: ignore[attr-defined]
        self.assertEqual(len(self.model.get_transactions()), 1)

    def test_remove_first_occurrence(self):
        first = Transaction(5.0, 'Food')
        second = Transaction(7.0, 'Bills')
        third = Transaction(5.0, 'Food')
        for t in (first, second, third):
            self.model.add_transaction(t)

        self.model.remove_transaction(third)
        self.assertEqual(self.model.get_transactions(), (first, second))

        self.model.add_transaction(first)
        self.model.remove_transaction(first)
        self.assertEqual(self.model.get_transactions(), (second, first))

    def test_remove_equal_looking_transaction_is_noop(self):
        t = Transaction(5.0, 'Food')
        self.model.add_transaction(t)
        self.model.remove_transaction(Transaction(5.0, 'Food'))
        self.assertEqual(self.model.get_transactions(), (t,))

    def test_remove_missing_still_notifies(self):
        t = Transaction(25.0, 'Food')
        self.model.add_transaction(t)
        before = self.model.get_transactions()
        count = self.listener.count

        self.model.remove_transaction(Transaction(99.0, 'Travel'))

        self.assertEqual(self.model.get_transactions(), before)
        self.assertEqual(self.listener.count, count + 1)

    def test_mutations_clear_matched_indices(self):
        self.model.add_transaction(Transaction(25.0, 'Food'))
        self.model.add_transaction(Transaction(10.0, 'Transport'))

        self.model.set_matched_filter_indices([0, 1])
        other = Transaction(3.0, 'Other')
        self.model.add_transaction(other)
        self.assertEqual(self.model.get_matched_filter_indices(), [])

        self.model.set_matched_filter_indices([2])
        self.model.remove_transaction(other)
        self.assertEqual(self.model.get_matched_filter_indices(), [])


class ModelFilterIndicesTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.model = ExpenseTrackerModel()
        self.model.add_transaction(Transaction(25.0, 'Food'))
        self.model.add_transaction(Transaction(10.0, 'Transport'))
        self.listener = MockListener()
        self.model.register(self.listener)

    def test_set_and_get(self):
        self.model.set_matched_filter_indices([1, 0])
        self.assertEqual(self.model.get_matched_filter_indices(), [1, 0])
        self.assertEqual(self.listener.count, 1)

    def test_set_copies_input(self):
        indices = [0]
        self.model.set_matched_filter_indices(indices)
        indices.append(1)
        self.assertEqual(self.model.get_matched_filter_indices(), [0])

    def test_get_returns_copy(self):
        self.model.set_matched_filter_indices([0])
        self.model.get_matched_filter_indices().append(1)
        self.assertEqual(self.model.get_matched_filter_indices(), [0])

    def test_empty_list_is_valid(self):
        self.model.set_matched_filter_indices([])
        self.assertEqual(self.model.get_matched_filter_indices(), [])
        self.assertEqual(self.listener.count, 1)

    def test_rejects_none(self):
        with self.assertRaises(status.FilterIndicesInvalidException):
            self.model.set_matched_filter_indices(None)

    def test_rejects_out_of_range_and_keeps_state(self):
        self.model.set_matched_filter_indices([1])
        count = self.listener.count
        for bad in ([-1], [2], [0, 5], [0, -3]):
            with self.subTest(indices=bad):
                with self.assertRaises(ValueError):
                    self.model.set_matched_filter_indices(bad)
                self.assertEqual(self.model.get_matched_filter_indices(), [1])
                self.assertEqual(self.listener.count, count)

    def test_rejects_non_integers(self):
        for bad in ([0.0], ['0'], [True]):
            with self.subTest(indices=bad):
                with self.assertRaises(status.FilterIndicesInvalidException):
                    self.model.set_matched_filter_indices(bad)

    def test_rejects_any_index_on_empty_model(self):
        with self.assertRaises(status.FilterIndicesInvalidException):
            ExpenseTrackerModel().set_matched_filter_indices([0])


class ModelListenerTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.model = ExpenseTrackerModel()

    def test_register_once(self):
        listener = MockListener()
        self.assertTrue(self.model.register(listener))
        self.assertFalse(self.model.register(listener))
        self.assertEqual(self.model.number_of_listeners(), 1)
        self.assertTrue(self.model.contains_listener(listener))

        self.model.add_transaction(Transaction(1.0, 'Food'))
        self.assertEqual(listener.count, 1)

    def test_register_none(self):
        self.assertFalse(self.model.register(None))
        self.assertEqual(self.model.number_of_listeners(), 0)
        self.assertFalse(self.model.contains_listener(None))

    def test_register_requires_update(self):
        with self.assertRaises(TypeError):
            self.model.register(object())  # type: ignore[arg-type]

    def test_contains_unregistered(self):
        self.assertFalse(self.model.contains_listener(MockListener()))

    def test_listener_protocol(self):
        self.assertIsInstance(MockListener(), ExpenseTrackerModelListener)

    def test_notification_order_and_payload(self):
        order = []

        class Listener:
            def __init__(self, name):
                self.name = name

            def update(self, model):
                order.append((self.name, len(model.get_transactions())))

        a, b = Listener('a'), Listener('b')
        self.model.register(a)
        self.model.register(b)
        self.model.add_transaction(Transaction(1.0, 'Food'))
        self.assertEqual(order, [('a', 1), ('b', 1)])

    def test_listener_receives_model(self):
        received = []

        class Listener:
            def update(self, model):
                received.append(model)

        self.model.register(Listener())
        self.model.add_transaction(Transaction(1.0, 'Food'))
        self.assertEqual(received, [self.model])
