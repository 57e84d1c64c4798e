"""The observable expense tracker model.

This module provides:
    - ExpenseTrackerModelListener: the observer protocol notified on every mutation
    - ExpenseTrackerModel: ordered transaction list, matched filter indices and listener registry
"""
import logging
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from .transaction import Transaction
from ..status import status


@runtime_checkable
class ExpenseTrackerModelListener(Protocol):
    """Receives state change notifications from :class:`ExpenseTrackerModel`."""

    def update(self, model: 'ExpenseTrackerModel') -> None:
        ...


class ExpenseTrackerModel:
    """Holds the transactions and the matched filter indices, and notifies
    registered listeners after every mutation.

    Getters return copies and setters copy their input, so callers can never
    change the model's state behind its back.
    """

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._matched_filter_indices: List[int] = []
        self._listeners: List[ExpenseTrackerModelListener] = []

    def add_transaction(self, t: Transaction) -> None:
        """Append a transaction.

        Clears the matched filter indices, as they are positional.

        Args:
            t: The transaction to add.

        Raises:
            status.TransactionInvalidException: If `t` is None or not a Transaction.
        """
        if t is None:
            raise status.TransactionInvalidException('The new transaction must be non-null.')
        if not isinstance(t, Transaction):
            raise status.TransactionInvalidException(f'Expected a Transaction, got {type(t).__name__}.')

        self._transactions.append(t)
        self._matched_filter_indices.clear()
        logging.debug(f'Added transaction "{t}" ({len(self._transactions)} total)')
        self._state_changed()

    def remove_transaction(self, t: Transaction) -> None:
        """Remove the first occurrence of `t`.

        Listeners are notified even when `t` is not present.

        Args:
            t: The transaction to remove.
        """
        try:
            self._transactions.remove(t)
            logging.debug(f'Removed transaction "{t}" ({len(self._transactions)} left)')
        except ValueError:
            logging.debug(f'Transaction "{t}" not found, nothing removed')

        self._matched_filter_indices.clear()
        self._state_changed()

    def get_transactions(self) -> Tuple[Transaction, ...]:
        """Return a read-only copy of the transactions in insertion order."""
        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Optional[Iterable[int]]) -> None:
        """Replace the matched filter indices with a copy of `indices`.

        Nothing changes and no listener is notified when validation fails.

        Args:
            indices: Positions into the transaction list.

        Raises:
            status.FilterIndicesInvalidException: If `indices` is None, or an
                element is not an int in ``[0, len(transactions) - 1]``.
        """
        if indices is None:
            raise status.FilterIndicesInvalidException('The matched filter indices list must be non-null.')

        new_indices = list(indices)
        size = len(self._transactions)
        for index in new_indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise status.FilterIndicesInvalidException(
                    f'Each matched filter index must be an integer, got {index!r}.'
                )
            if index < 0 or index > size - 1:
                raise status.FilterIndicesInvalidException(
                    'Each matched filter index must be between 0 (inclusive) '
                    f'and the number of transactions (exclusive), got {index}.'
                )

        self._matched_filter_indices = new_indices
        logging.debug(f'Matched filter indices set to {new_indices}')
        self._state_changed()

    def get_matched_filter_indices(self) -> List[int]:
        """Return a copy of the matched filter indices."""
        return list(self._matched_filter_indices)

    def register(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Register a listener for state change notifications.

        Args:
            listener: An object with an ``update(model)`` method.

        Returns:
            bool: True if the listener is non-null and was not registered yet.

        Raises:
            TypeError: If the listener has no callable ``update`` attribute.
        """
        if listener is None:
            return False
        if not callable(getattr(listener, 'update', None)):
            raise TypeError(f'Listener {listener!r} must implement update(model).')
        if listener in self._listeners:
            return False

        self._listeners.append(listener)
        logging.debug(f'Registered listener {listener!r}')
        return True

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        return listener in self._listeners

    def _state_changed(self) -> None:
        """Notify every listener in registration order."""
        for listener in self._listeners:
            listener.update(self)
