"""Transaction filters applied by the controller.

This module provides:
    - TransactionFilter: base class of all filters
    - AmountFilter: keeps transactions within an inclusive amount range
    - CategoryFilter: keeps transactions of a single category
"""
import abc
import math
import numbers
from typing import List, Sequence

from . import validation
from ..model.transaction import Transaction


class TransactionFilter(abc.ABC):
    """Narrows a transaction sequence to the matching transactions.

    Implementations must preserve order and never modify their input.
    """

    @abc.abstractmethod
    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        ...


class AmountFilter(TransactionFilter):
    """Keeps transactions whose amount lies in ``[min_amount, max_amount]``.

    Raises:
        ValueError: If a bound is not a non-negative number, or min_amount > max_amount.
    """

    def __init__(self, min_amount: float, max_amount: float) -> None:
        for name, value in (('min_amount', min_amount), ('max_amount', max_amount)):
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise ValueError(f'{name} must be a number, got {value!r}.')
            if value < 0:
                raise ValueError(f'{name} must not be negative, got {value!r}.')
        if min_amount > max_amount:
            raise ValueError(f'min_amount ({min_amount}) must not exceed max_amount ({max_amount}).')

        self.min_amount = min_amount
        self.max_amount = max_amount

    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        return [t for t in transactions if self.min_amount <= t.amount <= self.max_amount]

    def __repr__(self) -> str:
        return f'AmountFilter({self.min_amount!r}, {self.max_amount!r})'


class CategoryFilter(TransactionFilter):
    """Keeps transactions of the given category, ignoring case.

    Raises:
        ValueError: If the category is not a valid category name.
    """

    def __init__(self, category: str) -> None:
        if not validation.is_valid_category(category):
            raise ValueError(f'Invalid category: {category!r}.')
        self.category = category.strip()

    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        category = self.category.lower()
        return [t for t in transactions if t.category.strip().lower() == category]

    def __repr__(self) -> str:
        return f'CategoryFilter({self.category!r})'
