"""Validation of user-entered amounts and categories."""
import math
import numbers
import re
from typing import Any, Dict, Iterable, Optional

CATEGORY_MAX_LENGTH: int = 64

re_category = re.compile(r'[A-Za-z][A-Za-z0-9 _&-]*')


def is_valid_amount(amount: Any) -> bool:
    """Return True if `amount` is a finite real number greater than zero."""
    if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
        return False
    if not math.isfinite(amount):
        return False
    return amount > 0


def is_valid_category(category: Any) -> bool:
    """Return True if `category` is a syntactically acceptable category name.

    A category starts with a letter and holds letters, digits, spaces,
    ``-``, ``_`` or ``&``. Surrounding whitespace is ignored.
    """
    if not isinstance(category, str):
        return False
    category = category.strip()
    if not category or len(category) > CATEGORY_MAX_LENGTH:
        return False
    return bool(re_category.fullmatch(category))


class InputValidation:
    """Bundles the amount and category checks used by the controller.

    Args:
        categories: Optional allowed category names. When given, a category
            must also match one of them, ignoring case.
    """

    def __init__(self, categories: Optional[Iterable[str]] = None) -> None:
        self._categories: Optional[Dict[str, str]] = None
        if categories is not None:
            self._categories = {c.strip().lower(): c.strip() for c in categories}

    @property
    def categories(self) -> Optional[frozenset]:
        if self._categories is None:
            return None
        return frozenset(self._categories.values())

    def is_valid_amount(self, amount: Any) -> bool:
        return is_valid_amount(amount)

    def is_valid_category(self, category: Any) -> bool:
        return self.canonical_category(category) is not None

    def canonical_category(self, category: Any) -> Optional[str]:
        """Return the category name to store for `category`.

        Returns:
            The configured spelling of an allowed category, the stripped input
            when no categories are configured, or None if `category` is invalid.
        """
        if not is_valid_category(category):
            return None
        category = category.strip()
        if self._categories is None:
            return category
        return self._categories.get(category.lower())
