"""Filter service for narrowing a transaction list.

Predicates are applied conjunctively (AND) and the relative order of the
surviving transactions is preserved. Inputs are never mutated.
"""

from datetime import date
from typing import Callable, Optional

from spendview.domain.models import (
    Category,
    FilterCriteria,
    Transaction,
    TransactionType,
)
from spendview.services.period import PeriodResolver


class FilterService:
    """Service for filtering transactions by list criteria.

    Features:
    - Case-insensitive description search
    - Exact type and category match
    - Named or custom date periods (see PeriodResolver)

    Example:
        >>> service = FilterService()
        >>> criteria = service.parse_criteria(type="EXPENSE", period="this_month")
        >>> results = service.filter(transactions, criteria)
    """

    def __init__(self, resolver: Optional[PeriodResolver] = None):
        self._resolver = resolver or PeriodResolver()

    def parse_criteria(
        self,
        search: Optional[str] = None,
        type: Optional[str] = None,
        category: Optional[str] = None,
        period: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> FilterCriteria:
        """Build criteria from raw request parameters.

        Empty strings are treated as absent.

        Raises:
            UnknownEnumValue: If type or category is not a known name
        """
        return FilterCriteria(
            search=search or None,
            type=TransactionType.parse(type) if type else None,
            category=Category.parse(category) if category else None,
            period=period or None,
            start_date=start_date or None,
            end_date=end_date or None,
        )

    def filter(
        self,
        transactions: list[Transaction],
        criteria: FilterCriteria,
        today: Optional[date] = None,
    ) -> list[Transaction]:
        """Filter transactions by criteria.

        Args:
            transactions: Transactions to filter
            criteria: Filter criteria
            today: Reference date for period keywords

        Returns:
            New list of matching transactions, in input order

        Raises:
            InvalidDateFormat: If a custom period date cannot be parsed
        """
        predicates = self._compile(criteria, today)
        if not predicates:
            return list(transactions)
        return [t for t in transactions if all(p(t) for p in predicates)]

    def _compile(
        self, criteria: FilterCriteria, today: Optional[date]
    ) -> list[Callable[[Transaction], bool]]:
        """Translate criteria into a list of transaction predicates."""
        predicates: list[Callable[[Transaction], bool]] = []

        if criteria.search and criteria.search.strip():
            needle = criteria.search.lower()
            predicates.append(lambda t: needle in t.description.lower())

        if criteria.type is not None:
            wanted_type = criteria.type
            predicates.append(lambda t: t.type == wanted_type)

        if criteria.category is not None:
            wanted_category = criteria.category
            predicates.append(lambda t: t.category == wanted_category)

        window = self._resolver.resolve(
            criteria.period, criteria.start_date, criteria.end_date, today=today
        )
        if window is not None:
            predicates.append(lambda t: window.contains(t.date))

        return predicates
