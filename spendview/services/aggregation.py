"""Aggregation service for chart and summary data.

Groups a transaction collection into category sums, type totals and
calendar buckets (month or day). All sums are Decimal. The service never
decides which set it receives; callers pass the full history for headline
totals and a filtered list for filtered views.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from spendview.domain.models import Category, Transaction, TransactionType

ONE_DECIMAL = Decimal("0.1")


@dataclass(slots=True)
class IncomeExpense:
    """Bucket accumulator with separate income and expense sums."""

    income: Decimal = field(default_factory=lambda: Decimal("0"))
    expense: Decimal = field(default_factory=lambda: Decimal("0"))

    def add(self, transaction: Transaction) -> None:
        if transaction.type == TransactionType.INCOME:
            self.income += transaction.amount
        else:
            self.expense += transaction.amount


@dataclass(frozen=True, slots=True)
class TypeTotals:
    """Income, expense and balance over a transaction set."""

    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


class AggregationService:
    """Computes category, type and calendar aggregates.

    Example:
        >>> service = AggregationService()
        >>> totals = service.type_totals(transactions)
        >>> totals.balance
        Decimal('940.00')
    """

    def category_totals(self, transactions: list[Transaction]) -> dict[Category, Decimal]:
        """Sum expense amounts per category.

        Income is not part of the category breakdown. Categories without
        expenses are omitted. Keys follow first-seen order.

        Args:
            transactions: Transactions to aggregate

        Returns:
            Mapping of category to summed expense amount
        """
        totals: dict[Category, Decimal] = {}
        for t in transactions:
            if t.type != TransactionType.EXPENSE:
                continue
            totals[t.category] = totals.get(t.category, Decimal("0")) + t.amount
        return totals

    def category_percentages(
        self, totals: dict[Category, Decimal]
    ) -> dict[Category, Decimal]:
        """Share of each category in the total, rounded to one decimal place.

        An empty or all-zero mapping yields an empty result.

        Example:
            >>> service.category_percentages({Category.FOOD: Decimal("50"),
            ...                               Category.TRANSPORT: Decimal("10")})
            {<Category.FOOD: 'Food'>: Decimal('83.3'), <Category.TRANSPORT: 'Transport'>: Decimal('16.7')}
        """
        grand_total = sum(totals.values(), Decimal("0"))
        if not grand_total:
            return {}
        return {
            category: (value / grand_total * 100).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
            for category, value in totals.items()
        }

    def type_totals(self, transactions: list[Transaction]) -> TypeTotals:
        """Sum income and expense amounts."""
        bucket = IncomeExpense()
        for t in transactions:
            bucket.add(t)
        return TypeTotals(income=bucket.income, expense=bucket.expense)

    def monthly_totals(self, transactions: list[Transaction]) -> dict[str, IncomeExpense]:
        """Group transactions into YYYY-MM buckets.

        Only months that contain a transaction produce a bucket.

        Returns:
            Buckets keyed by YYYY-MM in ascending order
        """
        buckets: dict[str, IncomeExpense] = {}
        for t in transactions:
            key = t.date.strftime("%Y-%m")
            buckets.setdefault(key, IncomeExpense()).add(t)
        return {key: buckets[key] for key in sorted(buckets)}

    def daily_totals(
        self,
        transactions: list[Transaction],
        today: Optional[date] = None,
        days: int = 30,
    ) -> dict[str, IncomeExpense]:
        """Group transactions into day buckets over a trailing window.

        The window runs from ``today - days`` to ``today`` inclusive and
        every day in it gets a bucket, even when it has no transactions.
        Transactions outside the window are ignored.

        Args:
            transactions: Transactions to aggregate
            today: Last day of the window (defaults to date.today())
            days: Number of days before today to include

        Returns:
            ``days + 1`` buckets keyed by YYYY-MM-DD in ascending order
        """
        today = today or date.today()
        first = today - timedelta(days=days)

        buckets: dict[str, IncomeExpense] = {}
        current = first
        while current <= today:
            buckets[current.isoformat()] = IncomeExpense()
            current += timedelta(days=1)

        for t in transactions:
            if first <= t.date <= today:
                buckets[t.date.isoformat()].add(t)

        return {key: buckets[key] for key in sorted(buckets)}
