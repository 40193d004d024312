"""Chart view builder.

Maps aggregation output to labelled, ordered series ready for a rendering
layer. The builder keeps no state between calls; replacing a previously
drawn chart is the renderer's job.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Union

from spendview.domain.models import Transaction
from spendview.domain.settings import AppSettings
from spendview.services.aggregation import AggregationService, IncomeExpense

MONTH_ABBREVIATIONS = (
    "", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

INCOME_COLOR = "#28a745"
EXPENSE_COLOR = "#dc3545"
BALANCE_COLOR = "#667eea"

CHART_SURFACES = ("category", "income_expense", "monthly", "daily")


@dataclass(frozen=True, slots=True)
class CategorySeries:
    """Expense breakdown by category (doughnut)."""

    labels: tuple[str, ...]
    values: tuple[Decimal, ...]
    colors: tuple[str, ...]
    percentages: tuple[Decimal, ...]


@dataclass(frozen=True, slots=True)
class TotalsSeries:
    """Income, expenses and balance (bar)."""

    labels: tuple[str, ...]
    values: tuple[Decimal, ...]
    colors: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TrendSeries:
    """Income and expense per calendar bucket, aligned by index."""

    keys: tuple[str, ...]
    labels: tuple[str, ...]
    income: tuple[Decimal, ...]
    expense: tuple[Decimal, ...]

    def __len__(self) -> int:
        return len(self.keys)


@dataclass(frozen=True, slots=True)
class ChartBundle:
    """The four chart series for one render."""

    category: CategorySeries
    income_expense: TotalsSeries
    monthly: TrendSeries
    daily: TrendSeries


@dataclass(frozen=True, slots=True)
class EmptyState:
    """Marker telling the renderer to show a placeholder on every surface."""

    message: str = "No data available. Add transactions to see charts."
    surfaces: tuple[str, ...] = CHART_SURFACES


def month_label(key: str) -> str:
    """Format a YYYY-MM key as "Mon YYYY"."""
    year, month = key.split("-")
    return f"{MONTH_ABBREVIATIONS[int(month)]} {year}"


def day_label(key: str) -> str:
    """Format a YYYY-MM-DD key as "Mon D"."""
    day = date.fromisoformat(key)
    return f"{MONTH_ABBREVIATIONS[day.month]} {day.day}"


class ChartViewBuilder:
    """Builds chart bundles from transactions.

    Example:
        >>> builder = ChartViewBuilder()
        >>> bundle = builder.build(transactions)
        >>> bundle.income_expense.labels
        ('Income', 'Expenses', 'Balance')
    """

    def __init__(
        self,
        aggregation: Optional[AggregationService] = None,
        settings: Optional[AppSettings] = None,
    ):
        self._aggregation = aggregation or AggregationService()
        self._settings = settings or AppSettings()

    def build(
        self,
        transactions: Optional[list[Transaction]],
        today: Optional[date] = None,
    ) -> Union[ChartBundle, EmptyState]:
        """Build all chart series.

        Args:
            transactions: Transactions to chart (None is treated as empty)
            today: Last day of the daily window (defaults to date.today())

        Returns:
            ChartBundle, or EmptyState when there is nothing to chart
        """
        if not transactions:
            return EmptyState()

        # Chart settings are read on every build
        chart_settings = self._settings.charts
        return ChartBundle(
            category=self._category_series(transactions, chart_settings.palette),
            income_expense=self._totals_series(transactions),
            monthly=self._trend_series(
                self._aggregation.monthly_totals(transactions), month_label
            ),
            daily=self._trend_series(
                self._aggregation.daily_totals(
                    transactions, today=today, days=chart_settings.daily_window_days
                ),
                day_label,
            ),
        )

    def _category_series(
        self, transactions: list[Transaction], palette: list[str]
    ) -> CategorySeries:
        totals = self._aggregation.category_totals(transactions)
        percentages = self._aggregation.category_percentages(totals)
        categories = list(totals)
        return CategorySeries(
            labels=tuple(c.label for c in categories),
            values=tuple(totals[c] for c in categories),
            colors=tuple(palette[i % len(palette)] for i in range(len(categories))),
            percentages=tuple(percentages.get(c, Decimal("0")) for c in categories),
        )

    def _totals_series(self, transactions: list[Transaction]) -> TotalsSeries:
        totals = self._aggregation.type_totals(transactions)
        return TotalsSeries(
            labels=("Income", "Expenses", "Balance"),
            values=(totals.income, totals.expense, totals.balance),
            colors=(INCOME_COLOR, EXPENSE_COLOR, BALANCE_COLOR),
        )

    def _trend_series(
        self, buckets: dict[str, IncomeExpense], format_label: Callable[[str], str]
    ) -> TrendSeries:
        keys = tuple(buckets)
        return TrendSeries(
            keys=keys,
            labels=tuple(format_label(k) for k in keys),
            income=tuple(buckets[k].income for k in keys),
            expense=tuple(buckets[k].expense for k in keys),
        )
