"""Dashboard service.

Combines the list filter, headline totals and chart bundle for one
dashboard request. Filters narrow the transaction list and the charts,
while the headline totals always cover the full history passed in.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from spendview.domain.errors import InvalidDateFormat, UnknownEnumValue
from spendview.domain.models import Category, FilterCriteria, Transaction, TransactionType
from spendview.domain.settings import AppSettings
from spendview.services.aggregation import AggregationService, TypeTotals
from spendview.services.charts import ChartBundle, ChartViewBuilder, EmptyState
from spendview.services.filtering import FilterService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DashboardView:
    """Everything a dashboard page needs for one render."""

    transactions: list[Transaction]
    totals: TypeTotals
    charts: Union[ChartBundle, EmptyState]
    criteria: FilterCriteria
    categories: tuple[Category, ...]
    transaction_count: int
    currency_symbol: str = "$"

    @property
    def has_charts(self) -> bool:
        return isinstance(self.charts, ChartBundle)

    def format_amount(self, value: Decimal) -> str:
        """Format an amount for display, e.g. "$1,234.50" or "-$20.00"."""
        sign = "-" if value < 0 else ""
        return f"{sign}{self.currency_symbol}{abs(value):,.2f}"


class DashboardService:
    """Builds dashboard views from a user's full transaction history.

    In lenient mode (``settings.filters.strict`` False) bad filter input is
    logged and dropped: an unknown type or category imposes no constraint
    and an unparseable custom date removes the date restriction.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        filter_service: Optional[FilterService] = None,
        aggregation: Optional[AggregationService] = None,
        charts: Optional[ChartViewBuilder] = None,
    ):
        self._settings = settings or AppSettings()
        self._filter_service = filter_service or FilterService()
        self._aggregation = aggregation or AggregationService()
        self._charts = charts or ChartViewBuilder(
            aggregation=self._aggregation, settings=self._settings
        )

    def build(
        self,
        transactions: list[Transaction],
        search: Optional[str] = None,
        type: Optional[str] = None,
        category: Optional[str] = None,
        period: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        today: Optional[date] = None,
    ) -> DashboardView:
        """Build a dashboard view.

        Args:
            transactions: The user's full transaction history
            search, type, category, period, start_date, end_date: Raw
                request parameters
            today: Reference date for periods and the daily chart

        Returns:
            DashboardView with filtered list, full-history totals and charts

        Raises:
            UnknownEnumValue: Bad type/category name, strict mode only
            InvalidDateFormat: Bad custom date, strict mode only
        """
        criteria = self._parse_criteria(search, type, category, period, start_date, end_date)
        filtered = self._apply_filter(transactions, criteria, today)

        return DashboardView(
            transactions=filtered,
            totals=self._aggregation.type_totals(transactions),
            charts=self._charts.build(filtered, today=today),
            criteria=criteria,
            categories=tuple(Category),
            transaction_count=len(transactions),
            currency_symbol=self._settings.charts.currency_symbol,
        )

    def _parse_criteria(
        self,
        search: Optional[str],
        type: Optional[str],
        category: Optional[str],
        period: Optional[str],
        start_date: Optional[str],
        end_date: Optional[str],
    ) -> FilterCriteria:
        if self._settings.filters.strict:
            return self._filter_service.parse_criteria(
                search, type, category, period, start_date, end_date
            )

        parsed_type = self._parse_lenient(TransactionType, type)
        parsed_category = self._parse_lenient(Category, category)
        return FilterCriteria(
            search=search or None,
            type=parsed_type,
            category=parsed_category,
            period=period or None,
            start_date=start_date or None,
            end_date=end_date or None,
        )

    def _parse_lenient(
        self,
        enum_cls: Union[type[TransactionType], type[Category]],
        value: Optional[str],
    ) -> Union[TransactionType, Category, None]:
        if not value:
            return None
        try:
            return enum_cls.parse(value)
        except UnknownEnumValue as e:
            logger.warning(f"Ignoring filter: {e}")
            return None

    def _apply_filter(
        self,
        transactions: list[Transaction],
        criteria: FilterCriteria,
        today: Optional[date],
    ) -> list[Transaction]:
        try:
            return self._filter_service.filter(transactions, criteria, today=today)
        except InvalidDateFormat as e:
            if self._settings.filters.strict:
                raise
            logger.warning(f"Ignoring date restriction: {e}")
            relaxed = FilterCriteria(
                search=criteria.search,
                type=criteria.type,
                category=criteria.category,
            )
            return self._filter_service.filter(transactions, relaxed, today=today)
