"""Period resolver.

Turns a named period keyword (or a custom start/end pair) into a concrete
closed date window for the list filter.
"""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from spendview.domain.errors import InvalidDateFormat
from spendview.domain.models import DateWindow, Period

logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(value: str) -> date:
    """Parse a YYYY-MM-DD string.

    Raises:
        InvalidDateFormat: If the string is not a valid calendar date
    """
    try:
        text = value.strip()
        if not ISO_DATE_PATTERN.fullmatch(text):
            raise ValueError(text)
        return datetime.strptime(text, "%Y-%m-%d").date()
    except (TypeError, AttributeError, ValueError):
        raise InvalidDateFormat(value) from None


class PeriodResolver:
    """Resolves period keywords to date windows.

    Supported keywords:
        today       - [today, today]
        this_week   - [Monday on or before today, today]
        this_month  - [first of the month, today]
        last_month  - [first, last] of the previous calendar month
        custom      - [start or unbounded, end or today]

    Any other keyword, including None, means no date restriction.
    """

    def resolve(
        self,
        period: Optional[str],
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Optional[DateWindow]:
        """Resolve a period keyword to a date window.

        Args:
            period: Period keyword
            start_date: Custom start (YYYY-MM-DD), only used for "custom"
            end_date: Custom end (YYYY-MM-DD), only used for "custom"
            today: Reference date (defaults to date.today())

        Returns:
            DateWindow, or None for no date restriction

        Raises:
            InvalidDateFormat: If a custom date cannot be parsed

        Example:
            >>> resolver = PeriodResolver()
            >>> resolver.resolve("last_month", today=date(2024, 3, 15))
            DateWindow(start=datetime.date(2024, 2, 1), end=datetime.date(2024, 2, 29))
        """
        if not period:
            return None

        try:
            keyword = Period(period)
        except ValueError:
            logger.debug(f"Ignoring unknown period keyword {period!r}")
            return None

        today = today or date.today()

        if keyword == Period.TODAY:
            return DateWindow(start=today, end=today)

        if keyword == Period.THIS_WEEK:
            monday = today - timedelta(days=today.weekday())
            return DateWindow(start=monday, end=today)

        if keyword == Period.THIS_MONTH:
            return DateWindow(start=today.replace(day=1), end=today)

        if keyword == Period.LAST_MONTH:
            first_of_this_month = today.replace(day=1)
            start = first_of_this_month - relativedelta(months=1)
            end = first_of_this_month - timedelta(days=1)
            return DateWindow(start=start, end=end)

        # Custom: end defaults to today, not unbounded
        start = parse_iso_date(start_date) if start_date else None
        end = parse_iso_date(end_date) if end_date else today
        return DateWindow(start=start, end=end)
