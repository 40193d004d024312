"""Domain models for the spendview transaction engine.

All models are immutable (frozen dataclasses) so filter and aggregation
calls can share input snapshots without copying them.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from spendview.domain.errors import UnknownEnumValue


def _parse_member(enum_cls: type[Enum], value: str, enum_name: str) -> Any:
    """Look up an enum member by name or value, ignoring case."""
    needle = value.strip().lower()
    for member in enum_cls:
        if needle in (member.name.lower(), str(member.value).lower()):
            return member
    raise UnknownEnumValue(enum_name, value, allowed=[m.name for m in enum_cls])


class TransactionType(Enum):
    """Type of financial transaction."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, value: str) -> "TransactionType":
        """Parse a raw type name ("INCOME", "expense", ...).

        Raises:
            UnknownEnumValue: If the name is not INCOME or EXPENSE
        """
        return _parse_member(cls, value, "transaction type")


class Category(Enum):
    """Closed set of transaction categories.

    The value is the display label used on charts.
    """

    FOOD = "Food"
    TRANSPORT = "Transport"
    HOUSING = "Housing"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    SHOPPING = "Shopping"
    EDUCATION = "Education"
    SALARY = "Salary"
    FREELANCE = "Freelance"
    INVESTMENT = "Investment"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Parse a raw category name ("FOOD", "Food", ...).

        Raises:
            UnknownEnumValue: If the name is not a known category
        """
        return _parse_member(cls, value, "category")


class Period(Enum):
    """Named date periods accepted by the list filter."""

    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Transaction:
    """Immutable income or expense record.

    The amount is a magnitude; whether it adds to or subtracts from a
    balance is decided by ``type`` alone. ``owner`` is carried for the
    caller and never inspected here.
    """

    id: UUID
    date: date
    description: str
    amount: Decimal
    type: TransactionType
    category: Category
    owner: Any = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate transaction data."""
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    @classmethod
    def create(
        cls,
        date: date,
        description: str,
        amount: Decimal,
        type: TransactionType,
        category: Category,
        **kwargs: Any,
    ) -> "Transaction":
        """Factory method assigning a fresh identifier.

        Args:
            date: Transaction date
            description: Description of transaction
            amount: Transaction amount (non-negative)
            type: TransactionType (INCOME or EXPENSE)
            category: Category of the transaction
            **kwargs: Optional fields (owner, notes)

        Returns:
            New Transaction instance

        Example:
            >>> trans = Transaction.create(
            ...     date=date(2024, 1, 15),
            ...     description="Coffee",
            ...     amount=Decimal("4.50"),
            ...     type=TransactionType.EXPENSE,
            ...     category=Category.FOOD,
            ... )
        """
        return cls(
            id=uuid4(),
            date=date,
            description=description,
            amount=amount,
            type=type,
            category=category,
            **kwargs,
        )


@dataclass(frozen=True, slots=True)
class DateWindow:
    """Closed date interval; a ``None`` start means no lower bound."""

    start: Optional[date]
    end: date

    def contains(self, d: date) -> bool:
        """Check if a date falls within this window (inclusive)."""
        if self.start is not None and d < self.start:
            return False
        return d <= self.end


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Per-request list filter.

    Empty fields impose no constraint. ``start_date`` and ``end_date`` are
    raw YYYY-MM-DD strings and only matter when ``period`` is "custom".
    """

    search: Optional[str] = None
    type: Optional[TransactionType] = None
    category: Optional[Category] = None
    period: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not any(
            (
                self.search and self.search.strip(),
                self.type,
                self.category,
                self.period,
            )
        )
