"""Unit tests for domain models."""

import pytest
from datetime import date
from decimal import Decimal
from spendview.domain.errors import UnknownEnumValue
from spendview.domain.models import (
    Category,
    DateWindow,
    FilterCriteria,
    Transaction,
    TransactionType,
)


class TestTransaction:
    """Tests for Transaction model."""

    def test_create_assigns_id(self):
        """Factory assigns a fresh identifier."""
        first = Transaction.create(
            date=date(2024, 1, 15),
            description="Coffee",
            amount=Decimal("4.50"),
            type=TransactionType.EXPENSE,
            category=Category.FOOD,
        )
        second = Transaction.create(
            date=date(2024, 1, 15),
            description="Coffee",
            amount=Decimal("4.50"),
            type=TransactionType.EXPENSE,
            category=Category.FOOD,
        )

        assert first.id != second.id
        assert first.notes is None
        assert first.owner is None

    def test_transaction_immutability(self, make_transaction):
        """Transactions are frozen."""
        trans = make_transaction(amount=Decimal("100.00"))

        with pytest.raises(AttributeError):
            trans.amount = Decimal("1.00")

    def test_negative_amount_raises_error(self):
        """Amount is a magnitude and cannot be negative."""
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Transaction.create(
                date=date(2024, 1, 15),
                description="Refund",
                amount=Decimal("-5.00"),
                type=TransactionType.EXPENSE,
                category=Category.OTHER,
            )

    def test_zero_amount_allowed(self, make_transaction):
        """Zero is a valid magnitude."""
        assert make_transaction(amount=Decimal("0")).amount == Decimal("0")


class TestEnumParsing:
    """Tests for parsing raw enum names at the boundary."""

    @pytest.mark.parametrize("raw", ["INCOME", "income", "Income", " INCOME "])
    def test_parse_transaction_type(self, raw):
        assert TransactionType.parse(raw) == TransactionType.INCOME

    def test_parse_unknown_type(self):
        with pytest.raises(UnknownEnumValue) as exc_info:
            TransactionType.parse("TRANSFER")

        assert exc_info.value.value == "TRANSFER"
        assert exc_info.value.enum_name == "transaction type"

    @pytest.mark.parametrize("raw", ["FOOD", "Food", "food"])
    def test_parse_category(self, raw):
        assert Category.parse(raw) == Category.FOOD

    def test_parse_unknown_category(self):
        with pytest.raises(UnknownEnumValue, match="Unknown category value"):
            Category.parse("Pets")

    def test_unknown_enum_value_is_value_error(self):
        """Callers catching ValueError also catch parsing failures."""
        with pytest.raises(ValueError):
            Category.parse("Pets")

    def test_category_label(self):
        assert Category.TRANSPORT.label == "Transport"


class TestDateWindow:
    """Tests for DateWindow."""

    def test_contains_is_inclusive(self):
        window = DateWindow(start=date(2024, 3, 1), end=date(2024, 3, 15))

        assert window.contains(date(2024, 3, 1))
        assert window.contains(date(2024, 3, 15))
        assert not window.contains(date(2024, 2, 29))
        assert not window.contains(date(2024, 3, 16))

    def test_unbounded_start(self):
        window = DateWindow(start=None, end=date(2024, 3, 15))

        assert window.contains(date(1990, 1, 1))
        assert not window.contains(date(2024, 3, 16))


class TestFilterCriteria:
    """Tests for FilterCriteria."""

    def test_default_is_empty(self):
        assert FilterCriteria().is_empty

    def test_blank_search_is_empty(self):
        assert FilterCriteria(search="   ").is_empty

    def test_type_is_not_empty(self):
        assert not FilterCriteria(type=TransactionType.EXPENSE).is_empty
