"""Pytest fixtures and configuration."""

import pytest
from datetime import date
from decimal import Decimal
from spendview.domain.models import Category, Transaction, TransactionType


@pytest.fixture
def today():
    """Fixed reference date used by date-sensitive tests."""
    return date(2024, 3, 15)


@pytest.fixture
def make_transaction():
    """Factory fixture for creating test transactions."""

    def _make(**kwargs):
        defaults = {
            "date": date(2024, 3, 15),
            "description": "Test Transaction",
            "amount": Decimal("100.00"),
            "type": TransactionType.EXPENSE,
            "category": Category.OTHER,
        }
        defaults.update(kwargs)
        return Transaction.create(**defaults)

    return _make


@pytest.fixture
def sample_transactions(make_transaction):
    """Two food expenses, one transport expense and a salary."""
    return [
        make_transaction(
            description="Groceries",
            amount=Decimal("30.00"),
            category=Category.FOOD,
            date=date(2024, 3, 2),
        ),
        make_transaction(
            description="Lunch with team",
            amount=Decimal("20.00"),
            category=Category.FOOD,
            date=date(2024, 2, 20),
        ),
        make_transaction(
            description="Bus pass",
            amount=Decimal("10.00"),
            category=Category.TRANSPORT,
            date=date(2024, 3, 10),
        ),
        make_transaction(
            description="Monthly salary",
            amount=Decimal("1000.00"),
            type=TransactionType.INCOME,
            category=Category.SALARY,
            date=date(2024, 2, 28),
        ),
    ]
