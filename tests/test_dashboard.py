from datetime import datetime

import pytest
from pydantic import ValidationError

from finance_insights.models.transaction import Balance, Category, Transaction
from finance_insights.utils.dashboard import (
    build_dashboard_stats,
    most_used_category,
    recent_transactions,
)

NOW = datetime(2026, 10, 14, 12, 0)

balances = [
    Balance(id="b1", name="Checking", amount=1200.0, currency="USD"),
    Balance(id="b2", name="Savings", amount=5000.0, currency="USD"),
    Balance(id="b3", name="Travel", amount=300.0, currency="EUR"),
]

food = Category(id="c1", name="Food")
rent = Category(id="c2", name="Rent")

transactions = [
    Transaction(id=f"t{day}", amount=float(day), type="expense", date=datetime(2026, 10, day), category=food)
    for day in range(1, 7)
] + [
    Transaction(id="old", amount=900.0, type="expense", date=datetime(2026, 9, 30), category=rent),
    Transaction(id="undated", amount=1.0, type="expense"),
]


def test_dashboard_stats():
    stats = build_dashboard_stats(balances, transactions, now=NOW)
    assert stats.total_accounts == 3
    assert stats.total_transactions == 8
    assert stats.currencies == ["USD", "EUR"]
    assert stats.this_month_transactions == 6
    assert stats.most_used_category == "Food"
    assert [t.id for t in stats.recent_transactions] == ["t6", "t5", "t4", "t3", "t2"]


def test_most_used_category_skips_uncategorized():
    uncategorized = [Transaction(id=str(i), amount=1.0, type="expense") for i in range(3)]
    one_rent = [Transaction(id="r", amount=1.0, type="expense", category=rent)]
    assert most_used_category(uncategorized + one_rent) == "Rent"
    assert most_used_category(uncategorized) == "Uncategorized"
    assert most_used_category([]) == "None"


def test_recent_transactions_puts_undated_last():
    recent = recent_transactions(transactions, limit=10)
    assert recent[0].id == "t6"
    assert recent[-1].id == "undated"


def test_empty_dashboard():
    stats = build_dashboard_stats([], [], now=NOW)
    assert stats.total_accounts == 0
    assert stats.currencies == []
    assert stats.most_used_category == "None"
    assert stats.recent_transactions == []


def test_recent_transactions_are_read_only():
    stats = build_dashboard_stats(balances, transactions, now=NOW)
    with pytest.raises(ValidationError):
        stats.recent_transactions[0].amount = 0.0
    assert transactions[5].amount == 6.0
