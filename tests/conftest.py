from __future__ import annotations

from datetime import date

import pytest

from config import default_categories
from models import CashbackCategory, CashbackSummary, CategoryCashback, RewardsLedger, Transaction


@pytest.fixture(autouse=True)
def _isolated_app_dir(tmp_path, monkeypatch):
    """Keep app_dir() (settings, categories, logs) out of the real home directory."""
    monkeypatch.setenv("CASHBACK_REWARDS_HOME", str(tmp_path / "home"))


@pytest.fixture
def ledger() -> RewardsLedger:
    txns = [
        Transaction("t1", "2024-03-05", 100.0, "expense_food", cashback_earned=3.0),
        Transaction("t2", "2024-03-10", 200.0, "expense_shopping", cashback_earned=10.0),
        Transaction("t3", "2024-03-12", 50.0, "expense_transport"),
        Transaction("t4", "2024-03-15", 100.0, "expense_groceries"),
        Transaction("t5", "2024-03-20", 1000.0, "expense_shopping", type="income"),
        Transaction("t6", "2024-02-01", 40.0, "expense_food", cashback_earned=1.2),
        Transaction("t7", "2024-03-22", 10.0, "ghost", cashback_earned=0.5),
    ]
    return RewardsLedger(categories=default_categories(), transactions=txns)


class FakeData:
    def __init__(self, total_all_time=0.0, categories=None):
        self.total_all_time = total_all_time
        self.categories = categories or []
        self.calls = []

    def get_total_cashback_all_time(self):
        self.calls.append("total_all_time")
        return self.total_all_time

    def get_cashback_categories(self):
        self.calls.append("categories")
        return list(self.categories)


class FakeAnalytics:
    def __init__(self, total=0.0, potential=0.0, entries=()):
        self.total = total
        self.potential = potential
        self.entries = tuple(entries)
        self.months = []

    def get_cashback_summary(self, month):
        self.months.append(("summary", month))
        return CashbackSummary(total_cashback=self.total, category_cashback=self.entries, month=month)

    def get_potential_cashback(self, month):
        self.months.append(("potential", month))
        return self.potential

    def get_cashback_trend(self, year):
        return []


@pytest.fixture
def food() -> CashbackCategory:
    return CashbackCategory("food", "Food & Dining", "🍽️", 0xFFFF6B6B, True, 0.03)


@pytest.fixture
def shopping() -> CashbackCategory:
    return CashbackCategory("shop", "Shopping", "🛍️", 0xFFFFA94D, True, 0.05)


@pytest.fixture
def make_providers(food, shopping):
    def _make(total_all_time=128.40, total=12.0, potential=20.0, entries=None):
        if entries is None:
            entries = (
                CategoryCashback(shopping, 8.0, 66.6666),
                CategoryCashback(food, 4.0, 33.3333),
            )
        return FakeData(total_all_time, [food, shopping]), FakeAnalytics(total, potential, entries)
    return _make
