"""
Business logic and computations for Cashback Rewards
"""
from __future__ import annotations
from datetime import date
from typing import Dict, List, Optional

from models import (
    CashbackCategory,
    CashbackSummary,
    CategoryCashback,
    MonthlyCashback,
    RewardsLedger,
    Transaction,
)
from utils import parse_date, same_month, month_start


def build_category_map(categories: List[CashbackCategory]) -> Dict[str, CashbackCategory]:
    """Build mapping of category id to category"""
    return {c.id: c for c in categories}


def cashback_categories(categories: List[CashbackCategory]) -> List[CashbackCategory]:
    """Active, cashback-eligible categories in display order"""
    out = [c for c in categories if c.is_cashback_eligible and c.is_active]
    out.sort(key=lambda c: c.sort_order)
    return out


def filter_transactions_by_month(transactions: List[Transaction], month: date) -> List[Transaction]:
    """Transactions dated within the calendar month of `month`"""
    return [t for t in transactions if same_month(parse_date(t.date), month)]


def total_cashback(transactions: List[Transaction]) -> float:
    return sum(float(t.cashback_earned) for t in transactions if t.has_cashback)


def cashback_by_category(transactions: List[Transaction]) -> Dict[str, float]:
    """Cashback earned per category id, in first-seen order"""
    out: Dict[str, float] = {}
    for t in transactions:
        if t.has_cashback:
            out[t.category_id] = out.get(t.category_id, 0.0) + float(t.cashback_earned)
    return out


def compute_cashback_summary(ledger: RewardsLedger, month: date) -> CashbackSummary:
    """
    Summarize one month's cashback.
    Percentages are shares of the month total (0 when nothing was earned);
    entries for unknown categories are dropped; largest amount first.
    """
    exps = filter_transactions_by_month(ledger.transactions, month)
    total = total_cashback(exps)
    cat_map = build_category_map(ledger.categories)

    entries = []
    for cid, amount in cashback_by_category(exps).items():
        category = cat_map.get(cid)
        if category is None:
            continue
        pct = amount / total * 100 if total > 0 else 0.0
        entries.append(CategoryCashback(category=category, amount=amount, percentage=pct))
    entries.sort(key=lambda x: x.amount, reverse=True)

    return CashbackSummary(
        total_cashback=total,
        category_cashback=tuple(entries),
        month=month_start(month),
    )


def compute_potential_cashback(ledger: RewardsLedger, month: date) -> float:
    """Cashback the month's expenses would have paid at each category's full rate"""
    cat_map = build_category_map(ledger.categories)
    potential = 0.0
    for t in filter_transactions_by_month(ledger.transactions, month):
        if t.type != "expense":
            continue
        category = cat_map.get(t.category_id)
        if category is not None:
            potential += category.calculate_cashback(t.amount)
    return potential


def compute_cashback_trend(ledger: RewardsLedger, year: int) -> List[MonthlyCashback]:
    """Cashback earned in each month of `year`, January first"""
    trend = []
    for m in range(1, 13):
        d = date(year, m, 1)
        amount = total_cashback(filter_transactions_by_month(ledger.transactions, d))
        trend.append(MonthlyCashback(month=d, amount=amount))
    return trend


def missed_cashback(potential: float, actual: float) -> Optional[float]:
    """Difference when potential strictly exceeds actual, else None"""
    if potential > actual:
        return potential - actual
    return None
