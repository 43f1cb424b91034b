"""
Data and analytics providers consumed by the cashback view
"""
from __future__ import annotations
import logging
from datetime import date
from typing import List, Optional

from models import CashbackCategory, CashbackSummary, MonthlyCashback, RewardsLedger
from computations import (
    build_category_map,
    cashback_categories,
    compute_cashback_summary,
    compute_cashback_trend,
    compute_potential_cashback,
    total_cashback,
)

logger = logging.getLogger(__name__)


class DataProvider:
    """Read access to the ledger's categories and all-time totals"""

    def __init__(self, ledger: RewardsLedger):
        self.ledger = ledger

    def get_total_cashback_all_time(self) -> float:
        return total_cashback(self.ledger.transactions)

    def get_cashback_categories(self) -> List[CashbackCategory]:
        return cashback_categories(self.ledger.categories)

    def get_category_by_id(self, category_id: str) -> Optional[CashbackCategory]:
        return build_category_map(self.ledger.categories).get(category_id)


class AnalyticsProvider:
    """Per-month cashback aggregation over the ledger"""

    def __init__(self, ledger: RewardsLedger):
        self.ledger = ledger

    def get_cashback_summary(self, month: date) -> CashbackSummary:
        summary = compute_cashback_summary(self.ledger, month)
        logger.debug(
            "Cashback summary for %s: total=%.2f categories=%d",
            month.strftime("%Y-%m"), summary.total_cashback, len(summary.category_cashback),
        )
        return summary

    def get_potential_cashback(self, month: date) -> float:
        return compute_potential_cashback(self.ledger, month)

    def get_cashback_trend(self, year: int) -> List[MonthlyCashback]:
        return compute_cashback_trend(self.ledger, year)
