"""
Data models for Cashback Rewards application
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from utils import argb_to_hex


@dataclass
class CashbackCategory:
    """Spending category, optionally earning cashback"""
    id: str
    name: str
    icon: str  # emoji glyph
    color: int  # ARGB, e.g. 0xFFFF6B6B
    is_cashback_eligible: bool = False
    cashback_rate: Optional[float] = None  # e.g., 0.05 for 5%
    sort_order: int = 0
    is_active: bool = True
    description: str = ""

    @property
    def offers_cashback(self) -> bool:
        return self.is_cashback_eligible and self.cashback_rate is not None and self.cashback_rate > 0

    @property
    def formatted_cashback_rate(self) -> str:
        """Rate as a whole percent, e.g. "5%" """
        if not self.offers_cashback:
            return "0%"
        return f"{self.cashback_rate * 100:.0f}%"

    @property
    def hex_color(self) -> str:
        """RGB part of the ARGB color as a Tk/Excel friendly hex string"""
        return argb_to_hex(self.color)

    def calculate_cashback(self, amount: float) -> float:
        """Cashback this category would pay on a purchase of `amount`"""
        if not self.offers_cashback:
            return 0.0
        return float(amount) * self.cashback_rate


@dataclass
class Transaction:
    """Single income or expense transaction"""
    id: str
    date: str  # YYYY-MM-DD
    amount: float
    category_id: str
    type: str = "expense"  # "expense" | "income"
    cashback_earned: Optional[float] = None
    note: str = ""

    @property
    def has_cashback(self) -> bool:
        return self.cashback_earned is not None and self.cashback_earned > 0


@dataclass
class RewardsLedger:
    """Complete ledger containing all data"""
    categories: List[CashbackCategory]
    transactions: List[Transaction] = field(default_factory=list)
    version: int = 1


@dataclass(frozen=True)
class CategoryCashback:
    """One category's share of a month's cashback"""
    category: CashbackCategory
    amount: float
    percentage: float  # 0-100


@dataclass(frozen=True)
class CashbackSummary:
    """Cashback earned in a month, broken down by category"""
    total_cashback: float
    category_cashback: Tuple[CategoryCashback, ...]
    month: date


@dataclass(frozen=True)
class MonthlyCashback:
    month: date
    amount: float
