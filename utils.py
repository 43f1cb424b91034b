"""
Utility functions for Cashback Rewards application
"""
from __future__ import annotations
import os
from datetime import date, datetime
from typing import Optional

# Earliest month the rewards program has data for
FIRST_MONTH = date(2020, 1, 1)


def parse_date(s: str) -> date:
    """Parse YYYY-MM-DD date string"""
    return datetime.strptime(s.strip(), "%Y-%m-%d").date()


def month_start(d: date) -> date:
    """Drop the day component: any date -> first of its month"""
    return date(d.year, d.month, 1)


def current_month(today: Optional[date] = None) -> date:
    return month_start(today or date.today())


def same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


def format_currency(amount: float, symbol: str = "$") -> str:
    """Currency with exactly two decimals: 12.5 -> $12.50"""
    return f"{symbol}{float(amount):.2f}"


def format_percentage(value: float) -> str:
    """One decimal place: 33.333 -> 33.3%"""
    return f"{float(value):.1f}%"


def format_month(d: date) -> str:
    """Full month name and year, e.g. "March 2024" """
    return d.strftime("%B %Y")


def app_dir() -> str:
    """
    Get application data directory: ~/.cashback_rewards
    (override with CASHBACK_REWARDS_HOME). Creates directory if it doesn't exist.
    """
    path = os.environ.get("CASHBACK_REWARDS_HOME") or os.path.expanduser("~/.cashback_rewards")
    os.makedirs(path, exist_ok=True)
    return path


def argb_to_hex(color: int) -> str:
    """0xFFFF6B6B -> "#FF6B6B" (alpha dropped)"""
    return f"#{color & 0xFFFFFF:06X}"


def month_in_range(d: date, first: date, last: date) -> bool:
    """Whether the month of `d` lies within [month of first, month of last]"""
    return month_start(first) <= month_start(d) <= month_start(last)


def clamp_month(year: int, month: int, first: date, last: date) -> date:
    """First of (year, month), pulled back inside [month of first, month of last]"""
    return min(max(date(year, month, 1), month_start(first)), month_start(last))
