"""
Cashback screen layout, independent of any widget toolkit.

build_cashback_layout() turns provider data for one month into an immutable
description of the five screen sections; CashbackViewState owns the selected
month and the month picker transitions.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from computations import missed_cashback
from utils import (
    FIRST_MONTH,
    current_month,
    format_currency,
    format_month,
    format_percentage,
    month_start,
)

logger = logging.getLogger(__name__)

SCREEN_TITLE = "Cashback Rewards"
EMPTY_TITLE = "No cashback earned yet"
EMPTY_MESSAGE = "Make purchases in cashback categories\nto start earning rewards"
HOW_TO_EARN_TITLE = "How to Earn Cashback"
HOW_TO_EARN_INTRO = "Earn cashback on eligible purchases automatically:"
HOW_TO_EARN_FOOTER = "Cashback is automatically calculated and added to your rewards"


@dataclass(frozen=True)
class SummaryCard:
    total_all_time: str
    this_month: str


@dataclass(frozen=True)
class MonthSelector:
    month: date
    label: str


@dataclass(frozen=True)
class MissedOpportunity:
    amount: str
    message: str
    title: str = "Missed Opportunity"


@dataclass(frozen=True)
class CategoryRow:
    icon: str
    name: str
    color: int
    percentage: str
    amount: str
    rate_label: str


@dataclass(frozen=True)
class EmptyState:
    title: str = EMPTY_TITLE
    message: str = EMPTY_MESSAGE


@dataclass(frozen=True)
class CategoryBreakdown:
    """Either rows (in provider order) or an empty state, never both"""
    rows: Tuple[CategoryRow, ...]
    empty_state: Optional[EmptyState]
    title: str = "Cashback by Category"


@dataclass(frozen=True)
class EarnRateBadge:
    icon: str
    name: str
    color: int
    rate_label: str


@dataclass(frozen=True)
class HowToEarn:
    badges: Tuple[EarnRateBadge, ...]
    title: str = HOW_TO_EARN_TITLE
    intro: str = HOW_TO_EARN_INTRO
    footer: str = HOW_TO_EARN_FOOTER


@dataclass(frozen=True)
class CashbackLayout:
    summary_card: SummaryCard
    month_selector: MonthSelector
    missed_opportunity: Optional[MissedOpportunity]
    category_breakdown: CategoryBreakdown
    how_to_earn: HowToEarn
    title: str = SCREEN_TITLE

    def sections(self) -> tuple:
        """Visible sections in screen order (the notice only when present)"""
        out = [self.summary_card, self.month_selector]
        if self.missed_opportunity is not None:
            out.append(self.missed_opportunity)
        out += [self.category_breakdown, self.how_to_earn]
        return tuple(out)


def build_cashback_layout(month: date, data, analytics, currency_symbol: str = "$") -> CashbackLayout:
    """
    Request the month's data from the providers and lay out the screen.

    `data` needs get_total_cashback_all_time() and get_cashback_categories();
    `analytics` needs get_cashback_summary(month) and get_potential_cashback(month).
    """
    summary = analytics.get_cashback_summary(month)
    total_all_time = data.get_total_cashback_all_time()
    potential = analytics.get_potential_cashback(month)
    categories = data.get_cashback_categories()

    def money(x: float) -> str:
        return format_currency(x, currency_symbol)

    missed = None
    diff = missed_cashback(potential, summary.total_cashback)
    if diff is not None:
        missed = MissedOpportunity(
            amount=money(diff),
            message=f"You could have earned {money(diff)} more by using cashback categories",
        )

    rows = tuple(
        CategoryRow(
            icon=item.category.icon,
            name=item.category.name,
            color=item.category.color,
            percentage=format_percentage(item.percentage),
            amount=money(item.amount),
            rate_label=item.category.formatted_cashback_rate,
        )
        for item in summary.category_cashback
    )
    breakdown = CategoryBreakdown(rows=rows, empty_state=None if rows else EmptyState())

    badges = tuple(
        EarnRateBadge(icon=c.icon, name=c.name, color=c.color, rate_label=c.formatted_cashback_rate)
        for c in categories
    )

    return CashbackLayout(
        summary_card=SummaryCard(total_all_time=money(total_all_time), this_month=money(summary.total_cashback)),
        month_selector=MonthSelector(month=month, label=format_month(month)),
        missed_opportunity=missed,
        category_breakdown=breakdown,
        how_to_earn=HowToEarn(badges=badges),
    )


class CashbackViewState:
    """
    Selected month plus the picker overlay.

    Viewing(month) --open_picker--> PickerOpen(month)
    PickerOpen --confirm(m)--> Viewing(m);  PickerOpen --cancel--> Viewing(month)
    """

    def __init__(self, today: Optional[date] = None):
        self._today = today
        self.selected_month: date = current_month(today)
        self.picker_open = False

    @property
    def today(self) -> date:
        return self._today or date.today()

    def picker_bounds(self) -> Tuple[date, date]:
        """Inclusive (first, last) dates the picker may return"""
        return FIRST_MONTH, self.today

    def is_selectable(self, d: date) -> bool:
        first, last = self.picker_bounds()
        return first <= d <= last

    def open_picker(self) -> date:
        """Enter the picker; returns the month it should start on"""
        self.picker_open = True
        return self.selected_month

    def confirm(self, picked: date) -> date:
        """Replace the selected month with `picked` (day dropped)"""
        if not self.picker_open:
            raise ValueError("Month picker is not open.")
        if not self.is_selectable(picked):
            first, last = self.picker_bounds()
            raise ValueError(f"Month must be between {format_month(first)} and {format_month(last)}.")
        self.selected_month = month_start(picked)
        self.picker_open = False
        logger.info("Selected month changed to %s", format_month(self.selected_month))
        return self.selected_month

    def cancel(self) -> date:
        self.picker_open = False
        return self.selected_month
