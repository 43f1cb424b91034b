from datetime import date

import pytest

from cashback_layout import (
    EMPTY_TITLE,
    HOW_TO_EARN_FOOTER,
    CashbackViewState,
    CategoryBreakdown,
    HowToEarn,
    MissedOpportunity,
    MonthSelector,
    SummaryCard,
    build_cashback_layout,
)
from models import CategoryCashback
from providers import AnalyticsProvider, DataProvider

MARCH = date(2024, 3, 1)
TODAY = date(2026, 10, 19)


# ---------- Layout ----------

def test_summary_card_formats_totals(make_providers):
    data, analytics = make_providers()
    layout = build_cashback_layout(MARCH, data, analytics)
    assert layout.summary_card == SummaryCard(total_all_time="$128.40", this_month="$12.00")


def test_sections_in_fixed_order(make_providers):
    layout = build_cashback_layout(MARCH, *make_providers())
    kinds = [type(s) for s in layout.sections()]
    assert kinds == [SummaryCard, MonthSelector, MissedOpportunity, CategoryBreakdown, HowToEarn]


def test_missed_opportunity_shows_difference(make_providers):
    layout = build_cashback_layout(MARCH, *make_providers(total=12.0, potential=20.0))
    assert layout.missed_opportunity.amount == "$8.00"
    assert layout.missed_opportunity.message == "You could have earned $8.00 more by using cashback categories"


@pytest.mark.parametrize("total,potential", [(20.0, 20.0), (25.0, 20.0)])
def test_missed_opportunity_absent_unless_potential_exceeds_actual(make_providers, total, potential):
    layout = build_cashback_layout(MARCH, *make_providers(total=total, potential=potential))
    assert layout.missed_opportunity is None
    assert MissedOpportunity not in [type(s) for s in layout.sections()]


def test_month_selector_label(make_providers):
    layout = build_cashback_layout(MARCH, *make_providers())
    assert layout.month_selector == MonthSelector(month=MARCH, label="March 2024")


def test_category_rows_keep_provider_order(make_providers, food, shopping):
    entries = (CategoryCashback(food, 4.0, 33.3333), CategoryCashback(shopping, 8.0, 66.6666))
    layout = build_cashback_layout(MARCH, *make_providers(entries=entries))
    rows = layout.category_breakdown.rows
    assert [r.name for r in rows] == ["Food & Dining", "Shopping"]
    assert [r.percentage for r in rows] == ["33.3%", "66.7%"]
    assert [r.amount for r in rows] == ["$4.00", "$8.00"]
    assert [r.rate_label for r in rows] == ["3%", "5%"]
    assert rows[0].icon == food.icon
    assert layout.category_breakdown.empty_state is None


def test_empty_breakdown_shows_empty_state(make_providers):
    layout = build_cashback_layout(MARCH, *make_providers(total=0.0, potential=0.0, entries=()))
    assert layout.category_breakdown.rows == ()
    assert layout.category_breakdown.empty_state.title == EMPTY_TITLE


def test_how_to_earn_lists_every_category(make_providers):
    # nothing earned this month, every category still listed
    data, analytics = make_providers(entries=())
    layout = build_cashback_layout(MARCH, data, analytics)
    assert [(b.name, b.rate_label) for b in layout.how_to_earn.badges] == [
        ("Food & Dining", "3%"), ("Shopping", "5%"),
    ]
    assert layout.how_to_earn.footer == HOW_TO_EARN_FOOTER


def test_layout_requests_data_for_given_month(make_providers):
    data, analytics = make_providers()
    build_cashback_layout(MARCH, data, analytics)
    assert analytics.months == [("summary", MARCH), ("potential", MARCH)]
    assert sorted(data.calls) == ["categories", "total_all_time"]


def test_currency_symbol(make_providers):
    layout = build_cashback_layout(MARCH, *make_providers(), currency_symbol="€")
    assert layout.summary_card.total_all_time == "€128.40"


def test_layout_over_real_providers(ledger):
    layout = build_cashback_layout(MARCH, DataProvider(ledger), AnalyticsProvider(ledger))
    assert layout.summary_card == SummaryCard(total_all_time="$14.70", this_month="$13.50")
    assert layout.missed_opportunity.amount == "$1.50"
    assert [r.name for r in layout.category_breakdown.rows] == ["Shopping", "Food & Dining"]
    assert [r.percentage for r in layout.category_breakdown.rows] == ["74.1%", "22.2%"]


# ---------- View state ----------

def test_state_defaults_to_current_month():
    state = CashbackViewState(today=TODAY)
    assert state.selected_month == date(2026, 10, 1)
    assert not state.picker_open


def test_confirm_replaces_month_and_normalizes_day():
    state = CashbackViewState(today=TODAY)
    assert state.open_picker() == date(2026, 10, 1)
    assert state.picker_open
    assert state.confirm(date(2023, 5, 17)) == date(2023, 5, 1)
    assert state.selected_month == date(2023, 5, 1)
    assert not state.picker_open


def test_cancel_leaves_month_unchanged():
    state = CashbackViewState(today=TODAY)
    state.open_picker()
    state.cancel()
    assert state.selected_month == date(2026, 10, 1)
    assert not state.picker_open


@pytest.mark.parametrize("picked", [date(2019, 12, 31), date(2026, 10, 20), date(2027, 1, 1)])
def test_confirm_outside_bounds_is_rejected(picked):
    state = CashbackViewState(today=TODAY)
    state.open_picker()
    with pytest.raises(ValueError):
        state.confirm(picked)
    assert state.selected_month == date(2026, 10, 1)


def test_confirm_requires_open_picker():
    state = CashbackViewState(today=TODAY)
    with pytest.raises(ValueError):
        state.confirm(date(2024, 1, 1))


def test_picker_bounds():
    state = CashbackViewState(today=TODAY)
    assert state.picker_bounds() == (date(2020, 1, 1), TODAY)
    assert state.is_selectable(date(2020, 1, 1))
    assert state.is_selectable(TODAY)


@pytest.mark.parametrize("picked", [date(2020, 1, 1), date(2022, 6, 1), date(2026, 10, 1)])
def test_selected_month_drives_next_render(make_providers, picked):
    state = CashbackViewState(today=TODAY)
    state.open_picker()
    state.confirm(picked)
    data, analytics = make_providers()
    layout = build_cashback_layout(state.selected_month, data, analytics)
    assert layout.month_selector.label == picked.strftime("%B %Y")
    assert analytics.months == [("summary", picked), ("potential", picked)]
