from models import CashbackCategory, Transaction


def test_offers_cashback_requires_eligibility_and_positive_rate():
    assert CashbackCategory("a", "A", "x", 0, True, 0.05).offers_cashback
    assert not CashbackCategory("a", "A", "x", 0, False, 0.05).offers_cashback
    assert not CashbackCategory("a", "A", "x", 0, True, 0.0).offers_cashback
    assert not CashbackCategory("a", "A", "x", 0, True, None).offers_cashback


def test_formatted_cashback_rate_is_whole_percent():
    assert CashbackCategory("a", "A", "x", 0, True, 0.05).formatted_cashback_rate == "5%"
    assert CashbackCategory("a", "A", "x", 0).formatted_cashback_rate == "0%"


def test_calculate_cashback():
    assert CashbackCategory("a", "A", "x", 0, True, 0.05).calculate_cashback(200) == 10.0
    assert CashbackCategory("a", "A", "x", 0).calculate_cashback(200) == 0.0


def test_hex_color_drops_alpha():
    assert CashbackCategory("a", "A", "x", 0xFFFF6B6B).hex_color == "#FF6B6B"


def test_transaction_has_cashback():
    assert Transaction("t", "2024-01-01", 10, "c", cashback_earned=0.3).has_cashback
    assert not Transaction("t", "2024-01-01", 10, "c", cashback_earned=0.0).has_cashback
    assert not Transaction("t", "2024-01-01", 10, "c").has_cashback
