"""
Configuration and data loading/saving for Cashback Rewards
"""
from __future__ import annotations
import json
import logging
import os
from typing import List
from dataclasses import asdict, dataclass

from models import CashbackCategory, RewardsLedger, Transaction
from utils import app_dir, parse_date

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    currency_symbol: str = "$"
    ledger_file: str = "ledger.json"  # relative to app_dir() unless absolute


def default_categories() -> List[CashbackCategory]:
    """Built-in expense categories; only some of them pay cashback"""
    return [
        CashbackCategory("expense_food", "Food & Dining", "🍽️", 0xFFFF6B6B, True, 0.03, 1,
                         description="Restaurant meals and food delivery"),
        CashbackCategory("expense_groceries", "Groceries", "🛒", 0xFF51CF66, True, 0.02, 2,
                         description="Supermarket and grocery shopping"),
        CashbackCategory("expense_transport", "Transportation", "🚗", 0xFF4ECDC4, sort_order=3,
                         description="Fuel, public transport, taxi"),
        CashbackCategory("expense_shopping", "Shopping", "🛍️", 0xFFFFA94D, True, 0.05, 4,
                         description="Clothes, accessories, personal items"),
        CashbackCategory("expense_bills", "Bills & Utilities", "📄", 0xFFF38181, sort_order=5,
                         description="Electricity, water, internet, phone"),
        CashbackCategory("expense_travel", "Travel", "✈️", 0xFF748FFC, True, 0.02, 6,
                         description="Flights, hotels and holidays"),
    ]


def load_settings(path: str) -> Settings:
    """Load settings from JSON file"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return Settings()
    return Settings(
        currency_symbol=str(data.get("currency_symbol", "$")),
        ledger_file=str(data.get("ledger_file", "ledger.json")),
    )


def save_settings(settings: Settings, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, ensure_ascii=False, indent=2)


def load_categories(path: str) -> List[CashbackCategory]:
    """Load category catalogue from JSON file"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return [CashbackCategory(**c) for c in data.get("categories", [])]
    except FileNotFoundError:
        return []


def ledger_path(settings: Settings) -> str:
    if os.path.isabs(settings.ledger_file):
        return settings.ledger_file
    return os.path.join(app_dir(), settings.ledger_file)


def get_default_ledger() -> RewardsLedger:
    """Create default ledger with loaded (or built-in) categories"""
    categories = load_categories(os.path.join(app_dir(), "categories.json"))
    if not categories:
        categories = default_categories()
    return RewardsLedger(categories=categories, transactions=[])


def ledger_to_dict(ledger: RewardsLedger) -> dict:
    """Convert RewardsLedger object to dictionary for JSON serialization"""
    return {
        "version": ledger.version,
        "categories": [asdict(c) for c in ledger.categories],
        "transactions": [asdict(t) for t in ledger.transactions],
    }


def dict_to_ledger(d: dict) -> RewardsLedger:
    """
    Convert dictionary from JSON to RewardsLedger object
    Raises ValueError when a transaction date is not YYYY-MM-DD
    """
    categories = [CashbackCategory(**c) for c in d.get("categories", [])]
    txns = [Transaction(**t) for t in d.get("transactions", [])]
    for t in txns:
        try:
            parse_date(t.date)
        except ValueError:
            raise ValueError(f"Transaction {t.id}: date must be YYYY-MM-DD, got {t.date!r}") from None

    return RewardsLedger(
        version=d.get("version", 1),
        categories=categories or default_categories(),
        transactions=txns,
    )


def load_ledger(path: str) -> RewardsLedger:
    """Load ledger JSON; a missing file gives the default ledger"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            d = json.load(f)
    except FileNotFoundError:
        logger.info("No ledger at %s, starting with defaults", path)
        return get_default_ledger()
    ledger = dict_to_ledger(d)
    logger.info("Loaded ledger %s (%d transactions)", path, len(ledger.transactions))
    return ledger


def save_ledger(ledger: RewardsLedger, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(ledger_to_dict(ledger), f, ensure_ascii=False, indent=2)
    logger.info("Saved ledger %s", path)
