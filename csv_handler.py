"""
CSV export and import functionality for Cashback Rewards
"""
from __future__ import annotations
import csv
import logging
from typing import List

from models import Transaction
from utils import parse_date

logger = logging.getLogger(__name__)

CSV_COLUMNS = ['id', 'date', 'amount', 'category_id', 'type', 'cashback_earned', 'note']


def export_transactions_to_csv(transactions: List[Transaction], filepath: str) -> None:
    """
    Export transactions list to CSV file
    CSV columns: id, date, amount, category_id, type, cashback_earned, note
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)

        for t in transactions:
            writer.writerow([
                t.id,
                t.date,
                t.amount,
                t.category_id,
                t.type,
                '' if t.cashback_earned is None else t.cashback_earned,
                t.note,
            ])
    logger.info("Exported %d transactions to %s", len(transactions), filepath)


def import_transactions_from_csv(filepath: str) -> List[Transaction]:
    """
    Import transactions list from CSV file
    Raises ValueError on a malformed date, amount or type, KeyError on a missing column
    """
    transactions = []

    with open(filepath, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)

        for row in reader:
            parse_date(row['date'])
            ttype = (row.get('type') or 'expense').strip()
            if ttype not in ('expense', 'income'):
                raise ValueError(f"Unknown transaction type: {ttype!r}")
            cb = (row.get('cashback_earned') or '').strip()

            transactions.append(Transaction(
                id=row['id'],
                date=row['date'].strip(),
                amount=float(row['amount']),
                category_id=row['category_id'],
                type=ttype,
                cashback_earned=float(cb) if cb else None,
                note=row.get('note') or '',
            ))

    logger.info("Imported %d transactions from %s", len(transactions), filepath)
    return transactions
