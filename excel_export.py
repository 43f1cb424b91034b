"""
Excel export functionality for Cashback Rewards
"""
from __future__ import annotations
import logging
from datetime import date

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from cashback_layout import build_cashback_layout

logger = logging.getLogger(__name__)

MONEY_FORMAT = "0.00"


def _style_header(ws, row=1, color="B8860B"):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor=color)
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=60):
    """Fit column widths to the longest value"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        lengths = [len(str(c.value)) for c in ws[letter] if c.value is not None]
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max(lengths, default=0) + 2))


def export_excel(data, analytics, filepath: str, month: date, currency_symbol: str = "$") -> None:
    """
    Export the cashback report for `month` to an Excel file:
    - Summary: totals and the missed opportunity
    - Cashback by Category: the month's breakdown
    - How to Earn: every cashback category and its rate
    - Monthly Trend: cashback per month of the year
    """
    layout = build_cashback_layout(month, data, analytics, currency_symbol)
    summary = analytics.get_cashback_summary(month)
    potential = analytics.get_potential_cashback(month)

    wb = Workbook()
    ws = wb.active
    ws.title = "Summary"
    ws.append(["Metric", "Value"])
    _style_header(ws)
    ws.append(["Month", layout.month_selector.label])
    ws.append(["Total Cashback Earned", data.get_total_cashback_all_time()])
    ws.append(["This Month", summary.total_cashback])
    ws.append(["Potential Cashback", potential])
    missed = layout.missed_opportunity
    ws.append(["Missed Opportunity", missed.message if missed else ""])
    for r in range(3, 6):
        ws.cell(r, 2).number_format = MONEY_FORMAT
    _autosize_columns(ws)

    # Breakdown keeps the numbers raw so the sheet stays sortable
    ws = wb.create_sheet("Cashback by Category")
    ws.append(["Icon", "Category", "Amount", "% of total", "Rate"])
    _style_header(ws)
    ws.freeze_panes = "A2"
    if summary.category_cashback:
        for item in summary.category_cashback:
            ws.append([
                item.category.icon,
                item.category.name,
                item.amount,
                round(item.percentage, 1),
                item.category.formatted_cashback_rate,
            ])
            ws.cell(ws.max_row, 1).fill = PatternFill("solid", fgColor=item.category.hex_color[1:])
            ws.cell(ws.max_row, 3).number_format = MONEY_FORMAT
        ws.append(["", "TOTAL", summary.total_cashback, "", ""])
        ws.cell(ws.max_row, 2).font = Font(bold=True)
        ws.cell(ws.max_row, 3).number_format = MONEY_FORMAT
    else:
        empty = layout.category_breakdown.empty_state
        ws.append(["", empty.title, empty.message.replace("\n", " ")])
    _autosize_columns(ws)

    ws = wb.create_sheet("How to Earn")
    ws.append(["Icon", "Category", "Rate"])
    _style_header(ws)
    for badge in layout.how_to_earn.badges:
        ws.append([badge.icon, badge.name, badge.rate_label])
    ws.append([])
    ws.append([layout.how_to_earn.footer])
    ws.cell(ws.max_row, 1).font = Font(italic=True)
    _autosize_columns(ws)

    ws = wb.create_sheet("Monthly Trend")
    ws.append(["Month", "Cashback"])
    _style_header(ws)
    for mc in analytics.get_cashback_trend(month.year):
        ws.append([mc.month.strftime("%B"), mc.amount])
        ws.cell(ws.max_row, 2).number_format = MONEY_FORMAT
    last = ws.max_row
    ws.append(["TOTAL", f"=SUM(B2:B{last})"])
    ws.cell(ws.max_row, 1).font = Font(bold=True)
    ws.cell(ws.max_row, 2).number_format = MONEY_FORMAT
    _autosize_columns(ws)

    wb.save(filepath)
    logger.info("Exported cashback report for %s to %s", layout.month_selector.label, filepath)
