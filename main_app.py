"""
Main application window for Cashback Rewards GUI
"""
from __future__ import annotations
import logging
import os
from typing import Optional

try:
    import tkinter as tk
    from tkinter import ttk, messagebox, filedialog
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None
    filedialog = None

from models import RewardsLedger
from config import Settings, get_default_ledger, load_ledger, save_ledger
from providers import AnalyticsProvider, DataProvider
from cashback_layout import CashbackLayout, CashbackViewState, build_cashback_layout
from excel_export import export_excel
from gui_dialogs import MonthPickerDialog
from csv_handler import export_transactions_to_csv, import_transactions_from_csv
from utils import argb_to_hex, format_month

logger = logging.getLogger(__name__)

CASHBACK_GOLD = "#FFD700"
INFO_BLUE = "#2196F3"
TEXT_SECONDARY = "#707070"


def _tint(hex_color: str, alpha: float = 0.2) -> str:
    """Blend a #RRGGBB color toward white"""
    r, g, b = (int(hex_color[i:i + 2], 16) for i in (1, 3, 5))
    return "#" + "".join(f"{int(c * alpha + 255 * (1 - alpha)):02X}" for c in (r, g, b))


class CashbackRewardsApp(ttk.Frame):
    """Cashback rewards screen"""

    def __init__(self, master: tk.Tk, settings: Optional[Settings] = None, ledger_path: Optional[str] = None):
        super().__init__(master, padding=20)
        self.master = master
        self.master.title("Cashback Rewards")
        self.master.geometry("560x820")
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.settings = settings or Settings()
        self.ledger_path: Optional[str] = None
        self.ledger: RewardsLedger = get_default_ledger()
        self.view_state = CashbackViewState()

        self._build_menu()
        self.refresh()
        if ledger_path:
            self._open(ledger_path)

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label="New", command=self.new_ledger)
        filem.add_command(label="Open…", command=self.open_ledger)
        filem.add_command(label="Save", command=self.save_ledger)
        filem.add_command(label="Save As…", command=self.save_as_ledger)
        filem.add_separator()
        filem.add_command(label="Import Transactions CSV…", command=self.import_csv_dialog)
        filem.add_command(label="Export Transactions CSV…", command=self.export_csv_dialog)
        filem.add_separator()
        filem.add_command(label="Export Excel Report…", command=self.export_excel_dialog)
        filem.add_separator()
        filem.add_command(label="Exit", command=self.master.destroy)
        menubar.add_cascade(label="File", menu=filem)
        self.master.config(menu=menubar)

    # ---------- Providers ----------
    @property
    def data(self) -> DataProvider:
        return DataProvider(self.ledger)

    @property
    def analytics(self) -> AnalyticsProvider:
        return AnalyticsProvider(self.ledger)

    # ---------- Rendering ----------
    def _layout_for(self, ledger: RewardsLedger) -> CashbackLayout:
        return build_cashback_layout(
            self.view_state.selected_month,
            DataProvider(ledger),
            AnalyticsProvider(ledger),
            self.settings.currency_symbol,
        )

    def refresh(self):
        """Re-request the selected month's data and rebuild every section"""
        self._redraw(self._layout_for(self.ledger))

    def _redraw(self, layout: CashbackLayout):
        for w in self.winfo_children():
            w.destroy()
        self._render(layout)

    def _render(self, layout: CashbackLayout):
        r = 0
        for build in (
            self._build_summary_card,
            self._build_month_selector,
            self._build_missed_opportunity,
            self._build_category_breakdown,
            self._build_how_to_earn,
        ):
            frame = build(layout)
            if frame is None:
                continue
            frame.grid(row=r, column=0, sticky="ew", pady=(0, 16))
            r += 1

    def _build_summary_card(self, layout: CashbackLayout):
        card = tk.Frame(self, bg=CASHBACK_GOLD, padx=20, pady=20)
        tk.Label(card, text="🎁  Total Cashback Earned", bg=CASHBACK_GOLD).grid(row=0, column=0, sticky="w")
        tk.Label(card, text=layout.summary_card.total_all_time, bg=CASHBACK_GOLD,
                 font=("TkDefaultFont", 28, "bold")).grid(row=1, column=0, sticky="w")
        month_row = tk.Frame(card, bg=_tint(CASHBACK_GOLD, 0.6), padx=12, pady=8)
        month_row.grid(row=2, column=0, sticky="ew", pady=(12, 0))
        month_row.columnconfigure(0, weight=1)
        tk.Label(month_row, text="This Month", bg=month_row["bg"]).grid(row=0, column=0, sticky="w")
        tk.Label(month_row, text=f"+ {layout.summary_card.this_month}", bg=month_row["bg"],
                 font=("TkDefaultFont", 14, "bold")).grid(row=0, column=1, sticky="e")
        card.columnconfigure(0, weight=1)
        return card

    def _build_month_selector(self, layout: CashbackLayout):
        frm = ttk.Frame(self)
        ttk.Button(frm, text=f"📅  {layout.month_selector.label}  ▾", command=self.select_month).pack(
            side="left", fill="x", expand=True
        )
        return frm

    def _build_missed_opportunity(self, layout: CashbackLayout):
        missed = layout.missed_opportunity
        if missed is None:
            return None
        bg = _tint(INFO_BLUE, 0.1)
        frm = tk.Frame(self, bg=bg, padx=16, pady=12, highlightbackground=_tint(INFO_BLUE, 0.3),
                       highlightthickness=1)
        tk.Label(frm, text=f"💡  {missed.title}", bg=bg, font=("TkDefaultFont", 11, "bold")).grid(
            row=0, column=0, sticky="w")
        tk.Label(frm, text=missed.message, bg=bg, fg=TEXT_SECONDARY, wraplength=460, justify="left").grid(
            row=1, column=0, sticky="w")
        return frm

    def _build_category_breakdown(self, layout: CashbackLayout):
        breakdown = layout.category_breakdown
        frm = ttk.Frame(self)
        frm.columnconfigure(1, weight=1)
        if breakdown.empty_state is not None:
            ttk.Label(frm, text="🎁", font=("TkDefaultFont", 36)).grid(row=0, column=0, columnspan=3)
            ttk.Label(frm, text=breakdown.empty_state.title, font=("TkDefaultFont", 12, "bold")).grid(
                row=1, column=0, columnspan=3)
            ttk.Label(frm, text=breakdown.empty_state.message, foreground=TEXT_SECONDARY, justify="center").grid(
                row=2, column=0, columnspan=3, pady=(6, 0))
            return frm

        ttk.Label(frm, text=breakdown.title, font=("TkDefaultFont", 12, "bold")).grid(
            row=0, column=0, columnspan=3, sticky="w", pady=(0, 8))
        for i, row in enumerate(breakdown.rows, start=1):
            hex_color = argb_to_hex(row.color)
            tk.Label(frm, text=row.icon, bg=_tint(hex_color), font=("TkDefaultFont", 18), padx=8, pady=4).grid(
                row=i, column=0, sticky="w", pady=4)
            ttk.Label(frm, text=f"{row.name}\n{row.percentage} of total").grid(row=i, column=1, sticky="w", padx=12)
            ttk.Label(frm, text=f"{row.amount}\n{row.rate_label}", justify="right").grid(row=i, column=2, sticky="e")
        return frm

    def _build_how_to_earn(self, layout: CashbackLayout):
        how = layout.how_to_earn
        frm = ttk.Frame(self)
        frm.columnconfigure(1, weight=1)
        ttk.Label(frm, text=f"ℹ  {how.title}", font=("TkDefaultFont", 12, "bold")).grid(
            row=0, column=0, columnspan=3, sticky="w")
        ttk.Label(frm, text=how.intro, foreground=TEXT_SECONDARY).grid(
            row=1, column=0, columnspan=3, sticky="w", pady=(4, 8))
        r = 2
        for badge in how.badges:
            hex_color = argb_to_hex(badge.color)
            tk.Label(frm, text=badge.icon, bg=_tint(hex_color), padx=6, pady=2).grid(row=r, column=0, pady=3)
            ttk.Label(frm, text=badge.name).grid(row=r, column=1, sticky="w", padx=12)
            tk.Label(frm, text=badge.rate_label, bg=_tint(CASHBACK_GOLD), font=("TkDefaultFont", 9, "bold"),
                     padx=10, pady=2).grid(row=r, column=2, sticky="e")
            r += 1
        tk.Label(frm, text=f"✨  {how.footer}", bg=_tint(CASHBACK_GOLD, 0.1), padx=10, pady=8,
                 anchor="w").grid(row=r, column=0, columnspan=3, sticky="ew", pady=(10, 0))
        return frm

    # ---------- Month selection ----------
    def select_month(self):
        """Open the month picker; confirmed months re-render the screen"""
        initial = self.view_state.open_picker()
        first, last = self.view_state.picker_bounds()
        dlg = MonthPickerDialog(self.master, initial, first, last)
        self.master.wait_window(dlg)
        if dlg.result is None:
            self.view_state.cancel()
            return
        self.view_state.confirm(dlg.result)
        self.refresh()

    # ---------- File ops ----------
    def new_ledger(self):
        """Create new ledger"""
        if messagebox.askyesno("New", "Start a new ledger (unsaved changes will be lost)?"):
            self.ledger = get_default_ledger()
            self.ledger_path = None
            self.master.title("Cashback Rewards")
            self.refresh()

    def open_ledger(self):
        """Open ledger from file"""
        fp = filedialog.askopenfilename(
            title="Open ledger JSON",
            filetypes=[("Ledger JSON", "*.json"), ("All files", "*.*")]
        )
        if fp:
            self._open(fp)

    def _open(self, fp: str):
        """Switch to the ledger at `fp`; on failure the current ledger stays"""
        try:
            ledger = load_ledger(fp)
            layout = self._layout_for(ledger)
        except Exception as ex:
            logger.exception("Failed to open ledger %s", fp)
            messagebox.showerror("Open failed", str(ex))
            return
        self.ledger = ledger
        self.ledger_path = fp
        self.master.title(f"Cashback Rewards - {os.path.basename(fp)}")
        self._redraw(layout)

    def save_ledger(self):
        """Save ledger to file"""
        if not self.ledger_path:
            return self.save_as_ledger()
        try:
            save_ledger(self.ledger, self.ledger_path)
            self.master.title(f"Cashback Rewards - {os.path.basename(self.ledger_path)}")
        except Exception as ex:
            logger.exception("Failed to save ledger %s", self.ledger_path)
            messagebox.showerror("Save failed", str(ex))

    def save_as_ledger(self):
        """Save ledger to new file"""
        fp = filedialog.asksaveasfilename(
            title="Save ledger JSON",
            defaultextension=".json",
            filetypes=[("Ledger JSON", "*.json")]
        )
        if not fp:
            return
        self.ledger_path = fp
        self.save_ledger()

    def export_excel_dialog(self):
        """Export the selected month's report to Excel"""
        month = self.view_state.selected_month
        fp = filedialog.asksaveasfilename(
            title="Export Excel",
            initialfile=f"cashback_{month.strftime('%Y_%m')}.xlsx",
            defaultextension=".xlsx",
            filetypes=[("Excel Workbook", "*.xlsx")]
        )
        if not fp:
            return
        try:
            export_excel(self.data, self.analytics, fp, month, self.settings.currency_symbol)
            messagebox.showinfo("Export", f"Exported {format_month(month)}: {fp}")
        except Exception as ex:
            logger.exception("Excel export failed")
            messagebox.showerror("Export failed", str(ex))

    # ---------- CSV Import/Export ----------
    def export_csv_dialog(self):
        """Export transactions to CSV file"""
        if not self.ledger.transactions:
            messagebox.showinfo("Export CSV", "No transactions to export.")
            return

        fp = filedialog.asksaveasfilename(
            title="Export Transactions to CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not fp:
            return

        try:
            export_transactions_to_csv(self.ledger.transactions, fp)
            messagebox.showinfo("Export CSV", f"Exported {len(self.ledger.transactions)} transactions to:\n{fp}")
        except Exception as ex:
            logger.exception("CSV export failed")
            messagebox.showerror("Export failed", str(ex))

    def import_csv_dialog(self):
        """Import transactions from CSV file"""
        fp = filedialog.askopenfilename(
            title="Import Transactions from CSV",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not fp:
            return

        try:
            imported = import_transactions_from_csv(fp)
        except Exception as ex:
            logger.exception("CSV import failed")
            messagebox.showerror("Import failed", str(ex))
            return
        if not imported:
            messagebox.showinfo("Import CSV", "No transactions found in CSV file.")
            return

        choice = messagebox.askyesnocancel(
            "Import CSV",
            f"Found {len(imported)} transactions in CSV.\n\n"
            "Yes: Append to current transactions\n"
            "No: Replace current transactions\n"
            "Cancel: Cancel import"
        )
        if choice is None:
            return
        if choice:
            self.ledger.transactions.extend(imported)
        else:
            self.ledger.transactions = imported
        self.refresh()
