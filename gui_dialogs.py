"""
Dialog windows for Cashback Rewards GUI
"""
from __future__ import annotations
import calendar
from datetime import date
from typing import Optional

try:
    import tkinter as tk
    from tkinter import ttk
except ModuleNotFoundError:
    tk = None
    ttk = None

from utils import clamp_month, format_month, month_in_range, month_start


class MonthPickerDialog(tk.Toplevel):
    """
    Modal month/year picker bounded to [first, last].
    Opens on the year list; picking a year shows its months.
    `result` is the chosen first-of-month date, or None when cancelled.
    """

    def __init__(self, master, initial: date, first: date, last: date):
        super().__init__(master)
        self.title("Select Month")
        self.resizable(False, False)
        self.first = month_start(first)
        self.last = month_start(last)
        self.result: Optional[date] = None
        self.v_year = tk.IntVar(value=initial.year)
        self.v_month = tk.IntVar(value=initial.month)

        self.frm = ttk.Frame(self, padding=10)
        self.frm.grid(row=0, column=0, sticky="nsew")

        self.header_var = tk.StringVar(value=format_month(initial))
        ttk.Label(self.frm, textvariable=self.header_var, font=("TkDefaultFont", 12, "bold")).grid(
            row=0, column=0, sticky="w", pady=(0, 8)
        )
        self.body = ttk.Frame(self.frm)
        self.body.grid(row=1, column=0, sticky="nsew")

        btns = ttk.Frame(self.frm)
        btns.grid(row=2, column=0, sticky="e", pady=(10, 0))
        ttk.Button(btns, text="Years", command=self._show_years).grid(row=0, column=0, padx=4)
        ttk.Button(btns, text="OK", command=self._ok).grid(row=0, column=1, padx=4)
        ttk.Button(btns, text="Cancel", command=self._cancel).grid(row=0, column=2, padx=4)

        self.bind("<Return>", lambda _e: self._ok())
        self.bind("<Escape>", lambda _e: self._cancel())
        self.protocol("WM_DELETE_WINDOW", self._cancel)

        self._show_years()

        self.grab_set()
        self.transient(master)

    def _clear_body(self):
        for w in self.body.winfo_children():
            w.destroy()

    def _show_years(self):
        """Year granularity: one button per selectable year"""
        self._clear_body()
        years = range(self.first.year, self.last.year + 1)
        for i, y in enumerate(years):
            b = ttk.Button(self.body, text=str(y), width=8, command=lambda y=y: self._pick_year(y))
            b.grid(row=i // 4, column=i % 4, padx=2, pady=2)
            if y == self.v_year.get():
                b.state(["pressed"])

    def _pick_year(self, year: int):
        self.v_year.set(year)
        self._show_months()

    def _show_months(self):
        """Month grid for the chosen year; months outside the bounds are disabled"""
        self._clear_body()
        year = self.v_year.get()
        chosen = clamp_month(year, self.v_month.get(), self.first, self.last)
        self.v_month.set(chosen.month)
        self._update_header()

        for m in range(1, 13):
            b = ttk.Radiobutton(
                self.body, text=calendar.month_abbr[m], value=m, variable=self.v_month,
                command=self._update_header,
            )
            b.grid(row=(m - 1) // 4, column=(m - 1) % 4, padx=4, pady=2, sticky="w")
            if not month_in_range(date(year, m, 1), self.first, self.last):
                b.state(["disabled"])

    def _update_header(self):
        self.header_var.set(format_month(date(self.v_year.get(), self.v_month.get(), 1)))

    def _ok(self):
        """Confirm and close"""
        picked = date(self.v_year.get(), self.v_month.get(), 1)
        if not month_in_range(picked, self.first, self.last):
            return
        self.result = picked
        self.destroy()

    def _cancel(self):
        """Cancel and close"""
        self.result = None
        self.destroy()
