"""
Cashback Rewards GUI
- See cashback earned all-time and per month, broken down by category.
- Spot cashback missed on purchases outside cashback categories.
- Import/export transactions as CSV and export a monthly Excel report.

Run:
  python cashback_rewards_gui.py [ledger.json]

Dependencies:
  pip install openpyxl
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations
import logging
import logging.config
import os
import sys

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

from config import ledger_path, load_settings
from config_logging import logging_config
from utils import app_dir

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the application"""
    argv = sys.argv[1:] if argv is None else argv
    base = app_dir()
    logging.config.dictConfig(logging_config(base))

    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )

    from main_app import CashbackRewardsApp

    settings = load_settings(os.path.join(base, "settings.json"))
    path = argv[0] if argv else ledger_path(settings)
    logger.info("Starting Cashback Rewards with ledger %s", path)

    root = tk.Tk()
    CashbackRewardsApp(root, settings=settings, ledger_path=path)
    root.mainloop()


if __name__ == "__main__":
    main()
