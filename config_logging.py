"""
Logging configuration for Cashback Rewards
"""
from __future__ import annotations
import os


def logging_config(log_dir: str, console_level: str = "INFO") -> dict:
    """dictConfig for a console handler plus a rotating file in `log_dir`"""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
            "verbose": {
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": console_level,
                "formatter": "simple",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "verbose",
                "filename": os.path.join(log_dir, "cashback_rewards.log"),
                "maxBytes": 1_000_000,
                "backupCount": 3,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "": {"level": "DEBUG", "handlers": ["console", "file"]},
            # openpyxl is chatty about workbook internals
            "openpyxl": {"level": "WARNING", "propagate": True},
        },
    }
