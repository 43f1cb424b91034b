import os

from config_logging import logging_config


def test_file_handler_writes_into_log_dir(tmp_path):
    cfg = logging_config(str(tmp_path), console_level="WARNING")
    assert cfg["handlers"]["file"]["filename"] == os.path.join(str(tmp_path), "cashback_rewards.log")
    assert cfg["handlers"]["console"]["level"] == "WARNING"
    assert cfg["loggers"][""]["handlers"] == ["console", "file"]
