import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import GameConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    level = (level or GameConfig.LOG_LEVEL or "WARNING").upper()
    log_file = log_file or GameConfig.LOG_FILE

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    fmt = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=GameConfig.LOG_MAX_MB * 1024 * 1024,
            backupCount=GameConfig.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
