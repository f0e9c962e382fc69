import logging
import os
import sys
from datetime import datetime
from typing import Optional

from city_overlays.config import LOGGER_NAME, LOG_DIR, LOG_FORMAT, LOG_LEVEL


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package root logger. Library code only logs;
    handlers are attached by OverlayLogger."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class OverlayLogger:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(OverlayLogger, cls).__new__(cls)
            cls._instance._setup()
        return cls._instance

    def _setup(self):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        self.file_path: Optional[str] = None

        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(sh)

    def log_to_file(self, path: Optional[str] = None) -> str:
        """Attach a file handler. Defaults to a dated file under LOG_DIR."""
        if self.file_path is not None:
            return self.file_path
        if path is None:
            path = os.path.join(LOG_DIR, f'overlays_{datetime.now().strftime("%Y%m%d")}.log')
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(fh)
        self.file_path = path
        return path

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(self, category: str, message: str):
        self.logger.info(f"[{category}] {message}")
