# reportcard/core/logger.py
import logging
import sys

from reportcard.core.config import CONFIG

_logger = logging.getLogger("reportcard")
if not _logger.handlers:
    _logger.setLevel(CONFIG.LOG_LEVEL.upper())
    # stderr keeps log lines out of the printed report cards
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return _logger.getChild(name)
    return _logger
