"""
Logs — настройка логирования

Модули пишут в logging.getLogger(__name__); приложение один раз
вызывает setup_logging() при запуске.
"""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, fmt: Optional[str] = None) -> None:
    """Настройка корневого логгера (один StreamHandler, без дублей)."""
    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
        root.addHandler(handler)
