"""
Logging — настройка stdlib логгеров проекта

Инварианты:
- Идемпотентная установка handler: повторный вызов не дублирует вывод
- Логгеры проекта не пропагируют в root (без двойной печати)
- Вывод в stderr, stdout остаётся за результатами CLI
"""

import logging
import sys
from typing import Final

DEFAULT_LOGGER_NAME: Final[str] = "bigprime"

LOG_FORMAT: Final[str] = "%(asctime)s %(name)s %(levelname)s: %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def get_logger(name: str = DEFAULT_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """
    Логгер с единственным StreamHandler и компактным форматом.

    Args:
        name: Имя логгера (дочерние имена через точку, например 'bigprime.primality')
        level: Уровень логирования

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(int(level))
    logger.propagate = False

    has_handler = any(getattr(h, "_bigprime_handler", False) for h in logger.handlers)
    if not has_handler:
        handler = logging.StreamHandler(sys.stderr)
        handler._bigprime_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        if getattr(handler, "_bigprime_handler", False):
            handler.setLevel(int(level))

    return logger
