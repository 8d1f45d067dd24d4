"""
Logging: логгеры пакета и rich-вывод для хост-приложения

Все модули пакета пишут в дочерние логгеры `uscu.*` (только DEBUG-трассировка
токенизации и вычисления). Библиотека не трогает корневой логгер:
configure_logging() вешает RichHandler только на логгер `uscu`.
"""

from __future__ import annotations

import logging
from typing import Final, Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER: Final[str] = "uscu"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Логгер внутри иерархии `uscu`; без имени: корневой логгер пакета."""
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO, stderr: bool = True) -> logging.Logger:
    """
    Вывод логов пакета через rich; DEBUG показывает трассировку движка.

    Повторный вызов заменяет ранее установленный RichHandler, а не
    добавляет второй.

    Returns:
        Логгер `uscu`
    """
    logger = get_logger()
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=stderr), rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
