# -*- coding: utf-8 -*-
"""
Ошибки конкурса погоды и утилиты для их логирования.

- FetchError  — сеть/транспорт или неуспешный HTTP-статус API прогноза
- ParseError  — некорректный или неожиданный JSON прогноза
- NotifyError — вебхук ответил не 200 или запрос не дошёл
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


class CompetitionError(Exception):
    """Базовая ошибка запуска конкурса."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self):
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{message} ({details})"


class FetchError(CompetitionError):
    pass


class ParseError(CompetitionError):
    pass


class NotifyError(CompetitionError):
    pass


def log_and_raise(message: str, exception: Exception, context: Optional[dict] = None):
    """
    Логирует ошибку и выбрасывает её дальше.

    Args:
        message (str): Пользовательское сообщение
        exception (Exception): Исключение, которое обрабатывается
        context (dict): Дополнительный контекст (например, location, url)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}")
    raise exception
