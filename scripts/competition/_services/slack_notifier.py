# -*- coding: utf-8 -*-
"""
Доставка отчёта в Slack через входящий вебхук.

Без URL вебхука отчёт печатается в stdout как JSON.
"""

import sys
import logging
from typing import Dict, Optional, TextIO

import requests

from config.cache_config import REQUEST_TIMEOUT_SEC
from core.utils.error_handler import NotifyError
from scripts.competition._processes.formatter import render_report

logger = logging.getLogger("slack_notifier")


class SlackNotifier:
    """Отправитель отчётов в Slack (или в поток вывода)."""

    def __init__(
        self,
        webhook_url: str = "",
        timeout: float = REQUEST_TIMEOUT_SEC,
        stream: Optional[TextIO] = None,
        session: Optional[requests.Session] = None
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.stream = stream
        self.session = session or requests.Session()

    def send(self, message: Dict) -> bool:
        """
        Отправляет сообщение.

        Returns:
            bool: True при успехе

        Raises:
            NotifyError: Вебхук ответил не 200 или запрос не дошёл
        """
        body = render_report(message)

        if not self.webhook_url:
            stream = self.stream if self.stream is not None else sys.stdout
            stream.write(body + "\n")
            stream.flush()
            logger.info("🖨️  Вебхук не задан, отчёт выведен в stdout")
            return True

        try:
            response = self.session.post(
                self.webhook_url,
                data=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NotifyError(f"Не удалось отправить отчёт: {e}") from e

        if response.status_code != 200:
            raise NotifyError(
                "Вебхук вернул ошибку",
                {"status": response.status_code, "body": response.text[:200]}
            )

        logger.info("📨 Отчёт отправлен в Slack")
        return True
