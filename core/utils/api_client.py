# -*- coding: utf-8 -*-
"""
Клиент API прогноза в формате Dark Sky (Pirate Weather и совместимые).

Поддерживает:
- Один запрос по координатам: get_forecast(coordinate)
- Кэширование сырых ответов через cache_manager (только при use_cache=True)
"""

import logging
from pathlib import Path
from typing import Optional, Union

import requests

from config.cache_config import REQUEST_TIMEOUT_SEC
from core.models.weather_response import Coordinate
from core.utils.cache_manager import make_cache_key, get_cached, put_cached
from core.utils.error_handler import FetchError

logger = logging.getLogger("api_client")

# === ПАРАМЕТРЫ ЗАПРОСА ===
# Температуры в °F; лишние блоки ответа не запрашиваем
FORECAST_UNITS = "us"
FORECAST_EXCLUDE = "currently,minutely,hourly,alerts,flags"


class ForecastClient:
    """Клиент для API прогноза по координатам."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = REQUEST_TIMEOUT_SEC,
        use_cache: bool = False,
        cache_dir: Union[str, Path, None] = None,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.use_cache = use_cache
        self.cache_dir = cache_dir
        self.session = session or requests.Session()

    def mask_secret(self, text: str) -> str:
        """Убирает ключ API из текста (сообщения requests содержат URL)."""
        if not self.api_key:
            return text
        return text.replace(self.api_key, "***")

    def build_url(self, coordinate: Coordinate) -> str:
        """Полный URL запроса; одинаковые координаты дают одинаковый URL."""
        return (
            f"{self.base_url}/{self.api_key}/"
            f"{coordinate.latitude:f},{coordinate.longitude:f}"
            f"?units={FORECAST_UNITS}&exclude={FORECAST_EXCLUDE}"
        )

    def get_forecast(self, coordinate: Coordinate) -> bytes:
        """
        Получает сырой ответ прогноза.

        Args:
            coordinate (Coordinate): Координаты точки

        Returns:
            bytes: Тело ответа (JSON)

        Raises:
            FetchError: Сетевая ошибка или неуспешный HTTP-статус
        """
        url = self.build_url(coordinate)
        key = make_cache_key(url)

        # Проверяем кэш
        if self.use_cache:
            cached = get_cached(key, self.cache_dir)
            if cached:
                logger.info(f"💾 Кэш найден для ({coordinate.latitude}, {coordinate.longitude})")
                return cached

        context = {"lat": coordinate.latitude, "lon": coordinate.longitude}
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Ошибка запроса прогноза: {self.mask_secret(str(e))}", context) from e

        if not 200 <= response.status_code < 300:
            context["status"] = response.status_code
            raise FetchError("API прогноза вернул ошибку", context)

        data = response.content
        logger.info(f"✅ Прогноз получен для ({coordinate.latitude}, {coordinate.longitude})")

        # Кэшируем результат
        if self.use_cache:
            put_cached(key, data, self.cache_dir)
            logger.info(f"💾 Ответ закэширован для ({coordinate.latitude}, {coordinate.longitude})")

        return data
