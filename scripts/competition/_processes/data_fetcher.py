# -*- coding: utf-8 -*-
"""
Получение сырых данных прогноза через api_client.
"""

import logging

from core.models.weather_response import Coordinate
from core.utils.api_client import ForecastClient
from core.utils.error_handler import FetchError, log_and_raise

logger = logging.getLogger("data_fetcher")


def fetch_forecast(client: ForecastClient, name: str, coordinate: Coordinate) -> bytes:
    """
    Получает прогноз для одной локации.

    Args:
        client (ForecastClient): Клиент API
        name (str): Название локации
        coordinate (Coordinate): Координаты

    Returns:
        bytes: Сырой ответ

    Raises:
        FetchError: Данные получить не удалось
    """
    try:
        data = client.get_forecast(coordinate)
    except FetchError as e:
        e.context.setdefault("location", name)
        log_and_raise(f"❌ Не удалось получить прогноз для {name}", e)

    logger.info(f"✅ Данные получены для {name} ({len(data)} байт)")
    return data
