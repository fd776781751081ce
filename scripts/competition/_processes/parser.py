# -*- coding: utf-8 -*-
"""
Разбор ответа API прогноза.

Из всего документа нужен только первый дневной блок `daily.data[0]`.
"""

import json
import logging
import math
from typing import Union

from core.models.weather_response import DailyWeather
from core.utils.error_handler import ParseError

logger = logging.getLogger("parser")

# поле JSON → поле DailyWeather
FRACTION_FIELDS = {
    "humidity": "humidity",
    "cloudCover": "cloud_cover",
    "precipProbability": "precip_probability",
}
TEMPERATURE_FIELDS = {
    "temperatureMax": "temperature_max",
    "temperatureMin": "temperature_min",
}


def _number(day: dict, field: str) -> float:
    value = day.get(field)
    # bool — подкласс int, но числом здесь не считается
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError("Поле отсутствует или не является числом", {"field": field, "value": value})
    value = float(value)
    if not math.isfinite(value):
        raise ParseError("Поле не является конечным числом", {"field": field, "value": value})
    return value


def _optional_number(day: dict, field: str):
    value = day.get(field)
    if value is None:
        return None
    return _number(day, field)


def parse_forecast(raw: Union[bytes, str, dict]) -> DailyWeather:
    """
    Извлекает погоду на сегодня из ответа API.

    Args:
        raw: Тело ответа (bytes/str) или уже разобранный dict

    Returns:
        DailyWeather: Поля первого дня прогноза

    Raises:
        ParseError: Некорректный JSON или неожиданная структура
    """
    if isinstance(raw, dict):
        document = raw
    else:
        try:
            document = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise ParseError(f"Некорректный JSON: {e}") from e

    if not isinstance(document, dict):
        raise ParseError("Ответ не является JSON-объектом")

    daily = document.get("daily")
    if not isinstance(daily, dict):
        raise ParseError("В ответе отсутствует блок daily")

    data = daily.get("data")
    if not isinstance(data, list) or not data:
        raise ParseError("В блоке daily нет данных")

    today = data[0]
    if not isinstance(today, dict):
        raise ParseError("Первый дневной блок не является объектом")

    values = {}
    for field, attr in FRACTION_FIELDS.items():
        value = _number(today, field)
        if not 0 <= value <= 1:
            raise ParseError("Значение вне диапазона [0, 1]", {"field": field, "value": value})
        values[attr] = value

    for field, attr in TEMPERATURE_FIELDS.items():
        values[attr] = _number(today, field)

    time = _optional_number(today, "time")

    weather = DailyWeather(
        summary=str(today.get("summary") or ""),
        icon=str(today.get("icon") or ""),
        pressure=_optional_number(today, "pressure"),
        time=int(time) if time is not None else None,
        **values
    )
    logger.debug(f"🔍 Разобран прогноз: {weather}")
    return weather
