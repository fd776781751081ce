# -*- coding: utf-8 -*-
"""
Оценка «приятности» погоды одним целым числом.

Эвристика: температура ближе к идеальной полосе — лучше; облачность,
вероятность осадков и отклонение влажности от идеала — штраф.
Баллы не нормируются и сравнимы только внутри одного запуска.
"""

import logging

from core.models.weather_response import DailyWeather

logger = logging.getLogger("scorer")

# === ИДЕАЛЬНЫЕ ЗНАЧЕНИЯ ===
PERFECT_MAX_TEMP = 80    # °F
PERFECT_MIN_TEMP = 60    # °F
PERFECT_HUMIDITY = 0.6

MAX_TEMP_WEIGHT = 2


def reflect(value: float, ideal: float) -> float:
    """Отражает значение выше идеала вниз: ideal + d и ideal - d равноценны."""
    if value > ideal:
        return ideal * 2 - value
    return value


def max_temp_term(temperature_max: float) -> float:
    return reflect(temperature_max, PERFECT_MAX_TEMP) + (100 - PERFECT_MAX_TEMP)


def min_temp_term(temperature_min: float) -> float:
    return reflect(temperature_min, PERFECT_MIN_TEMP) + (100 - PERFECT_MIN_TEMP)


def cloud_term(cloud_cover: float) -> int:
    return int((1.0 - cloud_cover) * 100)


def precip_term(precip_probability: float) -> int:
    return int((1.0 - precip_probability) * 100)


def humidity_term(humidity: float) -> int:
    return int(reflect(humidity, PERFECT_HUMIDITY) * 100 + 40)


def score_weather(weather: DailyWeather) -> int:
    """
    Считает итоговый балл дня.

    Температурные слагаемые усекаются только при суммировании,
    остальные три — до него. Порядок усечения влияет на результат.

    Args:
        weather (DailyWeather): Погода на день

    Returns:
        int: Балл (больше — приятнее)
    """
    tmax = max_temp_term(weather.temperature_max)
    tmin = min_temp_term(weather.temperature_min)
    ccover = cloud_term(weather.cloud_cover)
    precip = precip_term(weather.precip_probability)
    humid = humidity_term(weather.humidity)

    total = int(tmax * MAX_TEMP_WEIGHT) + int(tmin) + ccover + precip + humid
    logger.debug(
        f"📊 tmax={tmax:.2f} tmin={tmin:.2f} cloud={ccover} precip={precip} humid={humid} → {total}"
    )
    return total
