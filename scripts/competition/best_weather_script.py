# -*- coding: utf-8 -*-
"""
Конкурс лучшей погоды: прогон по всем локациям реестра.

Поток: реестр → (получение → разбор → оценка) для каждой локации →
ранжирование → форматирование → отправка.

Локации обрабатываются строго по очереди. Первая ошибка получения
или разбора прерывает весь запуск: частичный отчёт не отправляется.
"""

import logging
from typing import Callable, Dict, List, Mapping, Union

from core.models.weather_response import Coordinate, LocationScore
from core.utils.error_handler import ParseError, log_and_raise
from scripts.competition._processes.formatter import format_report
from scripts.competition._processes.parser import parse_forecast
from scripts.competition._processes.ranker import rank_scores
from scripts.competition._processes.scorer import score_weather
from scripts.competition._services.slack_notifier import SlackNotifier

logger = logging.getLogger("best_weather_script")

# (название, координаты) → сырой ответ API
FetchFunc = Callable[[str, Coordinate], Union[bytes, str, dict]]


def score_location(name: str, raw: Union[bytes, str, dict]) -> LocationScore:
    """Разбирает ответ и считает балл одной локации."""
    try:
        weather = parse_forecast(raw)
    except ParseError as e:
        e.context.setdefault("location", name)
        log_and_raise(f"❌ Ошибка разбора прогноза для {name}", e)

    score = score_weather(weather)
    logger.info(f"🌤️  {name}: {score} ({weather.summary})")
    return LocationScore(
        location_name=name,
        score=score,
        summary=weather.summary,
        icon=weather.icon
    )


def collect_scores(registry: Mapping[str, Coordinate], fetch: FetchFunc) -> List[LocationScore]:
    """Оценивает все локации реестра по порядку."""
    results = []
    for name, coordinate in registry.items():
        raw = fetch(name, coordinate)
        results.append(score_location(name, raw))
    return results


def run_competition(
    registry: Mapping[str, Coordinate],
    fetch: FetchFunc,
    notifier: SlackNotifier,
    channel: str = "",
    username: str = "",
    icon_emoji: str = ""
) -> Dict:
    """
    Полный прогон конкурса.

    Args:
        registry: Реестр локаций (см. config.locations)
        fetch: Функция получения сырого прогноза
        notifier: Куда отправить отчёт
        channel, username, icon_emoji: Необязательные поля сообщения Slack

    Returns:
        dict: Отправленное сообщение

    Raises:
        FetchError, ParseError: Запуск прерван, отчёт не отправлялся
        NotifyError: Отчёт сформирован, но не доставлен
    """
    logger.info(f"🚀 Запуск конкурса: {len(registry)} локаций")

    results = collect_scores(registry, fetch)
    ranked = rank_scores(results)
    message = format_report(ranked, channel=channel, username=username, icon_emoji=icon_emoji)

    notifier.send(message)
    logger.info(f"🏆 Победитель: {ranked[0].location_name} ({ranked[0].score})")
    return message
