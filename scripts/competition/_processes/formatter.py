# -*- coding: utf-8 -*-
"""
Форматирование отчёта конкурса в сообщение для Slack-вебхука.

Каждой локации — своё вложение (attachment) с цветом от красного
(худший балл) до зелёного (лучший).
"""

import json
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from core.models.weather_response import LocationScore

logger = logging.getLogger("formatter")

REPORT_HEADER = "Results of the best weather competition today are:"

LOW_COLOR: Tuple[int, int, int] = (255, 0, 0)
HIGH_COLOR: Tuple[int, int, int] = (0, 255, 0)


def relative_position(score: int, min_score: int, max_score: int) -> float:
    """
    Положение балла между худшим и лучшим, в [0, 1].

    Если все баллы равны, все локации делят первое место: 1.0.
    """
    if max_score == min_score:
        return 1.0
    return (score - min_score) / (max_score - min_score)


def interpolate_color(t: float, low=LOW_COLOR, high=HIGH_COLOR) -> str:
    """Линейная интерполяция цвета, результат в виде `#rrggbb`."""
    t = min(max(t, 0.0), 1.0)
    channels = [round(a + (b - a) * t) for a, b in zip(low, high)]
    return "#{:02x}{:02x}{:02x}".format(*channels)


def _build_fields(entry: LocationScore, with_titles: bool) -> List[Dict]:
    location_field = {"value": entry.location_name, "short": True}
    score_field = {"value": str(entry.score), "short": True}
    if with_titles:
        location_field = {"title": "Location", **location_field}
        score_field = {"title": "Score", **score_field}
    return [location_field, score_field, {"value": entry.summary}]


def format_report(
    ranked: Sequence[LocationScore],
    channel: Optional[str] = None,
    username: Optional[str] = None,
    icon_emoji: Optional[str] = None
) -> Dict:
    """
    Формирует сообщение по отсортированным результатам.

    Args:
        ranked: Результаты, лучший первым (см. rank_scores)
        channel, username, icon_emoji: Необязательные поля сообщения Slack

    Returns:
        dict: Сообщение, готовое к сериализации в JSON

    Raises:
        ValueError: Пустой список результатов
    """
    if not ranked:
        raise ValueError("Нет результатов для отчёта")

    max_score = ranked[0].score
    min_score = ranked[-1].score

    message = {"text": REPORT_HEADER}
    if username:
        message["username"] = username
    if icon_emoji:
        message["icon_emoji"] = icon_emoji
    if channel:
        message["channel"] = channel

    attachments = []
    for i, entry in enumerate(ranked):
        t = relative_position(entry.score, min_score, max_score)
        attachments.append({
            "fallback": f"{entry.location_name}: {entry.score}",
            "color": interpolate_color(t),
            "text": "",
            "fields": _build_fields(entry, with_titles=(i == 0)),
            "thumb_url": f":{entry.icon}:",
        })
    message["attachments"] = attachments

    logger.info(f"✅ Отчёт сформирован: {len(attachments)} локаций, лидер — {ranked[0].location_name}")
    return message


def render_report(message: Dict) -> str:
    """JSON с отступом в один пробел — так отчёт печатается и отправляется."""
    return json.dumps(message, indent=1, ensure_ascii=False)
