# -*- coding: utf-8 -*-
"""
Ранжирование локаций по баллу.
"""

from typing import Iterable, List

from core.models.weather_response import LocationScore


def rank_scores(scores: Iterable[LocationScore]) -> List[LocationScore]:
    """
    Сортирует по убыванию балла, лучший — первым.

    Сортировка устойчивая: при равных баллах сохраняется порядок
    реестра локаций. Исходная последовательность не меняется.
    """
    return sorted(scores, key=lambda s: s.score, reverse=True)
