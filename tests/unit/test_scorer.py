# -*- coding: utf-8 -*-
"""
Тесты для scripts/competition/_processes/scorer.py
"""
from core.models.weather_response import DailyWeather
from scripts.competition._processes.scorer import (
    PERFECT_MAX_TEMP,
    reflect,
    max_temp_term,
    min_temp_term,
    cloud_term,
    precip_term,
    humidity_term,
    score_weather
)


def make_weather(**overrides) -> DailyWeather:
    values = dict(
        humidity=0.6,
        cloud_cover=0.0,
        precip_probability=0.0,
        temperature_max=80.0,
        temperature_min=60.0,
        summary="Clear",
        icon="clear-day"
    )
    values.update(overrides)
    return DailyWeather(**values)


def test_ideal_day_scores_600():
    # 2*(80+20) + (60+40) + 100 + 100 + (60+40)
    assert score_weather(make_weather()) == 600
    print("✅ test_ideal_day_scores_600 passed")


def test_reflect():
    assert reflect(90, 80) == 70
    assert reflect(70, 80) == 70
    assert reflect(80, 80) == 80


def test_max_temp_reflection_symmetry():
    for d in [0, 1, 2.5, 7, 12.5, 20, 45]:
        above = max_temp_term(PERFECT_MAX_TEMP + d)
        below = max_temp_term(PERFECT_MAX_TEMP - d)
        assert above == below, f"d={d}: {above} != {below}"


def test_min_temp_term():
    assert min_temp_term(60) == 100
    assert min_temp_term(70) == 90
    assert min_temp_term(50) == 90


def test_temperature_terms_truncated_at_summation():
    # 2 * (79.7 + 20) = 199.4 → 199, а не 2 * int(99.7) = 198
    assert score_weather(make_weather(temperature_max=80.3)) == 599
    # 59.5 + 40 = 99.5 → 99
    assert score_weather(make_weather(temperature_min=60.5)) == 599


def test_fraction_terms_truncated():
    assert cloud_term(0.0) == 100
    assert cloud_term(1.0) == 0
    assert cloud_term(0.333) == 66
    assert precip_term(0.5) == 50
    assert humidity_term(0.6) == 100
    assert humidity_term(0.5) == 90


def test_score_monotonic_in_cloud_cover():
    values = [i / 20 for i in range(21)]
    scores = [score_weather(make_weather(cloud_cover=c)) for c in values]
    # облачность растёт → балл не растёт
    assert all(a >= b for a, b in zip(scores, scores[1:]))


def test_score_monotonic_in_precip_probability():
    values = [i / 20 for i in range(21)]
    scores = [score_weather(make_weather(precip_probability=p)) for p in values]
    assert all(a >= b for a, b in zip(scores, scores[1:]))


def test_humidity_term_closer_to_ideal_never_worse():
    below = [0.0, 0.1, 0.25, 0.4, 0.5, 0.6]
    above = [1.0, 0.9, 0.75, 0.7, 0.6]
    for series in (below, above):
        terms = [humidity_term(h) for h in series]
        assert all(a <= b for a, b in zip(terms, terms[1:])), series


def test_extreme_weather_still_integer():
    weather = make_weather(
        temperature_max=110, temperature_min=-10,
        humidity=0.2, cloud_cover=1.0, precip_probability=1.0
    )
    # 2*(50+20) + (-10+40) + 0 + 0 + (20+40)
    assert score_weather(weather) == 230
    assert isinstance(score_weather(weather), int)


if __name__ == "__main__":
    test_ideal_day_scores_600()
    test_max_temp_reflection_symmetry()
