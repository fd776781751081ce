# -*- coding: utf-8 -*-
"""
Реестр локаций конкурса: название места → координаты.

Строится один раз при старте и передаётся в оркестратор явно.
Порядок записей сохраняется и служит тай-брейком при равных баллах.
"""

from types import MappingProxyType
from typing import Mapping, Tuple, Union

from core.models.weather_response import Coordinate
from core.utils.validator import validate_coordinates

CoordinateLike = Union[Coordinate, Tuple[float, float]]


def build_registry(locations: Mapping[str, CoordinateLike]) -> Mapping[str, Coordinate]:
    """
    Проверяет и замораживает реестр.

    Args:
        locations: {название: Coordinate | (lat, lon)}

    Returns:
        Mapping[str, Coordinate]: неизменяемое отображение

    Raises:
        ValueError: пустой реестр, пустое название или неверные координаты
    """
    if not locations:
        raise ValueError("Реестр локаций пуст")

    registry = {}
    for name, coord in locations.items():
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Неверное название локации: {name!r}")
        if not isinstance(coord, Coordinate):
            try:
                lat, lon = coord
            except (TypeError, ValueError):
                raise ValueError(f"Неверные координаты для {name}: {coord!r}") from None
            coord = Coordinate(latitude=lat, longitude=lon)
        if not validate_coordinates(coord.latitude, coord.longitude):
            raise ValueError(
                f"Неверные координаты для {name}: lat={coord.latitude}, lon={coord.longitude}"
            )
        registry[name] = Coordinate(latitude=float(coord.latitude), longitude=float(coord.longitude))

    return MappingProxyType(registry)


LOCATIONS = build_registry({
    "Islip": (40.726911, -73.218542),
    "Bryn Mawr": (40.0274743, -75.3118813),
    "Ann Arbor": (42.288873, -83.74613),
    "Dublin": (53.3403505, -6.3534707),
    "Greenville": (34.844068, -82.404295),
    "Anna Maria": (27.499887, -82.715927),
})
