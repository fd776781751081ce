# core/models/weather_response.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class DailyWeather:
    humidity: float            # 0..1
    cloud_cover: float         # 0..1
    precip_probability: float  # 0..1
    temperature_max: float     # °F
    temperature_min: float     # °F
    summary: str = ""
    icon: str = ""
    pressure: Optional[float] = None
    time: Optional[int] = None  # unix time начала дня


@dataclass(frozen=True)
class LocationScore:
    location_name: str
    score: int
    summary: str
    icon: str
