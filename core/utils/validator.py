# core/utils/validator.py
from urllib.parse import urlparse


def validate_coordinates(lat, lon) -> bool:
    """Проверяет, что координаты числовые и в допустимом диапазоне."""
    try:
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def validate_webhook_url(url: str) -> bool:
    """Пустой URL допустим (режим stdout), иначе нужен http(s) и хост."""
    if not url:
        return True
    if not isinstance(url, str):
        return False
    parsed = urlparse(url.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
