# config/app_config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from config.cache_config import CACHE_DIR, REQUEST_TIMEOUT_SEC

load_dotenv()

DEFAULT_FORECAST_BASE_URL = "https://api.pirateweather.net/forecast"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_timeout(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"{name} должен быть числом секунд: {value!r}") from None
    if not timeout > 0:
        raise ValueError(f"{name} должен быть больше нуля: {value!r}")
    return timeout


@dataclass
class AppConfig:
    webhook_url: str = ""
    use_cache: bool = False
    forecast_api_key: str = ""
    forecast_base_url: str = DEFAULT_FORECAST_BASE_URL
    request_timeout: float = REQUEST_TIMEOUT_SEC
    cache_dir: Path = CACHE_DIR
    slack_channel: str = ""
    slack_username: str = ""
    slack_icon_emoji: str = ""
    log_level: str = "INFO"

    @classmethod
    def load(cls):
        return cls(
            webhook_url=os.getenv("SLACK_WEBHOOK_URL", ""),
            use_cache=_env_bool("USE_CACHE"),
            forecast_api_key=os.getenv("FORECAST_API_KEY", ""),
            forecast_base_url=os.getenv("FORECAST_BASE_URL", DEFAULT_FORECAST_BASE_URL).rstrip("/"),
            request_timeout=_env_timeout("REQUEST_TIMEOUT", REQUEST_TIMEOUT_SEC),
            cache_dir=Path(os.getenv("CACHE_DIR", str(CACHE_DIR))),
            slack_channel=os.getenv("SLACK_CHANNEL", ""),
            slack_username=os.getenv("SLACK_USERNAME", ""),
            slack_icon_emoji=os.getenv("SLACK_ICON_EMOJI", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO")
        )
