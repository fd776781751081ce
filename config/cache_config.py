# -*- coding: utf-8 -*-
"""
Конфигурация путей проекта: кэш ответов API и логи.
"""

from pathlib import Path

# === Корень проекта ===
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# === Кэш ответов прогноза (один файл на запрос) ===
CACHE_DIR = PROJECT_ROOT / "cache"

# === Логи ===
LOGS_DIR = PROJECT_ROOT / "logs"
LOG_FILE_NAME = "best_weather.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# === HTTP ===
REQUEST_TIMEOUT_SEC = 30
