# config/logging_config.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from config.cache_config import LOGS_DIR, LOG_FILE_NAME, LOG_MAX_BYTES, LOG_BACKUP_COUNT


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None):
    """Настраивает глобальное логирование с ротацией.

    Консольный вывод идёт в stderr: stdout занят отчётом в JSON.
    """
    log_dir = Path(log_dir) if log_dir else LOGS_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    # Создаём root-логгер
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Форматтер
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Обработчики создаём только для пустого root-логгера, иначе файл остаётся открытым
    if not logger.handlers:
        # Обработчик для файла (с ротацией 10 МБ, 5 файлов)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)

        # Обработчик для консоли
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    # Подавляем дублирующие логи от requests/urllib3
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.info("🔧 Логирование инициализировано")
