# -*- coding: utf-8 -*-
"""
Менеджер кэша ответов API прогноза.

Один файл на запрос: имя — SHA-1 от URL запроса, содержимое — сырое тело
ответа. Повторный запрос с тем же URL перезаписывает тот же файл.
Блокировок нет: программа запускается разово, не как сервис.
"""

import os
import hashlib
import logging
from pathlib import Path
from typing import Optional, Union

from config.cache_config import CACHE_DIR

logger = logging.getLogger("cache_manager")


def _resolve_dir(cache_dir: Union[str, Path, None]) -> Path:
    return Path(cache_dir) if cache_dir is not None else CACHE_DIR


def make_cache_key(request: str) -> str:
    """
    Детерминированный ключ кэша для исходящего запроса.

    Args:
        request (str): Полный URL запроса

    Returns:
        str: SHA-1 в hex
    """
    return hashlib.sha1(request.encode("utf-8")).hexdigest()


def get_cached(key: str, cache_dir: Union[str, Path, None] = None) -> Optional[bytes]:
    """
    Читает закэшированный ответ.

    Args:
        key (str): Ключ из make_cache_key
        cache_dir: Папка кэша (по умолчанию CACHE_DIR)

    Returns:
        Optional[bytes]: Тело ответа или None, если файла нет или он пуст
    """
    path = _resolve_dir(cache_dir) / key
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return None

    if not data:
        logger.debug(f"📂 Пустой файл кэша проигнорирован: {path}")
        return None

    logger.debug(f"📂 Кэш прочитан: {path}")
    return data


def put_cached(key: str, data: bytes, cache_dir: Union[str, Path, None] = None) -> Path:
    """
    Сохраняет ответ в кэш (перезаписывает существующий).

    Args:
        key (str): Ключ из make_cache_key
        data (bytes): Тело ответа
        cache_dir: Папка кэша (по умолчанию CACHE_DIR)

    Returns:
        Path: Путь к файлу
    """
    directory = _resolve_dir(cache_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / key
    path.write_bytes(data)
    logger.debug(f"💾 Ответ сохранён в кэш: {path}")
    return path


def clear_cache(cache_dir: Union[str, Path, None] = None, keep_last_n: int = 0) -> int:
    """
    Удаляет закэшированные ответы, оставляя последние N.

    Args:
        cache_dir: Папка кэша (по умолчанию CACHE_DIR)
        keep_last_n (int): Сколько самых свежих файлов оставить

    Returns:
        int: Количество удалённых файлов
    """
    directory = _resolve_dir(cache_dir)
    if not directory.exists():
        return 0

    files = [f for f in directory.iterdir() if f.is_file()]
    files.sort(key=os.path.getmtime)

    to_delete = files[:-keep_last_n] if keep_last_n > 0 else files
    for f in to_delete:
        f.unlink()
        logger.debug(f"🗑️  Удалён файл кэша: {f.name}")

    logger.info(f"🧹 Удалено {len(to_delete)} файлов кэша из {directory}")
    return len(to_delete)
