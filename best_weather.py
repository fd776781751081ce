# best_weather.py
# -*- coding: utf-8 -*-
"""
Точка входа: конкурс лучшей погоды.

Запуск (например, по расписанию cron / Task Scheduler):
    python best_weather.py --webhook https://hooks.slack.com/services/...
    python best_weather.py -c            # с кэшем ответов, отчёт в stdout
    python best_weather.py --clear-cache
"""
import argparse
import logging
import sys
from typing import List, Optional

from config.app_config import AppConfig
from config.locations import LOCATIONS
from config.logging_config import setup_logging
from core.utils.api_client import ForecastClient
from core.utils.cache_manager import clear_cache
from core.utils.error_handler import CompetitionError
from core.utils.validator import validate_webhook_url
from scripts.competition._processes.data_fetcher import fetch_forecast
from scripts.competition._services.slack_notifier import SlackNotifier
from scripts.competition.best_weather_script import run_competition


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Сравнивает прогноз погоды по локациям и публикует рейтинг в Slack"
    )
    parser.add_argument("--webhook", default=config.webhook_url,
                        help="Webhook URL for a slack channel (пусто — вывод в stdout)")
    parser.add_argument("-c", "--cache", action=argparse.BooleanOptionalAction, default=config.use_cache,
                        help="Cache the results from the weather service. (For testing); --no-cache отключает USE_CACHE")
    parser.add_argument("--clear-cache", action="store_true",
                        help="Удалить закэшированные ответы и выйти")
    parser.add_argument("--log-level", default=config.log_level,
                        help="Уровень логирования в консоли (DEBUG, INFO, ...)")
    return parser


def main(argv: Optional[List[str]] = None, config: Optional[AppConfig] = None) -> int:
    if config is None:
        try:
            config = AppConfig.load()
        except ValueError as e:
            setup_logging()
            logging.critical(f"❌ Ошибка конфигурации: {e}")
            return 1
    args = build_parser(config).parse_args(argv)

    setup_logging(args.log_level)
    logging.info("🚀 Запуск конкурса лучшей погоды")

    if args.clear_cache:
        removed = clear_cache(config.cache_dir)
        logging.info(f"🧹 Кэш очищен: {removed} файлов")
        return 0

    if not validate_webhook_url(args.webhook):
        logging.critical(f"❌ Неверный URL вебхука: {args.webhook}")
        return 1
    if not config.forecast_api_key:
        logging.critical("❌ FORECAST_API_KEY не задан")
        return 1

    client = ForecastClient(
        api_key=config.forecast_api_key,
        base_url=config.forecast_base_url,
        timeout=config.request_timeout,
        use_cache=args.cache,
        cache_dir=config.cache_dir
    )
    notifier = SlackNotifier(webhook_url=args.webhook, timeout=config.request_timeout)

    try:
        run_competition(
            LOCATIONS,
            lambda name, coordinate: fetch_forecast(client, name, coordinate),
            notifier,
            channel=config.slack_channel,
            username=config.slack_username,
            icon_emoji=config.slack_icon_emoji
        )
    except CompetitionError as e:
        logging.critical(f"💥 Запуск прерван: {e}")
        return 1

    logging.info("✅ Конкурс завершён")
    return 0


if __name__ == "__main__":
    sys.exit(main())
