from datetime import datetime, timezone

import pytest

from technews.collector import get_mock_news
from technews.settings import Settings

SETTINGS_ENV_VARS = [
    "GEMINI_API_KEY",
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "NEWS_API_KEY",
    "CRON_SCHEDULE",
    "MAX_NEWS_ARTICLES",
    "GEMINI_MODEL",
    "NEWS_CATEGORIES",
    "NEWS_REQUEST_TIMEOUT",
    "ANALYSIS_TIMEOUT",
    "LOG_LEVEL",
    "LOG_FILE",
    "LOG_USE_UTC",
]

REQUIRED_ENV = {
    "GEMINI_API_KEY": "gemini-key",
    "TELEGRAM_BOT_TOKEN": "123:bot-token",
    "TELEGRAM_CHAT_ID": "-100200300",
    "NEWS_API_KEY": "news-key",
}


@pytest.fixture
def clean_env(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def required_env(clean_env):
    for name, value in REQUIRED_ENV.items():
        clean_env.setenv(name, value)
    return clean_env


@pytest.fixture
def settings(required_env):
    return Settings(_env_file=None)


@pytest.fixture
def mock_articles():
    return get_mock_news(now=datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc))
