"""Weekly tech news agent: NewsAPI collection, Gemini analysis, Telegram delivery."""

__version__ = "0.1.0"
