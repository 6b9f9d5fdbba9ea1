# Local imports
from .analyzer import AIAnalyzer, format_week_range
from .exceptions import AnalyzerError, EmptyInputError, GenerationError
from .initialize import initialize, list_available_models
from .insights import DEFAULT_KEY_TOPICS, DEFAULT_TRENDING_STORIES, extract_insights

__all__ = [
    "AIAnalyzer",
    "format_week_range",
    "initialize",
    "list_available_models",
    "extract_insights",
    "DEFAULT_KEY_TOPICS",
    "DEFAULT_TRENDING_STORIES",
    "AnalyzerError",
    "GenerationError",
    "EmptyInputError"
]
