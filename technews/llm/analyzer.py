"""AI-powered analysis of the collected news using Gemini."""

import asyncio
from datetime import datetime, timedelta
from typing import Any, Optional, Sequence

import google.generativeai as genai

from ..common.logger import get_component_logger
from ..models import Article, NewsSummary
from .exceptions import EmptyInputError, GenerationError
from .initialize import initialize
from .insights import extract_insights
from .prompts import build_analysis_prompt

logger = get_component_logger("llm.analyzer")

TEMPERATURE = 0.7
TOP_P = 0.9
TOP_K = 40
MAX_OUTPUT_TOKENS = 2048


def format_week_range(now: datetime) -> str:
    """Label for the week ending at `now`, e.g. "Oct 12 - Oct 19, 2026"."""
    week_ago = now - timedelta(days=7)
    return f"{week_ago.strftime('%b %d')} - {now.strftime('%b %d, %Y')}"


def _first_text(response: Any) -> str:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return ""
    return getattr(parts[0], "text", "") or ""


class AIAnalyzer:
    """Summarizes a week of articles with a Gemini model.

    The analyzer owns the model handle for the lifetime of the process; call close()
    (or use the analyzer as an async context manager) exactly once at shutdown.
    """

    def __init__(self, api_key: str, model_name: str, model: Optional[Any] = None):
        """
        Args:
            api_key: Gemini API key
            model_name: Name of the Gemini model to use
            model: Preconfigured model exposing generate_content_async(), built from
                model_name if omitted
        """
        if model is None:
            initialize(api_key)
            generation_config = genai.types.GenerationConfig(
                temperature=TEMPERATURE,
                top_p=TOP_P,
                top_k=TOP_K,
                max_output_tokens=MAX_OUTPUT_TOKENS,
            )
            model = genai.GenerativeModel(model_name, generation_config=generation_config)

        self._model = model
        self._model_name = model_name

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def closed(self) -> bool:
        return self._model is None

    def close(self) -> None:
        if self._model is None:
            return
        logger.debug(f"Releasing Gemini model {self._model_name}")
        self._model = None

    async def __aenter__(self) -> "AIAnalyzer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def analyze_news(
        self,
        articles: Sequence[Article],
        deadline: float,
        now: Optional[datetime] = None
    ) -> NewsSummary:
        """Generate a weekly summary of the given articles.

        Args:
            articles: Articles to analyze, must not be empty
            deadline: Absolute event loop time (loop.time()) by which the model must respond
            now: Generation time, defaults to the current local time

        Returns:
            NewsSummary built from the model response

        Raises:
            EmptyInputError: If there are no articles
            GenerationError: If the model call fails, times out or returns no text
        """
        if not articles:
            raise EmptyInputError("no articles to analyze")
        if self._model is None:
            raise GenerationError("analyzer is closed")

        prompt = build_analysis_prompt(articles)

        remaining = deadline - asyncio.get_running_loop().time()
        if remaining <= 0:
            raise GenerationError("analysis deadline exceeded before the request was sent")

        logger.info(f"Sending {len(articles)} articles to Gemini model {self._model_name}")

        try:
            response = await asyncio.wait_for(
                self._model.generate_content_async(prompt, request_options={"timeout": remaining}),
                timeout=remaining
            )
        except asyncio.TimeoutError as e:
            raise GenerationError(f"no response within {remaining:.1f} seconds") from e
        except Exception as e:
            logger.error(f"Error generating response: {e}")
            raise GenerationError(f"generating content: {e}") from e

        summary_text = _first_text(response)
        if not summary_text:
            raise GenerationError("no response generated")

        key_topics, trending_stories = extract_insights(summary_text)

        if now is None:
            now = datetime.now().astimezone()

        return NewsSummary(
            week_range=format_week_range(now),
            total_articles=len(articles),
            summary=summary_text,
            key_topics=key_topics,
            trending_stories=trending_stories,
            generated_at=now,
        )
