"""Orchestration of the weekly collect, analyze and notify workflow."""

import asyncio
from typing import List

from .collector import CollectionError, NewsCollector, get_mock_news
from .common.logger import get_component_logger
from .llm import AIAnalyzer, AnalyzerError
from .models import Article, NewsSummary
from .notifier import DeliveryError, TelegramNotifier
from .settings import Settings

logger = get_component_logger("agent")


class PipelineError(Exception):
    """Raised when a run fails in the analysis or notification stage."""

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage}: {message}")
        self.stage = stage


class NewsAgent:
    """Runs the three stages of the workflow in strict sequence.

    Collection never fails a run: when no live articles can be fetched the mock
    article set is analyzed instead. Analysis failures are reported to the chat on
    a best-effort basis and raised; notification failures are raised as they are.
    """

    def __init__(
        self,
        settings: Settings,
        collector: NewsCollector,
        analyzer: AIAnalyzer,
        notifier: TelegramNotifier
    ):
        self.settings = settings
        self.collector = collector
        self.analyzer = analyzer
        self.notifier = notifier

    async def close(self) -> None:
        """Release the clients owned by the agent."""
        self.analyzer.close()
        self.collector.close()
        await self.notifier.stop()

    async def _collect(self) -> List[Article]:
        logger.info("Step 1/3: Collecting news articles...")
        try:
            articles = await asyncio.to_thread(
                self.collector.fetch_weekly_news, self.settings.news_categories
            )
        except CollectionError as e:
            logger.error(f"Error collecting news: {e}")
            logger.warning("Using mock data instead of live articles")
            articles = get_mock_news()
        logger.info(f"Collected {len(articles)} articles")
        return articles

    async def run(self) -> NewsSummary:
        """Execute the complete workflow once.

        Returns:
            The summary that was delivered

        Raises:
            PipelineError: If the analysis or the notification stage fails
        """
        logger.info("Starting weekly news collection and analysis...")
        articles = await self._collect()

        logger.info("Step 2/3: Analyzing articles with Gemini AI...")
        # The analysis budget starts with the stage, not with the run
        deadline = asyncio.get_running_loop().time() + self.settings.analysis_timeout
        try:
            summary = await self.analyzer.analyze_news(articles, deadline)
        except AnalyzerError as e:
            error_message = f"AI analysis failed: {e}"
            logger.error(error_message)
            try:
                await self.notifier.send_error(error_message)
            except DeliveryError as notify_error:
                logger.error(f"Failed to send error notification: {notify_error}")
            raise PipelineError("analyzing news", str(e)) from e
        logger.info("Analysis complete")

        logger.info("Step 3/3: Sending summary via Telegram...")
        try:
            await self.notifier.send_summary(summary)
        except DeliveryError as e:
            logger.error(f"Failed to send Telegram notification: {e}")
            raise PipelineError("sending notification", str(e)) from e

        logger.info("✅ Weekly news summary sent successfully!")
        return summary

    async def test_connection(self) -> None:
        """Send a test message through the notifier.

        Raises:
            DeliveryError: If the test message could not be sent
        """
        logger.info("Testing Telegram connection...")
        await self.notifier.send_test_message()
        logger.info("✅ All connections successful")


async def build_agent(settings: Settings) -> NewsAgent:
    """Create the agent and its clients from the settings.

    Raises:
        NotifierConnectionError: If the Telegram bot cannot be initialized
    """
    collector = NewsCollector(
        api_key=settings.news_api_key,
        max_results=settings.max_news_articles,
        timeout=settings.news_request_timeout
    )
    analyzer = AIAnalyzer(settings.gemini_api_key, settings.gemini_model)
    notifier = TelegramNotifier.from_token(settings.telegram_bot_token, settings.telegram_chat_id)

    try:
        await notifier.start()
    except Exception:
        analyzer.close()
        collector.close()
        raise

    return NewsAgent(settings, collector, analyzer, notifier)
