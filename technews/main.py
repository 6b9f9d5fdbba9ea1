"""Command line entry point for the tech news agent."""

import argparse
import asyncio
import sys
from typing import List, Optional

from .agent import PipelineError, build_agent
from .common.logger import get_component_logger, setup_logger
from .llm import list_available_models
from .notifier import DeliveryError, TelegramNotifierError
from .scheduler import run_scheduler
from .settings import ConfigurationError, Settings, load_settings

logger = get_component_logger("main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="technews-agent",
        description="Collect weekly tech news, summarize it with Gemini and post it to Telegram"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--test", action="store_true", help="Run once immediately for testing")
    mode.add_argument("--test-connection", action="store_true", help="Test connections only")
    mode.add_argument("--list-models", action="store_true", help="List available Gemini models and exit")
    return parser.parse_args(argv)


def print_available_models(settings: Settings) -> None:
    print("📦 Available models:")
    for name, methods in list_available_models(settings.gemini_api_key):
        print(f"- {name}")
        print(f"  Supported methods: {', '.join(methods)}\n")


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Build the agent and execute the requested mode.

    Returns:
        Process exit code
    """
    try:
        agent = await build_agent(settings)
    except TelegramNotifierError as e:
        logger.error(f"Failed to create news agent: {e}")
        return 1

    try:
        if args.test_connection:
            logger.info("Testing connections...")
            try:
                await agent.test_connection()
            except DeliveryError as e:
                logger.error(f"Connection test failed: {e}")
                return 1
            logger.info("✅ Connection test passed!")
            return 0

        if args.test:
            logger.info("Running in test mode (single execution)...")
            try:
                await agent.run()
            except PipelineError as e:
                logger.error(f"Test run failed: {e}")
                return 1
            logger.info("Test run completed successfully!")
            return 0

        logger.info(f"Running in production mode with schedule: {settings.cron_schedule}")
        logger.info("Press Ctrl+C to stop")
        await run_scheduler(agent, settings.cron_schedule)
        logger.info("Goodbye!")
        return 0
    finally:
        await agent.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    setup_logger()
    logger.info("🚀 Tech News Agent starting...")

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Failed to load configuration: {e}")
        return 1

    setup_logger(settings.log_level, settings.log_file, settings.log_use_utc)
    logger.info("Configuration loaded successfully")
    logger.info(f"Using Gemini model: {settings.gemini_model}")
    logger.info(f"Schedule: {settings.cron_schedule}")

    if args.list_models:
        try:
            print_available_models(settings)
        except Exception as e:
            logger.error(f"Failed to list models: {e}")
            return 1
        return 0

    try:
        return asyncio.run(run(args, settings))
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
        return 0


if __name__ == "__main__":
    sys.exit(main())
