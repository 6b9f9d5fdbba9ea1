"""Telegram delivery of weekly summaries and error reports."""

from typing import Union

from telegram import Bot, LinkPreviewOptions
from telegram.constants import ParseMode
from telegram.error import TelegramError

from ..common.logger import get_component_logger
from ..models import NewsSummary
from .exceptions import DeliveryError, NotifierConnectionError
from .formatting import MAX_MESSAGE_LENGTH, format_error_message, format_summary_message, split_message

logger = get_component_logger("notifier.telegram")

TEST_MESSAGE = "✅ Tech News Agent is connected and ready!"


class TelegramNotifier:
    """A class to handle sending messages to a Telegram chat."""

    def __init__(self, bot: Bot, chat_id: Union[int, str]):
        """
        Initialize the TelegramNotifier with a bot object and chat ID.

        Args:
            bot (telegram.Bot): A Telegram Bot object
            chat_id: The ID of the Telegram chat
        """
        self.bot = bot
        self.chat_id = chat_id

    @classmethod
    def from_token(cls, token: str, chat_id: Union[int, str]) -> "TelegramNotifier":
        return cls(Bot(token=token), chat_id)

    async def start(self) -> None:
        """Initialize the bot and verify the token.

        Raises:
            NotifierConnectionError: If Telegram cannot be reached or rejects the token
        """
        try:
            await self.bot.initialize()
        except TelegramError as e:
            raise NotifierConnectionError(f"creating Telegram bot: {e}") from e
        logger.info(f"Connected to Telegram as @{self.bot.username}")

    async def stop(self) -> None:
        try:
            await self.bot.shutdown()
        except TelegramError as e:
            logger.error(f"Error shutting down Telegram bot: {e}")

    async def send_summary(self, summary: NewsSummary) -> None:
        """Send the summary to the configured chat, split into chunks if too long.

        Chunks are sent in order. Delivery stops at the first failing chunk; the chunks
        before it stay delivered.

        Args:
            summary: Summary to send

        Raises:
            DeliveryError: If any chunk fails to send
        """
        chunks = split_message(format_summary_message(summary), MAX_MESSAGE_LENGTH)

        for index, chunk in enumerate(chunks, start=1):
            try:
                await self.bot.send_message(
                    chat_id=self.chat_id,
                    text=chunk,
                    parse_mode=ParseMode.MARKDOWN,
                    link_preview_options=LinkPreviewOptions(is_disabled=True)
                )
            except TelegramError as e:
                raise DeliveryError(f"sending message {index}/{len(chunks)}: {e}") from e
            logger.debug(f"Sent message {index}/{len(chunks)}")

        logger.info(f"Summary delivered in {len(chunks)} message(s)")

    async def send_error(self, error: str) -> None:
        """Send an error notification as a single message.

        Raises:
            DeliveryError: If the message could not be sent
        """
        try:
            await self.bot.send_message(
                chat_id=self.chat_id,
                text=format_error_message(error),
                parse_mode=ParseMode.MARKDOWN
            )
        except TelegramError as e:
            raise DeliveryError(f"sending error message: {e}") from e

    async def send_test_message(self) -> None:
        """Send a test message to verify the bot is working.

        Raises:
            DeliveryError: If the message could not be sent
        """
        try:
            await self.bot.send_message(chat_id=self.chat_id, text=TEST_MESSAGE)
        except TelegramError as e:
            raise DeliveryError(f"test message failed: {e}") from e
