from .exceptions import DeliveryError, NotifierConnectionError, TelegramNotifierError
from .formatting import MAX_MESSAGE_LENGTH, format_error_message, format_summary_message, split_message
from .telegram import TEST_MESSAGE, TelegramNotifier

__all__ = [
    "TelegramNotifier",
    "TEST_MESSAGE",
    "MAX_MESSAGE_LENGTH",
    "format_summary_message",
    "format_error_message",
    "split_message",
    "TelegramNotifierError",
    "DeliveryError",
    "NotifierConnectionError"
]
