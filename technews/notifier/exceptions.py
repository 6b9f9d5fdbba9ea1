class TelegramNotifierError(Exception):
    """Base exception for Telegram notification errors."""
    pass


class DeliveryError(TelegramNotifierError):
    """Raised when a message could not be delivered."""
    pass


class NotifierConnectionError(TelegramNotifierError):
    """Raised when the bot cannot connect to Telegram at startup."""
    pass
