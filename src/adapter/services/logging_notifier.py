import logging

from src.app.services.notifier import INotifier

logger = logging.getLogger(__name__)


class LoggingNotifier(INotifier):
    """
    Used when SMTP is disabled: records that a message would have been sent.

    Only the subject and recipient are logged. The body carries a live reset
    token and never reaches the logs.
    """

    async def send(self, to_address: str, subject: str, body: str) -> None:
        logger.warning("SMTP disabled, email '%s' not sent to %s", subject, to_address)
