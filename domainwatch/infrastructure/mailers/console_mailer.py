"""Console mail transport - logs notifications instead of sending them."""
import logging

from domainwatch.domain.interfaces.mailer import EmailNotification, IMailer

logger = logging.getLogger(__name__)


class ConsoleMailer(IMailer):
    """For development - logs the notification at INFO level."""

    def send(self, notification: EmailNotification) -> None:
        event = notification.context.get("event")
        logger.info(
            "[NOTIFICATION] To: %s Subject: %s Event: %s",
            notification.recipient,
            notification.subject,
            getattr(getattr(event, "action", None), "value", event),
        )
