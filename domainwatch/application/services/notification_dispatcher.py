"""Execution of the action bound to a matched trigger."""
import logging
from typing import Callable, Dict

from domainwatch.domain.entities.domain import DomainEvent
from domainwatch.domain.entities.watch_list import TriggerAction, User
from domainwatch.domain.interfaces.mailer import PRIORITY_HIGHEST, EmailNotification, IMailer
from domainwatch.middleware.monitoring import track_notification


logger = logging.getLogger(__name__)

DOMAIN_UPDATED_SUBJECT = "A domain name has been changed"
DOMAIN_UPDATED_TEMPLATE = "emails/domain_updated.html"


class NotificationDispatcher:
    """
    Dispatches one action per matched (event, trigger) pair.

    No deduplication or batching: one call means one send attempt.
    Actions without a registered handler are ignored.
    """

    def __init__(self, mailer: IMailer, sender_email: str, locale: str = "en"):
        """
        Initialize dispatcher with its transport (Dependency Injection).

        Args:
            mailer: Mail transport used for SendEmail actions
            sender_email: From address of every notification
            locale: Locale used to render templates
        """
        self.mailer = mailer
        self.sender_email = sender_email
        self.locale = locale
        self._handlers: Dict[TriggerAction, Callable[[DomainEvent, User], None]] = {
            TriggerAction.SEND_EMAIL: self._send_email_domain_updated,
        }

    def dispatch(self, action: TriggerAction, event: DomainEvent, user: User) -> None:
        """
        Execute ``action`` for ``event`` on behalf of ``user``.

        Raises:
            DeliveryError: If the underlying transport fails
        """
        handler = self._handlers.get(action)
        if handler is None:
            logger.debug("No handler for trigger action %s, skipping", action)
            return
        handler(event, user)

    def _send_email_domain_updated(self, event: DomainEvent, user: User) -> None:
        notification = EmailNotification(
            sender=self.sender_email,
            recipient=user.email,
            subject=DOMAIN_UPDATED_SUBJECT,
            template=DOMAIN_UPDATED_TEMPLATE,
            context={"event": event},
            priority=PRIORITY_HIGHEST,
            locale=self.locale,
        )
        try:
            self.mailer.send(notification)
        except Exception:
            track_notification(TriggerAction.SEND_EMAIL.value, False)
            raise
        track_notification(TriggerAction.SEND_EMAIL.value, True)
        logger.info("Sent %s notification to %s", event.action.value, user.email)
