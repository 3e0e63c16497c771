"""SMTP mail transport rendering Jinja2 templates."""
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from domainwatch.config.settings import Config
from domainwatch.domain.exceptions import DeliveryError
from domainwatch.domain.interfaces.mailer import PRIORITY_HIGHEST, EmailNotification, IMailer

logger = logging.getLogger(__name__)

_environment = Environment(
    loader=PackageLoader("domainwatch", "templates"),
    autoescape=select_autoescape(["html"]),
)


def render_notification(notification: EmailNotification) -> str:
    """Render the notification's HTML body."""
    template = _environment.get_template(notification.template)
    return template.render(locale=notification.locale, **notification.context)


def build_message(notification: EmailNotification) -> EmailMessage:
    message = EmailMessage()
    message["From"] = notification.sender
    message["To"] = notification.recipient
    message["Subject"] = notification.subject
    message["X-Priority"] = str(notification.priority)
    message["Content-Language"] = notification.locale
    if notification.priority == PRIORITY_HIGHEST:
        message["Importance"] = "high"
    message.set_content(render_notification(notification), subtype="html")
    return message


class SmtpMailer(IMailer):
    """Sends notifications through an SMTP relay, one connection per message."""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: Optional[bool] = None,
        timeout: int = 30
    ):
        self.host = host or Config.SMTP_HOST
        self.port = port or Config.SMTP_PORT
        self.username = username if username is not None else Config.SMTP_USERNAME
        self.password = password if password is not None else Config.SMTP_PASSWORD
        self.use_tls = use_tls if use_tls is not None else Config.SMTP_USE_TLS
        self.timeout = timeout

    def send(self, notification: EmailNotification) -> None:
        message = build_message(notification)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP delivery to {notification.recipient} failed: {e}")
            raise DeliveryError(str(e)) from e
        logger.debug(f"Mail '{notification.subject}' sent to {notification.recipient}")
