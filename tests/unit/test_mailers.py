"""Unit tests for the mail transports."""

import logging
import smtplib
from unittest.mock import patch

import pytest

from domainwatch.domain.entities.domain import DomainEvent, EventAction
from domainwatch.domain.exceptions import DeliveryError
from domainwatch.domain.interfaces.mailer import PRIORITY_HIGHEST, EmailNotification
from domainwatch.infrastructure.mailers.console_mailer import ConsoleMailer
from domainwatch.infrastructure.mailers.smtp_mailer import SmtpMailer, build_message
from tests.conftest import utc


@pytest.fixture
def notification() -> EmailNotification:
    return EmailNotification(
        sender="watchdog@example.test",
        recipient="watcher@example.com",
        subject="A domain name has been changed",
        template="emails/domain_updated.html",
        context={"event": DomainEvent(EventAction.EXPIRATION, utc(2025, 3, 1))},
        priority=PRIORITY_HIGHEST,
        locale="fr",
    )


class TestBuildMessage:

    def test_headers(self, notification) -> None:
        message = build_message(notification)

        assert message["From"] == "watchdog@example.test"
        assert message["To"] == "watcher@example.com"
        assert message["Subject"] == "A domain name has been changed"
        assert message["X-Priority"] == "1"
        assert message["Importance"] == "high"
        assert message["Content-Language"] == "fr"

    def test_body_renders_event(self, notification) -> None:
        body = build_message(notification).get_content()

        assert "expiration" in body
        assert "2025-03-01" in body
        assert 'lang="fr"' in body


class TestSmtpMailer:
    """Tests for SmtpMailer."""

    @patch("domainwatch.infrastructure.mailers.smtp_mailer.smtplib.SMTP")
    def test_send(self, smtp_class, notification) -> None:
        mailer = SmtpMailer("smtp.example.test", 587, "user", "secret", use_tls=True)

        mailer.send(notification)

        smtp_class.assert_called_once_with("smtp.example.test", 587, timeout=30)
        smtp = smtp_class.return_value.__enter__.return_value
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("user", "secret")
        smtp.send_message.assert_called_once()

    @patch("domainwatch.infrastructure.mailers.smtp_mailer.smtplib.SMTP")
    def test_no_login_without_credentials(self, smtp_class, notification) -> None:
        SmtpMailer("smtp.example.test", 25, "", "", use_tls=False).send(notification)

        smtp = smtp_class.return_value.__enter__.return_value
        smtp.starttls.assert_not_called()
        smtp.login.assert_not_called()

    @patch("domainwatch.infrastructure.mailers.smtp_mailer.smtplib.SMTP")
    def test_smtp_failure_is_delivery_error(self, smtp_class, notification) -> None:
        smtp_class.return_value.__enter__.return_value.send_message.side_effect = (
            smtplib.SMTPRecipientsRefused({})
        )

        with pytest.raises(DeliveryError):
            SmtpMailer("smtp.example.test", 25, "", "", use_tls=False).send(notification)

    @patch("domainwatch.infrastructure.mailers.smtp_mailer.smtplib.SMTP")
    def test_connection_failure_is_delivery_error(self, smtp_class, notification) -> None:
        smtp_class.side_effect = ConnectionRefusedError("refused")

        with pytest.raises(DeliveryError, match="refused"):
            SmtpMailer("smtp.example.test", 25, "", "", use_tls=False).send(notification)


class TestConsoleMailer:

    def test_logs_notification(self, notification, caplog) -> None:
        with caplog.at_level(logging.INFO):
            ConsoleMailer().send(notification)

        assert "[NOTIFICATION] To: watcher@example.com" in caplog.text
        assert "expiration" in caplog.text
