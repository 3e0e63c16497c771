"""Mail transports."""
from domainwatch.infrastructure.mailers.console_mailer import ConsoleMailer
from domainwatch.infrastructure.mailers.smtp_mailer import SmtpMailer, render_notification

__all__ = ["ConsoleMailer", "SmtpMailer", "render_notification"]
