"""
Adaptateur SMTP (fastapi-mail): envoi des emails HTML via le relais configuré.
"""
import logging
from typing import Protocol

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from autocheck.config import Settings
from autocheck.notifications.templates import NotificationEmail

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    async def send(self, email: NotificationEmail) -> None:
        ...


def build_connection_config(settings: Settings) -> ConnectionConfig:
    """
    Relais SMTP avec upgrade TLS (STARTTLS sur 587), authentifié par EMAIL_PASSWORD.
    L'expéditeur (MAIL_FROM/MAIL_FROM_NAME) est fixé ici, pas par message.
    """
    return ConnectionConfig(
        MAIL_USERNAME=settings.mail_username,
        MAIL_PASSWORD=settings.email_password,
        MAIL_FROM=settings.mail_username,
        MAIL_FROM_NAME=settings.mail_from_name,
        MAIL_PORT=settings.mail_port,
        MAIL_SERVER=settings.mail_server,
        MAIL_STARTTLS=True,
        MAIL_SSL_TLS=False,
        USE_CREDENTIALS=True,
        VALIDATE_CERTS=True,
    )


class SmtpMailer:
    def __init__(self, fm: FastMail):
        self._fm = fm

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpMailer":
        return cls(FastMail(build_connection_config(settings)))

    async def send(self, email: NotificationEmail) -> None:
        message = MessageSchema(
            subject=email.subject,
            recipients=[email.to],
            body=email.html,
            subtype=MessageType.html,
        )
        await self._fm.send_message(message)
        logger.info("Email '%s' sent to %s", email.subject, email.to)
