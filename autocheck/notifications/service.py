"""
Cas d'usage 'notifications': emails envoyés quand une session est observée payée.
"""
import asyncio
import logging
from typing import Any, Dict, List

from autocheck.config import Settings
from autocheck.errors import MailError
from autocheck.notifications.mailer import Mailer
from autocheck.notifications.templates import (
    NotificationEmail,
    compose_admin_email,
    compose_customer_email,
)
from autocheck.payments.metadata import extract_order_details

logger = logging.getLogger(__name__)


class PaymentNotifier:
    """
    Point d'entrée unique des notifications de paiement.
    Aucun suivi "déjà notifié": chaque appel renvoie les deux emails.
    """

    def __init__(self, mailer: Mailer, admin_email: str):
        self.mailer = mailer
        self.admin_email = admin_email

    @classmethod
    def from_settings(cls, settings: Settings, mailer: Mailer) -> "PaymentNotifier":
        return cls(mailer, admin_email=settings.admin_email)

    def compose(self, session: Dict[str, Any]) -> List[NotificationEmail]:
        """Retourne [confirmation client, notification admin] pour une session payée."""
        order = extract_order_details(session)
        return [
            compose_customer_email(order),
            compose_admin_email(order, self.admin_email),
        ]

    async def notify_order_paid(self, session: Dict[str, Any]) -> None:
        """
        Envoie les deux emails en parallèle et attend la fin des deux envois.
        - Un échec sur l'un fait échouer l'ensemble (MailError), même si l'autre est parti.
        - Chaque échec est loggé. Pas de retry, pas de rollback.
        """
        emails = self.compose(session)
        results = await asyncio.gather(
            *(self.mailer.send(email) for email in emails),
            return_exceptions=True,
        )
        failures = [(email, r) for email, r in zip(emails, results) if isinstance(r, BaseException)]
        for email, error in failures:
            logger.error(
                "Error sending '%s' to %s for session %s: %s",
                email.subject, email.to, session.get("id"), error,
            )
        if failures:
            raise MailError() from failures[0][1]
