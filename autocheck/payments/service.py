"""
Cas d'usage 'payments': orchestre checkout, stripe_client et notifications.
"""
import logging
from typing import Any, Dict

from starlette.concurrency import run_in_threadpool

from autocheck.errors import GatewayError, MissingSessionId
from autocheck.notifications.service import PaymentNotifier
from autocheck.payments import checkout
from autocheck.payments.metadata import is_paid
from autocheck.payments.stripe_client import PaymentGateway

logger = logging.getLogger(__name__)

CREATE_FAILED = "Failed to create checkout session"
RETRIEVE_FAILED = "Failed to retrieve checkout session"


async def create_checkout_session(gateway: PaymentGateway, payload: Any, frontend_url: str) -> Dict[str, Any]:
    """
    Prépare et crée la session Stripe pour une demande de rapport véhicule.
    Étapes:
      1) Valider la demande (MissingFields)
      2) Construire et vérifier les URLs de redirection (InvalidURL)
      3) Créer la session Stripe; toute erreur SDK devient GatewayError (message générique)
    Retour: {"id": "<session id>"}
    """
    req = checkout.validate_request(payload)
    success_url, cancel_url = checkout.build_redirect_urls(frontend_url)
    params = checkout.build_session_params(req, success_url, cancel_url)
    try:
        session = await run_in_threadpool(gateway.create_session, params)
    except Exception as e:
        logger.error("Error creating checkout session: %s", e)
        raise GatewayError(CREATE_FAILED) from e
    return {"id": session.get("id")}


async def check_session_status(
    gateway: PaymentGateway,
    notifier: PaymentNotifier,
    session_id: str | None,
) -> Dict[str, Any]:
    """
    Récupère la session Stripe et, si elle est payée, envoie les emails avant de répondre.
    - Lecture à effet de bord: chaque appel sur une session payée renvoie les emails.
    - MailError si un envoi échoue: la session n'est pas retournée.
    Retour: la session Stripe telle quelle.
    """
    if not session_id:
        raise MissingSessionId()
    try:
        session = await run_in_threadpool(gateway.get_session, session_id)
    except Exception as e:
        logger.error("Error retrieving checkout session: %s", e)
        raise GatewayError(RETRIEVE_FAILED) from e

    if is_paid(session):
        await notifier.notify_order_paid(session)
    return session
