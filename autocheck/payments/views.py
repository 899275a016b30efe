import logging

from fastapi import APIRouter, Depends, Query, Request

from autocheck.app_setup.dependencies import get_gateway, get_notifier, get_settings
from autocheck.config import Settings
from autocheck.notifications.service import PaymentNotifier
from autocheck.payments import service as payments_service
from autocheck.payments.models import CheckoutSessionCreated, PublicConfig
from autocheck.payments.stripe_client import PaymentGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Payments API"])


# module autocheck.payments.views
@router.get("/config", response_model=PublicConfig)
def get_public_config(settings: Settings = Depends(get_settings)):
    """Clé publique Stripe pour le front (jamais la clé secrète)."""
    return PublicConfig(publishableKey=settings.stripe_publishable_key)


@router.post("/create-checkout-session", response_model=CheckoutSessionCreated)
async def create_checkout_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    gateway: PaymentGateway = Depends(get_gateway),
):
    """
    Crée une session Checkout Stripe pour un rapport véhicule.
    - Entrée JSON: {vehicleIdentifier, fullName, email, phone?, country, state?}
    - Erreurs: 400 champs manquants / URL invalide, 500 si Stripe échoue
    """
    try:
        body = await request.json()
    except ValueError:
        body = None
    logger.debug("Received checkout request: %s Origin: %s", body, request.headers.get("origin"))
    return await payments_service.create_checkout_session(gateway, body, settings.frontend_url)


@router.get("/checkout-session")
async def get_checkout_session(
    session_id: str | None = Query(default=None, alias="sessionId"),
    gateway: PaymentGateway = Depends(get_gateway),
    notifier: PaymentNotifier = Depends(get_notifier),
):
    """
    Statut d'une session Checkout (polling du front après redirection).
    - Si payment_status == "paid": envoie confirmation client + notification admin avant de répondre.
    - Retourne la session Stripe complète.
    - Erreurs: 400 sessionId manquant, 500 si Stripe ou l'envoi d'email échoue
    """
    return await payments_service.check_session_status(gateway, notifier, session_id)
