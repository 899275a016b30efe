"""
Construction pure d'une session Checkout (pas d'appel Stripe).
"""
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from autocheck.config import is_absolute_url
from autocheck.errors import InvalidURL, MissingFields
from autocheck.payments.models import CheckoutRequest

# module autocheck.payments.checkout
PRODUCT_NAME = "Vehicle Check Report"
CURRENCY = "usd"
# 2000 centimes = $20.00
UNIT_AMOUNT = 2000
SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"

REQUIRED_FIELDS = ("vehicle_identifier", "full_name", "email", "country")


def validate_request(payload: Any) -> CheckoutRequest:
    """
    Valide le body brut de la requête et retourne un CheckoutRequest.
    - vehicleIdentifier, fullName, email, country doivent être des chaînes non vides.
    - Un body qui n'est pas un objet JSON, ou des champs non-chaînes, comptent comme champs manquants.
    - Soulève MissingFields (400) sinon.
    """
    if not isinstance(payload, dict):
        raise MissingFields()
    try:
        req = CheckoutRequest.model_validate(payload)
    except ValidationError:
        raise MissingFields()
    if any(not getattr(req, name) for name in REQUIRED_FIELDS):
        raise MissingFields()
    return req


def build_redirect_urls(frontend_url: str) -> Tuple[str, str]:
    """
    Construit (success_url, cancel_url) à partir de l'origine du front.
    - success_url garde le placeholder {CHECKOUT_SESSION_ID}, remplacé par Stripe.
    - Les deux URLs sont vérifiées (placeholder substitué) avant tout appel Stripe.
    - Soulève InvalidURL (400) si l'une d'elles est mal formée.
    """
    base = (frontend_url or "").rstrip("/")
    success_url = f"{base}/?payment=success&session_id={SESSION_ID_PLACEHOLDER}"
    cancel_url = f"{base}/?payment=canceled"
    if not is_absolute_url(success_url.replace(SESSION_ID_PLACEHOLDER, "test")):
        raise InvalidURL()
    if not is_absolute_url(cancel_url):
        raise InvalidURL()
    return success_url, cancel_url


def to_line_items(vehicle_identifier: str) -> List[Dict[str, Any]]:
    """Une seule ligne: le rapport pour le véhicule demandé, quantité 1."""
    return [{
        "quantity": 1,
        "price_data": {
            "currency": CURRENCY,
            "unit_amount": UNIT_AMOUNT,
            "product_data": {
                "name": PRODUCT_NAME,
                "description": f"Vehicle Check for {vehicle_identifier}",
            },
        },
    }]


def make_metadata(req: CheckoutRequest) -> Dict[str, str]:
    """
    Sérialise la demande dans les métadonnées Stripe (map de chaînes).
    - phone/state optionnels: chaîne vide si absents.
    """
    return {
        "vehicleIdentifier": req.vehicle_identifier or "",
        "fullName": req.full_name or "",
        "phone": req.phone or "",
        "country": req.country or "",
        "state": req.state or "",
    }


def build_session_params(req: CheckoutRequest, success_url: str, cancel_url: str) -> Dict[str, Any]:
    return {
        "payment_method_types": ["card"],
        "line_items": to_line_items(req.vehicle_identifier),
        "mode": "payment",
        "success_url": success_url,
        "cancel_url": cancel_url,
        "customer_email": req.email,
        "metadata": make_metadata(req),
    }
