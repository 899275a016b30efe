"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
from typing import Any, Dict, Protocol

import stripe

from autocheck.config import Settings


class PaymentGateway(Protocol):
    def create_session(self, params: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def get_session(self, session_id: str) -> Dict[str, Any]:
        ...


# module autocheck.payments.stripe_client
class StripeGateway:
    """
    Client Stripe Checkout instancié au démarrage (pas de stripe.api_key global).
    - Retries réseau et timeout délégués au SDK (max_network_retries, RequestsClient(timeout)).
    - Les exceptions du SDK (stripe.StripeError...) remontent telles quelles au service.
    """

    def __init__(self, client: stripe.StripeClient):
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "StripeGateway":
        client = stripe.StripeClient(
            settings.stripe_secret_key,
            max_network_retries=settings.stripe_max_network_retries,
            http_client=stripe.RequestsClient(timeout=settings.stripe_timeout),
        )
        return cls(client)

    def create_session(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Crée une session Stripe Checkout.
        - params: line_items, mode, success_url, cancel_url, customer_email, metadata...
        Retour: dict session (ex: {"id": "cs_test_...", "url": "https://..."})
        """
        session = self._client.checkout.sessions.create(params=params)
        # StripeObject -> dict natif (metadata compris)
        return session.to_dict()

    def get_session(self, session_id: str) -> Dict[str, Any]:
        """
        Récupère une session Stripe Checkout par son identifiant.
        Retour: dict session incluant "id", "payment_status", "amount_total", "metadata", etc.
        """
        session = self._client.checkout.sessions.retrieve(session_id)
        return session.to_dict()
