"""
Schémas pydantic de la feature 'payments' (entrées/sorties JSON en camelCase).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CheckoutRequest(BaseModel):
    """
    Corps de POST /api/create-checkout-session.
    Tous les champs sont optionnels au niveau du schéma: la présence des champs
    obligatoires est vérifiée par checkout.validate_request (400 MissingFields, pas 422).
    """
    model_config = ConfigDict(populate_by_name=True)

    vehicle_identifier: Optional[str] = Field(default=None, alias="vehicleIdentifier")
    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None


class CheckoutSessionCreated(BaseModel):
    id: str


class PublicConfig(BaseModel):
    publishableKey: str
