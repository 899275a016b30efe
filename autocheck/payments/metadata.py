"""
Lecture des métadonnées d'une session Stripe Checkout (vehicleIdentifier, fullName, ...).
"""
from dataclasses import dataclass
from typing import Any, Dict

PAID = "paid"


@dataclass(frozen=True)
class OrderDetails:
    session_id: str
    vehicle_identifier: str
    full_name: str
    customer_email: str
    phone: str
    country: str
    state: str
    amount_total: int


# module autocheck.payments.metadata
def is_paid(session: Dict[str, Any]) -> bool:
    """Seul payment_status == "paid" déclenche les notifications (unpaid, expired... sont ignorés)."""
    return (session or {}).get("payment_status") == PAID


def extract_order_details(session: Dict[str, Any]) -> OrderDetails:
    """
    Construit OrderDetails depuis une session Stripe (lecture directe).
    - Attend session["metadata"] = {vehicleIdentifier, fullName, phone, country, state}
    - Tolérant: champs absents -> chaîne vide, amount_total absent -> 0.
    """
    session = session or {}
    meta = session.get("metadata") or {}
    return OrderDetails(
        session_id=str(session.get("id") or ""),
        vehicle_identifier=meta.get("vehicleIdentifier") or "",
        full_name=meta.get("fullName") or "",
        customer_email=session.get("customer_email") or "",
        phone=meta.get("phone") or "",
        country=meta.get("country") or "",
        state=meta.get("state") or "",
        amount_total=int(session.get("amount_total") or 0),
    )
