"""
Parcours complet côté front: création de session -> redirection Stripe -> polling du statut.
"""
from fastapi.testclient import TestClient


def test_checkout_then_poll_until_paid(client: TestClient, gateway, mailer):
    # 1) Le front récupère la clé publique puis crée la session
    assert client.get("/api/config").json() == {"publishableKey": "pk_test_public"}
    resp = client.post(
        "/api/create-checkout-session",
        json={
            "vehicleIdentifier": "JH4KA8260MC000000",
            "fullName": "Ana Lima",
            "email": "ana@example.com",
            "country": "BR",
        },
        headers={"Origin": "https://clearautocheck.test"},
    )
    assert resp.status_code == 200
    session_id = resp.json()["id"]
    [params] = gateway.created

    # 2) Stripe a créé la session: elle reflète les paramètres envoyés
    session = {
        "id": session_id,
        "payment_status": "unpaid",
        "amount_total": params["line_items"][0]["price_data"]["unit_amount"],
        "customer_email": params["customer_email"],
        "metadata": params["metadata"],
    }
    gateway.session = session

    # 3) Poll avant paiement: aucun email
    resp = client.get("/api/checkout-session", params={"sessionId": session_id})
    assert resp.status_code == 200
    assert resp.json()["payment_status"] == "unpaid"
    assert mailer.sent == []

    # 4) Paiement confirmé: confirmation client + notification admin
    session["payment_status"] = "paid"
    resp = client.get("/api/checkout-session", params={"sessionId": session_id})
    assert resp.status_code == 200
    assert resp.json()["id"] == session_id
    assert sorted(e.to for e in mailer.sent) == ["ana@example.com", "info@clearautocheck.com"]

    admin = next(e for e in mailer.sent if e.to == "info@clearautocheck.com")
    assert "JH4KA8260MC000000" in admin.html
    assert "<strong>Phone</strong>: Not provided" in admin.html
    assert "<strong>State/Province</strong>: Not provided" in admin.html
    assert "$20.00 USD" in admin.html
    assert f"<strong>Session ID</strong>: {session_id}" in admin.html

    # 5) Un nouveau poll renvoie les deux emails (pas de suivi "déjà notifié")
    client.get("/api/checkout-session", params={"sessionId": session_id})
    assert len(mailer.sent) == 4
