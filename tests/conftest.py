import pytest
from typing import Any, Dict, Generator, List, Optional
from fastapi.testclient import TestClient

from autocheck.app import create_app
from autocheck.config import Settings

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeGateway:
    """Double de StripeGateway: enregistre les appels, renvoie des sessions prédéfinies."""

    def __init__(self, session_id: str = "cs_test_123"):
        self.session_id = session_id
        self.created: List[Dict[str, Any]] = []
        self.retrieved: List[str] = []
        self.session: Dict[str, Any] = {}
        self.error: Optional[Exception] = None

    def create_session(self, params: Dict[str, Any]) -> Dict[str, Any]:
        self.created.append(params)
        if self.error:
            raise self.error
        return {"id": self.session_id, "url": f"https://checkout.stripe.test/{self.session_id}"}

    def get_session(self, session_id: str) -> Dict[str, Any]:
        self.retrieved.append(session_id)
        if self.error:
            raise self.error
        return self.session


class FakeMailer:
    """Double de SmtpMailer: enregistre chaque envoi; fail_to fait échouer un destinataire."""

    def __init__(self):
        self.sent = []
        self.fail_to: Optional[str] = None

    async def send(self, email) -> None:
        if self.fail_to and email.to == self.fail_to:
            raise ConnectionError("SMTP relay refused the message")
        self.sent.append(email)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        stripe_secret_key="sk_test_secret",
        stripe_publishable_key="pk_test_public",
        email_password="mail-password",
        frontend_url="https://clearautocheck.test",
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def paid_session() -> Dict[str, Any]:
    return {
        "id": "cs_test_paid",
        "object": "checkout.session",
        "payment_status": "paid",
        "status": "complete",
        "amount_total": 2000,
        "currency": "usd",
        "customer_email": "jane@example.com",
        "metadata": {
            "vehicleIdentifier": "1HGCM82633A004352",
            "fullName": "Jane Doe",
            "phone": "",
            "country": "US",
            "state": "CA",
        },
    }


@pytest.fixture
def app(settings, gateway, mailer):
    return create_app(settings, gateway=gateway, mailer=mailer)


@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
