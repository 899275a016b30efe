from unittest.mock import MagicMock

import stripe

from autocheck.payments import stripe_client
from autocheck.payments.stripe_client import StripeGateway


def test_from_settings_configures_retries_and_timeout(monkeypatch, settings):
    fake_client_cls = MagicMock()
    fake_http_cls = MagicMock(return_value="http-client")
    monkeypatch.setattr(stripe_client.stripe, "StripeClient", fake_client_cls)
    monkeypatch.setattr(stripe_client.stripe, "RequestsClient", fake_http_cls)

    gateway = StripeGateway.from_settings(settings)

    fake_http_cls.assert_called_once_with(timeout=20)
    fake_client_cls.assert_called_once_with(
        "sk_test_secret",
        max_network_retries=3,
        http_client="http-client",
    )
    assert isinstance(gateway, StripeGateway)


def test_create_session_returns_dict():
    client = MagicMock()
    client.checkout.sessions.create.return_value = {"id": "cs_test_1", "url": "https://checkout.stripe.com/c/cs_test_1"}
    gateway = StripeGateway(client)

    session = gateway.create_session({"mode": "payment"})

    client.checkout.sessions.create.assert_called_once_with(params={"mode": "payment"})
    assert session == {"id": "cs_test_1", "url": "https://checkout.stripe.com/c/cs_test_1"}


def test_get_session_returns_dict():
    client = MagicMock()
    client.checkout.sessions.retrieve.return_value = {"id": "cs_test_1", "payment_status": "paid"}
    gateway = StripeGateway(client)

    session = gateway.get_session("cs_test_1")

    client.checkout.sessions.retrieve.assert_called_once_with("cs_test_1")
    assert session["payment_status"] == "paid"


def _sdk_session(**values):
    return stripe.checkout.Session.construct_from(values, "sk_test_secret")


def test_create_session_converts_sdk_object_to_plain_dict():
    client = MagicMock()
    client.checkout.sessions.create.return_value = _sdk_session(
        id="cs_test_1",
        url="https://checkout.stripe.com/c/cs_test_1",
        metadata={"vehicleIdentifier": "1HGCM82633A004352"},
    )
    gateway = StripeGateway(client)

    session = gateway.create_session({"mode": "payment"})

    assert type(session) is dict
    assert session["id"] == "cs_test_1"
    assert type(session["metadata"]) is dict


def test_get_session_converts_nested_metadata(paid_session):
    client = MagicMock()
    client.checkout.sessions.retrieve.return_value = _sdk_session(**paid_session)
    gateway = StripeGateway(client)

    session = gateway.get_session("cs_test_paid")

    assert type(session) is dict
    assert type(session["metadata"]) is dict
    assert session["metadata"]["fullName"] == "Jane Doe"
    assert session["metadata"].get("state") == "CA"
    assert session["payment_status"] == "paid"
    assert session["amount_total"] == 2000
