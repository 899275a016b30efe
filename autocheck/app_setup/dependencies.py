"""
Dépendances FastAPI: exposent les objets construits au démarrage (app.state) aux vues.
Les tests les remplacent via app.dependency_overrides.
"""
from fastapi import Request

from autocheck.config import Settings
from autocheck.notifications.service import PaymentNotifier
from autocheck.payments.stripe_client import PaymentGateway


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> PaymentGateway:
    return request.app.state.gateway


def get_notifier(request: Request) -> PaymentNotifier:
    return request.app.state.notifier
