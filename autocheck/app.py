# module autocheck.app
from typing import Optional

from fastapi import FastAPI

from autocheck.app_setup.exceptions import register_exception_handlers
from autocheck.app_setup.lifespan import lifespan
from autocheck.app_setup.middlewares import register_basic_middlewares, register_security_middleware
from autocheck.app_setup.routers import register_routers
from autocheck.config import Settings, load_settings
from autocheck.notifications.mailer import Mailer, SmtpMailer
from autocheck.notifications.service import PaymentNotifier
from autocheck.payments.stripe_client import PaymentGateway, StripeGateway


def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[PaymentGateway] = None,
    mailer: Optional[Mailer] = None,
) -> FastAPI:
    """
    Crée et configure l'instance FastAPI de l'application.
    Étapes et ordre:
      1) Settings (load_settings si non fourni; ConfigError si l'environnement est invalide).
      2) Clients externes: StripeGateway et SmtpMailer, sauf doubles injectés.
      3) register_basic_middlewares: CORS.
      4) register_security_middleware: en-têtes de sécurité + CSP.
      5) register_exception_handlers: erreurs applicatives -> {"error": ...}.
      6) register_routers: API payments + health.
    Retourne:
      - FastAPI: l'application prête à être servie (ASGI).
    """
    settings = settings or load_settings()
    gateway = gateway or StripeGateway.from_settings(settings)
    mailer = mailer or SmtpMailer.from_settings(settings)

    app = FastAPI(title="Clear Auto Check API", lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.notifier = PaymentNotifier.from_settings(settings, mailer)

    register_basic_middlewares(app)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
