# autocheck.config
"""
Configuration centrale du backend.

- Lit les variables d'environnement (le .env est chargé par l'entrypoint via python-dotenv)
- Nettoie les valeurs (espaces, guillemets) et valide les clés obligatoires
- Construit un objet Settings immuable, injecté dans l'app (app.state.settings)
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
from urllib.parse import urlparse

from autocheck.errors import ConfigError

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

REQUIRED_VARS = ("STRIPE_SECRET_KEY", "STRIPE_PUBLISHABLE_KEY", "EMAIL_PASSWORD", "FRONTEND_URL")
# niveaux acceptés à la fois par logging et par uvicorn
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

DEFAULT_PORT = 3000
DEFAULT_MAIL_SERVER = "smtp.hostinger.com"
DEFAULT_MAIL_PORT = 587
DEFAULT_MAIL_USERNAME = "info@clearautocheck.com"
DEFAULT_MAIL_FROM_NAME = "Clear Auto Check"
DEFAULT_ADMIN_EMAIL = "info@clearautocheck.com"


def _clean_env(v: Optional[str]) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")


def is_absolute_url(value: str) -> bool:
    """
    Vrai si value est une URL absolue http(s) avec un hôte.
    - Utilisé pour FRONTEND_URL au démarrage et pour les URLs de redirection du checkout.
    """
    if not value or any(c.isspace() for c in value):
        return False
    try:
        parsed = urlparse(value)
        # .port lève ValueError si le port n'est pas numérique
        parsed.port
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str
    stripe_publishable_key: str
    email_password: str
    frontend_url: str
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "info"
    mail_server: str = DEFAULT_MAIL_SERVER
    mail_port: int = DEFAULT_MAIL_PORT
    mail_username: str = DEFAULT_MAIL_USERNAME
    mail_from_name: str = DEFAULT_MAIL_FROM_NAME
    admin_email: str = DEFAULT_ADMIN_EMAIL
    stripe_max_network_retries: int = 3
    stripe_timeout: int = 20


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = _clean_env(env.get(name))
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"Invalid {name} ({raw})")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Construit Settings depuis l'environnement.
    - STRIPE_SECRET_KEY, STRIPE_PUBLISHABLE_KEY, EMAIL_PASSWORD, FRONTEND_URL sont obligatoires.
    - FRONTEND_URL doit être une URL absolue (ex: https://clearautocheck.com).
    Lève ConfigError au premier problème rencontré (message prêt à être loggé).
    """
    env = os.environ if environ is None else environ

    values = {name: _clean_env(env.get(name)) for name in REQUIRED_VARS}
    for name in REQUIRED_VARS:
        if not values[name]:
            raise ConfigError(f"{name} is not set.")

    frontend_url = values["FRONTEND_URL"]
    if not is_absolute_url(frontend_url):
        raise ConfigError(f"Invalid FRONTEND_URL ({frontend_url})")

    log_level = (_clean_env(env.get("LOG_LEVEL")) or "info").lower()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Invalid LOG_LEVEL ({log_level})")

    return Settings(
        stripe_secret_key=values["STRIPE_SECRET_KEY"],
        stripe_publishable_key=values["STRIPE_PUBLISHABLE_KEY"],
        email_password=values["EMAIL_PASSWORD"],
        frontend_url=frontend_url.rstrip("/"),
        host=_clean_env(env.get("HOST")) or "0.0.0.0",
        port=_int_env(env, "PORT", DEFAULT_PORT),
        log_level=log_level,
        mail_server=_clean_env(env.get("MAIL_SERVER")) or DEFAULT_MAIL_SERVER,
        mail_port=_int_env(env, "MAIL_PORT", DEFAULT_MAIL_PORT),
        mail_username=_clean_env(env.get("MAIL_USERNAME")) or DEFAULT_MAIL_USERNAME,
        mail_from_name=_clean_env(env.get("MAIL_FROM_NAME")) or DEFAULT_MAIL_FROM_NAME,
        admin_email=_clean_env(env.get("ADMIN_EMAIL")) or DEFAULT_ADMIN_EMAIL,
        stripe_max_network_retries=_int_env(env, "STRIPE_MAX_NETWORK_RETRIES", 3),
        stripe_timeout=_int_env(env, "STRIPE_TIMEOUT", 20),
    )
